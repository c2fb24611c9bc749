"""
Outgoing mail.

No transport is configured yet, so the outbox writes every message to the log
and keeps it in memory for inspection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from stay_with_friends.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutgoingMessage:
    to: str
    subject: str
    body: str


@dataclass
class MailOutbox:
    """Collects outgoing messages and logs them."""

    sent: List[OutgoingMessage] = field(default_factory=list)

    def send(self, to: str, subject: str, body: str) -> OutgoingMessage:
        message = OutgoingMessage(to=to, subject=subject, body=body)
        self.sent.append(message)
        logger.info(f"Mail to {to}: {subject}")
        logger.debug(message.body)
        return message


outbox = MailOutbox()


def invitation_email_body(invitation_url: str) -> str:
    return (
        "You have been invited to join Stay With Friends, a network for staying with people you trust.\n\n"
        f"Accept the invitation here: {invitation_url}\n"
    )
