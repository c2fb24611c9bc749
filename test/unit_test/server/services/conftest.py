from typing import Callable

import pytest

from stay_with_friends.core.database.entities import User
from stay_with_friends.server.services.base import Identity


@pytest.fixture
def identity_of() -> Callable[[User], Identity]:
    """Build the identity a signed-in user would carry."""

    def _identity(user: User) -> Identity:
        return Identity(user_id=user.id, email=user.email, name=user.name)

    return _identity
