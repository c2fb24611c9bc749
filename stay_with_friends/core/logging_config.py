"""
Logging setup for the Stay With Friends backend.

Log records go to stderr and, when ``ENABLE_FILE_LOGGING`` is on, to
``<LOG_FILE_DIR>/stay_with_friends.log``. The root logger passes everything
through and each handler filters by its own level. Chatty libraries are pinned
through ``MODULE_LOG_LEVELS``.
"""

import logging
from pathlib import Path
from typing import Optional


def _get_logging_config():
    # Deferred so that ``core`` imports without pulling in the server package.
    from stay_with_friends.server.core.config import settings

    return {
        "log_level": settings.logging.level.upper(),
        "log_format": settings.logging.format,
        "log_file_dir": settings.logging.file_dir,
        "enable_file_logging": settings.logging.enable_file,
    }


_config = _get_logging_config()
LOG_LEVEL = _config["log_level"]
LOG_FORMAT = _config["log_format"]
LOG_FILE_DIR = _config["log_file_dir"]
ENABLE_FILE_LOGGING = _config["enable_file_logging"]
LOG_FILE_NAME = "stay_with_friends.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

# One JSON object per line for log shippers. Messages are not escaped.
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

MODULE_LOG_LEVELS = {
    "stay_with_friends": "INFO",
    "stay_with_friends.server.api": "DEBUG",
    "stay_with_friends.server.services": "DEBUG",
    "stay_with_friends.core.database": "INFO",
    "stay_with_friends.codegen": "INFO",
    # third-party
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "multipart": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def _handler(handler: logging.Handler, level, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    (Re)configure the root logger.

    Safe to call repeatedly: existing root handlers are replaced, not stacked.

    Args:
        log_level: Console level, defaults to ``SWF_LOG_LEVEL``
        log_format: ``simple``, ``detailed`` or ``json``; unknown names use ``detailed``
        enable_file: Allow the file handler when ``ENABLE_FILE_LOGGING`` is set
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT
    formatter = logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    root.addHandler(_handler(logging.StreamHandler(), level, formatter))

    file_logging = enable_file and ENABLE_FILE_LOGGING
    if file_logging:
        log_dir = Path(LOG_FILE_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        root.addHandler(_handler(logging.FileHandler(log_dir / LOG_FILE_NAME), logging.DEBUG, formatter))

    for name, name_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(name_level)

    root.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


setup_logging()
