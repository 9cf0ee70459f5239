"""Locations of the password and log databases in the user's data directory."""

from __future__ import annotations

from pathlib import Path

import platformdirs

from .errors import ExitCode
from .files import XPM_EXTENSION, FileState
from .log import Logger

_APP_DATA = Path("XPManager") / "data"


def data_dir() -> Path:
    """The system's per-user data directory (e.g. ``~/.local/share`` on Linux)."""
    logger = Logger("get-data-dir")
    try:
        base = platformdirs.user_data_path(roaming=True)
    except (OSError, RuntimeError, KeyError):
        logger.error(
            "can NOT get the system data directory path!",
            ExitCode.SYSTEM_DATA_DIR_NOT_FOUND,
        )
    if not str(base):
        logger.error(
            "can NOT get the system data directory path!",
            ExitCode.SYSTEM_DATA_DIR_NOT_FOUND,
        )
    return Path(base)


def log_db_path() -> Path:
    """Path of the log manager database."""
    return data_dir() / _APP_DATA / "xpm-log.db"


def encrypted_db_path() -> Path:
    """Path of the encrypted password manager database."""
    return data_dir() / _APP_DATA / f"passwords.db.{XPM_EXTENSION}"


def decrypted_db_path() -> Path:
    """Path of the plain password manager database."""
    return data_dir() / _APP_DATA / "passwords.db"


def db_state() -> FileState:
    """Whether the password database exists, and if so whether it is encrypted."""
    if encrypted_db_path().exists():
        return FileState.ENCRYPTED
    if decrypted_db_path().exists():
        return FileState.DECRYPTED
    return FileState.NOT_FOUND


def warning_encrypt_database() -> None:
    """Warn when the password database is stored unencrypted."""
    logger = Logger("check-password-manager-database")
    if db_state() is FileState.DECRYPTED:
        logger.warning("password manager database found NOT encrypted!!")
        logger.warning("please use 'password-manager encrypt' to encrypt it!")