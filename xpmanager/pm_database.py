"""Encryption and decryption of the password manager database file."""

from __future__ import annotations

from pathlib import Path

from .crypto import decrypt_file, encrypt_file, generate_key
from .display import display_key
from .errors import ExitCode
from .files import FileState, PathLike, wipe_delete
from .log import Logger
from .paths import db_state, decrypted_db_path, encrypted_db_path
from .utilities import confirm, prompt


class PMDatabaseEncryption:
    """Moves the password database between its encrypted and plain files.

    Paths default to the locations in the user's data directory.
    """

    def __init__(
        self, en_path: PathLike | None = None, de_path: PathLike | None = None
    ) -> None:
        self.en_path = Path(en_path) if en_path is not None else encrypted_db_path()
        self.de_path = Path(de_path) if de_path is not None else decrypted_db_path()
        self.key = ""

    def set_key(self, key: str | None) -> None:
        """Use ``key``, or ask the user for one when it is ``None``."""
        self.key = prompt("Enter the key: ") if key is None else key

    def decrypt(self) -> None:
        """Decrypt the database and wipe the encrypted file.

        Asks for the key unless one has been set.
        """
        if not self.key:
            self.set_key(None)
        decrypt_file(self.en_path, self.key)
        wipe_delete(self.en_path)

    def encrypt(self) -> None:
        """Encrypt the database with the current key and wipe the plain file."""
        self.key = encrypt_file(self.de_path, self.key)
        wipe_delete(self.de_path)


def encrypt_database(use_custom_key: bool = False) -> str:
    """Encrypt the plain password database and return the key used.

    With ``use_custom_key`` the key is read from the user; otherwise a new
    key is generated and shown.
    """
    logger = Logger("encrypt-pm-database")
    state = db_state()
    if state is FileState.NOT_FOUND:
        logger.error(
            "no database, try to save some passwords and then encrypt it!",
            ExitCode.PM_DATABASE_NOT_FOUND,
        )
    if state is FileState.ENCRYPTED:
        logger.error("database is already encrypted!", ExitCode.FILE_ALREADY_ENCRYPTED)
    database = PMDatabaseEncryption()
    if use_custom_key:
        database.set_key(None)
        logger.start()
    else:
        key = generate_key()
        database.set_key(key)
        display_key(key)
    database.encrypt()
    logger.info("database encrypted successfully.")
    return database.key


def decrypt_database() -> None:
    """After confirmation, decrypt the password database with a key read from the user."""
    logger = Logger("decrypt-pm-database")
    state = db_state()
    if state is FileState.NOT_FOUND:
        logger.error(
            "no database, try to save some passwords!", ExitCode.PM_DATABASE_NOT_FOUND
        )
    if state is FileState.DECRYPTED:
        logger.error("database not encrypted!", ExitCode.FILE_NOT_ENCRYPTED)
    logger.warning("your passwords will be at risk if you decrypt the database!!")
    confirm()
    logger.start()
    PMDatabaseEncryption().decrypt()
    logger.start()
    logger.warning("after you complete your work please encrypt your database!!")
    logger.info("password manager database decrypted successfully.")