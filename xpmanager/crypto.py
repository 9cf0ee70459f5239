"""Fernet file encryption in length-prefixed blocks, and the legacy v1 format."""

from __future__ import annotations

from pathlib import Path

from cryptography.fernet import Fernet, InvalidToken

from .errors import ExitCode
from .files import PathLike, make_decrypt_path, make_encrypt_path
from .log import Logger

_BLOCK_SIZE = 64 * 1024
_LENGTH_BYTES = 4


def generate_key() -> str:
    """A fresh url-safe base64 Fernet key."""
    return Fernet.generate_key().decode("ascii")


def _fernet(key: str, logger: Logger) -> Fernet:
    try:
        return Fernet(key)
    except (ValueError, TypeError):
        logger.error("key error!", ExitCode.INVALID_KEY)


def encrypt_file(path: PathLike, key: str) -> str:
    """Encrypt ``path`` into ``path.x`` and return the key used.

    An empty key means a new one is generated. Each 64 KiB block of the
    source is stored as a 4-byte big-endian length followed by its ciphertext.
    """
    logger = Logger("encrypt-file")
    if not key:
        key = generate_key()
    fernet = _fernet(key, logger)
    try:
        source = open(path, "rb")
    except OSError:
        logger.error("can NOT open the file!", ExitCode.FILE_OPEN)
    with source:
        try:
            target = open(make_encrypt_path(path), "wb")
        except OSError:
            logger.error("can NOT open the file!", ExitCode.FILE_OPEN)
        with target:
            while block := source.read(_BLOCK_SIZE):
                ciphertext = fernet.encrypt(block)
                target.write(len(ciphertext).to_bytes(_LENGTH_BYTES, "big"))
                target.write(ciphertext)
    return key


def decrypt_file(path: PathLike, key: str) -> None:
    """Decrypt a block-encrypted ``path`` into the path without its extension."""
    logger = Logger("decrypt-file")
    fernet = _fernet(key, logger)
    try:
        source = open(path, "rb")
    except OSError:
        logger.error("can NOT open the file!", ExitCode.FILE_OPEN)
    with source:
        try:
            target = open(make_decrypt_path(path), "wb")
        except OSError:
            logger.error("can NOT open the file!", ExitCode.FILE_OPEN)
        with target:
            while len(header := source.read(_LENGTH_BYTES)) == _LENGTH_BYTES:
                size = int.from_bytes(header, "big")
                ciphertext = source.read(size)
                if len(ciphertext) != size:
                    logger.error(
                        "it's look likes your encryption data is a broken!",
                        ExitCode.INVALID_ENCRYPTION_DATA,
                    )
                try:
                    target.write(fernet.decrypt(ciphertext))
                except InvalidToken:
                    logger.error(
                        "it's look likes your encryption data is a broken!",
                        ExitCode.INVALID_ENCRYPTION_DATA,
                    )


def decrypt_xpmv1_file(path: PathLike, key: str) -> None:
    """Decrypt a legacy v1 file, which holds one Fernet message for the whole content."""
    logger = Logger("xpmv1-decryption")
    source = Path(path)
    try:
        handle = open(source, "rb")
    except OSError:
        logger.error("can NOT open the file!", ExitCode.FILE_OPEN)
    with handle:
        try:
            target = open(make_decrypt_path(path), "wb")
        except OSError:
            logger.error("can NOT open the file!", ExitCode.FILE_OPEN)
        with target:
            fernet = _fernet(key, logger)
            try:
                content = handle.read().decode("utf-8")
            except (OSError, UnicodeDecodeError):
                logger.error("can NOT read the file!", ExitCode.FILE_READ)
            try:
                data = fernet.decrypt(content)
            except InvalidToken:
                logger.error(
                    "it's look likes your encryption data is a broken!",
                    ExitCode.INVALID_ENCRYPTION_DATA,
                )
            target.write(data)