"""Encrypt or decrypt every file below a directory, optionally across threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from .crypto import decrypt_file, decrypt_xpmv1_file, encrypt_file, generate_key
from .errors import ExitCode
from .files import FileState, PathLike, dir_files_tree, get_file_state, wipe_delete
from .log import Logger
from .utilities import distribute_paths

_Worker = Callable[[list[Path]], list[Path]]


def _run(worker: _Worker, files: list[Path], threads: bool) -> list[Path]:
    """Run ``worker`` on all files, in one thread or over one chunk per CPU."""
    if not threads:
        return worker(files)
    chunks = distribute_paths(files)
    if not chunks:
        return []
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        results = list(pool.map(worker, chunks))
    return [path for chunk in results for path in chunk]


def encrypt_files(paths: Iterable[PathLike], key: str, delete: bool = False) -> list[Path]:
    """Encrypt each file that is not already encrypted; return the files encrypted.

    With ``delete`` the original of each encrypted file is wiped and removed.
    """
    logger = Logger("encrypt-dir-thread")
    if not key:
        logger.error("key error!", ExitCode.INVALID_KEY)
    encrypted: list[Path] = []
    for file in map(Path, paths):
        logger.start()
        if get_file_state(file) is FileState.ENCRYPTED:
            logger.warning(f"file already encrypted '{file}'?")
            continue
        encrypt_file(file, key)
        if delete:
            wipe_delete(file)
            logger.info(f"wiped '{file}'.")
        logger.info(f"encrypted '{file}'.")
        encrypted.append(file)
    return encrypted


def decrypt_files(
    paths: Iterable[PathLike], key: str, delete: bool = False, xpmv1: bool = False
) -> list[Path]:
    """Decrypt each file that is not plain; return the encrypted files handled.

    ``xpmv1`` selects the legacy single-token format. With ``delete`` each
    encrypted file is wiped and removed after decryption.
    """
    logger = Logger("decrypt-dir-thread")
    decrypted: list[Path] = []
    for file in map(Path, paths):
        logger.start()
        if get_file_state(file) is FileState.DECRYPTED:
            logger.warning(f"file not encrypted '{file}'?")
            continue
        if xpmv1:
            decrypt_xpmv1_file(file, key)
        else:
            decrypt_file(file, key)
        logger.info(f"decrypted '{file}'.")
        if delete:
            wipe_delete(file)
            logger.info("file was wiped successfully.")
        decrypted.append(file)
    return decrypted


def encrypt_dir(
    path: PathLike, key: str = "", delete: bool = False, threads: bool = True
) -> str:
    """Encrypt every file below ``path`` with one key and return that key.

    An empty key means a new one is generated.
    """
    logger = Logger("encrypt-dir")
    if not key:
        key = generate_key()
    files = dir_files_tree(path)
    logger.info("directory listed successfully.")
    if threads:
        logger.info("start the encryption with the max number of threads.")
    else:
        logger.info("start the encryption using the main thread.")
    _run(lambda chunk: encrypt_files(chunk, key, delete), files, threads)
    logger.info("directory encrypted successfully.")
    return key


def decrypt_dir(
    path: PathLike,
    key: str,
    delete: bool = False,
    xpmv1: bool = False,
    threads: bool = True,
) -> list[Path]:
    """Decrypt every encrypted file below ``path``; return the files handled."""
    logger = Logger("decrypt-dir")
    files = dir_files_tree(path)
    logger.info("directory listed successfully.")
    if threads:
        logger.info("start the decryption with the max number of threads.")
    else:
        logger.info("start the decryption using the main thread.")
    decrypted = _run(
        lambda chunk: decrypt_files(chunk, key, delete, xpmv1), files, threads
    )
    logger.info("directory decrypted successfully.")
    return decrypted