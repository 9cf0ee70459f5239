"""File helpers: creation, secure wiping, encryption paths, directory listing, JSON."""

from __future__ import annotations

import json
import os
import shutil
from enum import Enum
from pathlib import Path
from typing import Union

from .errors import ExitCode
from .log import Logger

PathLike = Union[str, "os.PathLike[str]"]

XPM_EXTENSION = "x"
"""Extension added to encrypted files, as in ``file.txt.x``."""

_CHUNK_SIZE = 64 * 1024


class FileState(Enum):
    """Whether a file is encrypted, plain, or missing."""

    ENCRYPTED = "encrypted"
    DECRYPTED = "decrypted"
    NOT_FOUND = "not-found"


class WipeType(Enum):
    """The data a wiping pass writes over a file."""

    B_ZERO = "zero"
    B_ONE = "one"
    RANDOM = "random"


def create_file(path: PathLike) -> None:
    """Create an empty file and its parent directories, unless it already exists."""
    logger = Logger("create-file")
    target = Path(path)
    if target.exists():
        logger.info(f"file found at '{target}'")
        return
    parent = target.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.error(
                f"can NOT create the directory at '{parent}'!", ExitCode.DIR_CREATE
            )
    try:
        target.touch()
    except OSError:
        logger.error(f"can NOT create the file at '{target}'!", ExitCode.FILE_CREATE)
    logger.info(f"create file at '{target}'")


def delete_file(path: PathLike) -> None:
    """Remove the file if it exists."""
    logger = Logger("delete-file")
    target = Path(path)
    if not target.exists():
        return
    try:
        target.unlink()
    except OSError:
        logger.error(f"can NOT delete the file at '{target}'!", ExitCode.FILE_DELETE)


def _wipe_chunk(wipe_type: WipeType, size: int) -> bytes:
    if wipe_type is WipeType.RANDOM:
        return os.urandom(size)
    if wipe_type is WipeType.B_ONE:
        return b"\x01" * size
    return b"\x00" * size


def wipe_file(path: PathLike, wipe_type: WipeType) -> None:
    """Overwrite the whole content of a file in place with the given pattern.

    Random passes use one random chunk repeated over the file.
    """
    logger = Logger("wipe-file")
    target = Path(path)
    if not target.is_file():
        logger.error("file NOT found!", ExitCode.FILE_NOT_FOUND)
    try:
        handle = open(target, "r+b")
    except OSError:
        logger.error("can NOT write to the file!", ExitCode.FILE_WRITE)
    with handle:
        length = os.fstat(handle.fileno()).st_size
        if length == 0:
            return
        chunk = _wipe_chunk(wipe_type, min(_CHUNK_SIZE, length))
        for pos in range(0, length, len(chunk)):
            try:
                handle.seek(pos)
            except OSError:
                logger.error("can NOT seek the file!", ExitCode.FILE_SEEK)
            try:
                handle.write(chunk[: length - pos])
            except OSError:
                logger.error("can NOT write to the file!", ExitCode.FILE_WRITE)
        try:
            handle.flush()
            os.fsync(handle.fileno())
        except OSError:
            logger.error("can NOT flush the file to the disk!", ExitCode.FILE_FLUSH)


def wipe_delete(path: PathLike) -> None:
    """Wipe a file with ones, random data twice and zeros, then delete it."""
    for wipe_type in (WipeType.B_ONE, WipeType.RANDOM, WipeType.RANDOM, WipeType.B_ZERO):
        wipe_file(path, wipe_type)
    delete_file(path)


def get_file_state(path: PathLike) -> FileState:
    """Classify a path by existence and by the encryption extension."""
    target = Path(path)
    if not target.is_file():
        return FileState.NOT_FOUND
    if target.suffix == f".{XPM_EXTENSION}":
        return FileState.ENCRYPTED
    return FileState.DECRYPTED


def make_encrypt_path(path: PathLike) -> str:
    """Path of the encrypted counterpart: the path with ``.x`` appended."""
    return f"{os.fspath(path)}.{XPM_EXTENSION}"


def make_decrypt_path(path: PathLike) -> str:
    """Path with its last dot-separated part removed."""
    head, _, _ = os.fspath(path).rpartition(".")
    return head


def dir_files_tree(folder_path: PathLike) -> list[Path]:
    """All regular files below a directory, recursively."""
    logger = Logger("dir-files-tree")
    folder = Path(folder_path)
    if not folder.exists():
        logger.error("can NOT find the directory!", ExitCode.DIR_NOT_FOUND)
    files: list[Path] = []
    try:
        entries = list(os.scandir(folder))
    except OSError:
        logger.error("can NOT get the folder data!", ExitCode.CAN_NOT_GET_DIR_DATA)
    for entry in entries:
        entry_path = folder / entry.name
        try:
            is_file = entry.is_file(follow_symlinks=False)
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            logger.error(
                "can NOT get the file/folder type!",
                ExitCode.CAN_NOT_GET_FILE_OR_DIR_TYPE,
            )
        if is_file:
            files.append(entry_path)
        elif is_dir:
            files.extend(dir_files_tree(entry_path))
        else:
            logger.error(
                f"unsupported directory at '{entry_path}'!", ExitCode.DIR_UNSUPPORTED
            )
    return files


def copy(file: PathLike, to_file: PathLike) -> None:
    """Copy a regular file's content to another path."""
    logger = Logger("copy-file")
    source = Path(file)
    if not source.is_file():
        logger.error("file NOT found!", ExitCode.FILE_NOT_FOUND)
    try:
        destination = open(to_file, "wb")
    except OSError:
        logger.error("directory NOT found!", ExitCode.DIR_NOT_FOUND)
    with open(source, "rb") as reader, destination:
        shutil.copyfileobj(reader, destination, _CHUNK_SIZE)


def read_json(file: PathLike) -> dict[str, str]:
    """Read a JSON file holding one object whose values are all strings."""
    logger = Logger("read-json")
    try:
        contents = Path(file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        contents = ""
    try:
        data = json.loads(contents)
    except ValueError:
        data = None
    if not isinstance(data, dict):
        logger.error("can not get the json data!", ExitCode.CAN_NOT_GET_JSON_OBJECT)
    if not all(isinstance(value, str) for value in data.values()):
        logger.error("invalid json file!", ExitCode.INVALID_JSON)
    return dict(data)