"""Password samples, console prompts and work distribution helpers."""

from __future__ import annotations

import math
import os
import secrets
import string
import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, TypeVar

from .errors import ExitCode
from .log import Logger

_T = TypeVar("_T", str, Path)

_SYMBOLS = [
    "!", "@", "#", "$", "%", "^", "&", "(", ")", "-", "+", "=", "~",
    "[", "]", "{", "}", "/", "|", ":", ";", "?", ",", ".", "<", ">",
]


class PasswordSample(Enum):
    """Character sets passwords are drawn from."""

    ASCII = "ascii"
    NO_SYMBOLS = "no-symbols"
    HEX = "hex"


def get_sample(sample: PasswordSample) -> list[str]:
    """Characters making up the given sample, in a fixed order."""
    letters_digits = list(string.ascii_lowercase + string.ascii_uppercase + string.digits)
    if sample is PasswordSample.ASCII:
        return letters_digits + _SYMBOLS
    if sample is PasswordSample.NO_SYMBOLS:
        return letters_digits
    return list(string.digits + "ABCDEF")


def get_ran_string_number() -> str:
    """A random number between 32 and 72 inclusive, as a string."""
    return str(secrets.choice(range(32, 73)))


def prompt(message: str) -> str:
    """Show ``message`` and read one line from stdin, stripped of whitespace."""
    sys.stdout.write(message)
    sys.stdout.flush()
    return sys.stdin.readline().strip()


def confirm() -> None:
    """Ask the user to type a random 6-digit code; raise if it does not match."""
    logger = Logger("confirm")
    logger.warning("This process requires confirmation!")
    code = "".join(secrets.choice("123456789") for _ in range(6))
    green = f"\x1b[32m{code}\x1b[0m" if sys.stdout.isatty() and not os.environ.get("NO_COLOR") else code
    value = prompt(f"Please enter {green} to continue: ")
    logger.start()
    if value != code:
        logger.error(
            "This process stopped, confirmation error",
            ExitCode.CONFIRMATION_NOT_MATCH,
        )
    logger.info("confirmation completed successfully.")


def distribute_paths(files_paths: Iterable[_T]) -> list[list[_T]]:
    """Split paths into at most one consecutive chunk per CPU."""
    paths = list(files_paths)
    threads = max(os.cpu_count() or 1, 1)
    if len(paths) <= threads:
        return [[p] for p in paths]
    per_thread = math.ceil(len(paths) / threads)
    return [paths[i:i + per_thread] for i in range(0, len(paths), per_thread)]