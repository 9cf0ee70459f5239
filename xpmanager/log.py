"""Console logger with elapsed-time reporting."""

from __future__ import annotations

import os
import sys
import time
from typing import NoReturn, TextIO

from .errors import ExitCode, XpmError

_COLORS = {"red": "31", "green": "32", "yellow": "33", "blue": "34"}


def _paint(text: str, color: str, stream: TextIO) -> str:
    isatty = getattr(stream, "isatty", None)
    if os.environ.get("NO_COLOR") or not (isatty and isatty()):
        return text
    return f"\x1b[{_COLORS[color]}m{text}\x1b[0m"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class Logger:
    """Named logger that reports how long an operation has been running."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.start_time_ms = _now_ms()

    def start(self) -> None:
        """Reset the timer."""
        self.start_time_ms = _now_ms()

    def end(self) -> str:
        """Milliseconds since the timer started, as ``"<n>ms"``."""
        return f"{_now_ms() - self.start_time_ms}ms"

    def info(self, message: str) -> None:
        out = sys.stdout
        print(
            f"[{_paint('INFO', 'green', out)}] - [{_paint(self.name, 'green', out)}] "
            f"{message} - {_paint(self.end(), 'green', out)}",
            file=out,
        )

    def error(self, message: str, code: ExitCode | int) -> NoReturn:
        """Report the error on stderr and raise it as :class:`XpmError`."""
        err = sys.stderr
        print(
            f"[{_paint('ERROR', 'red', err)}] - [{_paint(self.name, 'red', err)}] "
            f"{_paint(message, 'red', err)}",
            file=err,
        )
        raise XpmError(message, code)

    def warning(self, message: str) -> None:
        out = sys.stdout
        print(
            f"[{_paint('WARNING', 'yellow', out)}] - {_paint(message, 'yellow', out)}",
            file=out,
        )