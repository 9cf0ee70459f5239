"""Console output of keys and encoded or decoded strings."""

from __future__ import annotations

import os
import sys

_COLORS = {"green": "32", "blue": "34"}


def _paint(text: str, color: str) -> str:
    if os.environ.get("NO_COLOR") or not sys.stdout.isatty():
        return text
    return f"\x1b[{_COLORS[color]}m{text}\x1b[0m"


def display_key(key: str) -> None:
    """Show an encryption key."""
    print(f"\n{_paint('Your Key:', 'blue')} {_paint(key, 'green')}\n")


def display_encode(text: str) -> None:
    """Show an encoded string."""
    print(f"{_paint('The encode', 'green')}:\n{_paint(text, 'green')}\n")


def display_decode(text: str) -> None:
    """Show a decoded string."""
    print(f"{_paint('The decode', 'green')}:\n{_paint(text, 'green')}\n")