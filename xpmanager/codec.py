"""String encodings: hexadecimal, binary, a character-sum hash and the v1 key style."""

from __future__ import annotations

XPM_KEY_MARK = "%$%"


def encode_xpmv1(string: str, n: int) -> str:
    """Encode each character as ``0x<code * n>`` joined by the key mark."""
    return XPM_KEY_MARK.join(f"0x{ord(c) * n:x}" for c in string)


def encode_hex(string: str) -> str:
    """Upper-case hexadecimal code of each character, space separated."""
    return " ".join(f"{ord(c):X}" for c in string)


def hex_hash(string: str) -> str:
    """Sum the character codes of each space-separated word, in hexadecimal."""
    parts: list[str] = []
    total = 0
    for char in string:
        if char == " ":
            parts.append(f"{total:X}")
            total = 0
            continue
        total += ord(char)
    if total != 0:
        parts.append(f"{total:X}")
    return " ".join(parts)


def encode_bin(string: str) -> str:
    """Binary code of each character, space separated."""
    return " ".join(f"{ord(c):b}" for c in string)


def decode_xpmv1(string: str, n: int) -> str:
    """Reverse :func:`encode_xpmv1`."""
    return "".join(
        chr(int(part.replace("0x", ""), 16) // n) for part in string.split(XPM_KEY_MARK)
    )


def decode_hex(string: str) -> str:
    """Reverse :func:`encode_hex`."""
    return "".join(chr(int(part, 16)) for part in string.split(" "))


def decode_bin(string: str) -> str:
    """Reverse :func:`encode_bin`."""
    return "".join(chr(int(part, 2)) for part in string.split(" "))