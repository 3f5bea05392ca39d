"""Pad a binary file with 0xFF up to a power-of-two size."""

from __future__ import annotations

import os
import string
import sys
from collections.abc import Sequence

# Erased flash and EPROM read as 0xFF, so padding with it burns faster.
PAD_VALUE = 0xFF


def padded_size(size: int, min_bytes: int = 0) -> int:
    """Return the next power of two above ``size`` (at least 2), or ``min_bytes``."""
    target = 2
    while target < size:
        target *= 2
    return max(target, min_bytes)


def pad_file(path: str, min_bytes: int = 0) -> tuple[int, int]:
    """Pad the file in place; return its original and new sizes."""
    with open(path, "r+b") as fh:
        original = fh.seek(0, os.SEEK_END)
        target = padded_size(original, min_bytes)
        fh.write(bytes([PAD_VALUE]) * (target - original))
    return original, target


def _strtoul(text: str) -> int:
    s = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if s.startswith(("+", "-")):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in string.hexdigits:
        base, allowed, s = 16, string.hexdigits, s[2:]
    elif s.startswith("0"):
        base, allowed = 8, string.octdigits
    else:
        base, allowed = 10, string.digits
    digits = []
    for ch in s:
        if ch not in allowed:
            break
        digits.append(ch)
    return sign * int("".join(digits), base) if digits else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            "Pads a file to the next highest power of two.\n"
            "Specification of a minimum size, in bytes, is optional."
        )
        print("Usage: binpad unpadded_file [min_bytes]")
        return 0

    path = args[0]
    min_bytes = _strtoul(args[1]) if len(args) >= 2 else 0
    try:
        original, target = pad_file(path, min_bytes)
    except OSError:
        print(f'Couldn\'t open "{path}"', file=sys.stderr)
        return 1
    print(f"Original filesize is ${original:X} ({original}) bytes.")
    print(f"New target size of ${target:X} ({target}) bytes.")
    return 0


if __name__ == "__main__":
    sys.exit(main())