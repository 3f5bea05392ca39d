"""Interleave, de-interleave and swap bytes of ROM images."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence
from pathlib import Path

_NYBBLE_TABLE = bytes(((b & 0x0F) << 4) | ((b & 0xF0) >> 4) for b in range(256))
_HALFNYBBLE_TABLE = bytes(
    ((b & 0x03) << 2) | ((b & 0x0C) >> 2) | ((b & 0x30) << 2) | ((b & 0xC0) >> 2)
    for b in range(256)
)

_USAGE = (
    "Usage: bsplit [op]\n"
    "    split: s in out.even out.odd <bytes per>\n"
    "  combine: c in.even in.odd out <bytes per>\n"
    " exchange: x in out\n"
    " ex. 4bit: n in out\n"
    " ex. 2bit: z in out"
)


def _check_width(width: int) -> None:
    if width < 1:
        raise ValueError(f"interleave width must be at least 1, got {width}")


def split(data: bytes, width: int = 1) -> tuple[bytes, bytes]:
    """Deal alternating ``width``-byte chunks into even and odd outputs."""
    _check_width(width)
    step = 2 * width
    even = b"".join(data[pos:pos + width] for pos in range(0, len(data), step))
    odd = b"".join(data[pos + width:pos + step] for pos in range(0, len(data), step))
    return even, odd


def combine(even: bytes, odd: bytes, width: int = 1) -> bytes:
    """Interleave ``width``-byte chunks of ``even`` and ``odd``.

    Stops once the odd input runs out in the middle of a chunk.
    """
    _check_width(width)
    out = bytearray()
    pos = 0
    while True:
        out += even[pos:pos + width]
        out += odd[pos:pos + width]
        if len(odd) < pos + width:
            break
        pos += width
    return bytes(out)


def exchange(data: bytes) -> bytes:
    """Swap each pair of bytes; a trailing odd byte is dropped."""
    length = len(data) - len(data) % 2
    out = bytearray(length)
    out[0::2] = data[1:length:2]
    out[1::2] = data[0:length:2]
    return bytes(out)


def exchange_nybbles(data: bytes) -> bytes:
    """Swap the high and low nybble of every byte."""
    return bytes(data).translate(_NYBBLE_TABLE)


def exchange_halfnybbles(data: bytes) -> bytes:
    """Swap the two-bit pairs inside each nybble of every byte."""
    return bytes(data).translate(_HALFNYBBLE_TABLE)


def _atoi(text: str) -> int:
    s = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if s.startswith(("+", "-")):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = []
    for ch in s:
        if ch not in string.digits:
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


_TRANSFORMS = {
    "x": ("Exchanging bytes", exchange),
    "n": ("Exchanging nybbles", exchange_nybbles),
    "z": ("Exchanging half-nybbles", exchange_halfnybbles),
}


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_USAGE)
        return 0

    width = 1
    if len(args) > 4:
        width = _atoi(args[4])
        print(f"Using {width} bytes interleave cadence")

    op = args[0][:1]
    if (op in ("s", "c") and len(args) < 4) or (op in _TRANSFORMS and len(args) < 3):
        print(_USAGE)
        return 0

    try:
        if op == "s":
            print("Splitting")
            even, odd = split(Path(args[1]).read_bytes(), width)
            Path(args[3]).write_bytes(odd)
            Path(args[2]).write_bytes(even)
        elif op == "c":
            print("Combining")
            even = Path(args[1]).read_bytes()
            odd = Path(args[2]).read_bytes()
            Path(args[3]).write_bytes(combine(even, odd, width))
        elif op in _TRANSFORMS:
            message, transform = _TRANSFORMS[op]
            print(message)
            Path(args[2]).write_bytes(transform(Path(args[1]).read_bytes()))
    except OSError as exc:
        print(f"Couldn't open {exc.filename}.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())