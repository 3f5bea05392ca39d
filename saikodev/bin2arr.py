"""Convert a binary file into a C source file holding a byte array."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence
from pathlib import Path

MAX_ITEMS_PER_LINE = 16


def render(symbol: str, data: bytes, items_per_line: int = MAX_ITEMS_PER_LINE) -> str:
    """Render ``data`` as a C array definition named ``symbol``."""
    if items_per_line < 1:
        raise ValueError(f"items per line must be at least 1, got {items_per_line}")
    parts = [f"#include <stdint.h>\nconst uint8_t {symbol}[{len(data)}] =\n{{"]
    for start in range(0, len(data), items_per_line):
        row = data[start:start + items_per_line]
        parts.append("\n\t" + "".join(f"0x{byte:02X}," for byte in row))
    if len(data) % items_per_line == 0:
        parts.append("\n")
    parts.append("\n};\n\n")
    return "".join(parts)


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


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(
            "Usage:\nbin2arr <binary file> <symbol name> [items per line]",
            file=sys.stderr,
        )
        return 1

    items_per_line = MAX_ITEMS_PER_LINE
    if len(args) > 2:
        items_per_line = _atoi(args[2])
        if items_per_line < 1:
            print(
                f'Warning: Invalid value "{args[2]}" provided for max items per '
                f"line. Defaulting to {MAX_ITEMS_PER_LINE}.",
                file=sys.stderr,
            )
            items_per_line = MAX_ITEMS_PER_LINE

    source, symbol = args[0], args[1]
    try:
        data = Path(source).read_bytes()
    except OSError:
        print(f"Couldn't open {source} for reading.", file=sys.stderr)
        return 1

    out_path = f"{symbol}.c"
    try:
        Path(out_path).write_text(render(symbol, data, items_per_line))
    except OSError:
        print(f"Couldn't open {out_path} for writing.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())