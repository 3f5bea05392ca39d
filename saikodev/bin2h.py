"""Emit extern declarations matching the symbols of generated data modules."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence


def symbol_name(path: str) -> str:
    """Replace path separators and dots with underscores."""
    return path.translate(str.maketrans({"/": "_", "\\": "_", ".": "_"}))


def declarations(paths: Iterable[str]) -> str:
    """Return one extern declaration per non-empty, non-config file."""
    out = []
    for path in paths:
        if ".cfg" in path:
            continue
        with open(path, "rb") as fh:
            size = fh.seek(0, os.SEEK_END)
        name = symbol_name(path)
        if size == 0:
            print(f"bin2s: warning: skipping empty file {name}", file=sys.stderr)
            continue
        out.append(f"extern const uint8_t {name}[{size}];\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: bin2h <file>...")
        print("bin2h: not enough arguments", file=sys.stderr)
        return 1
    try:
        sys.stdout.write(declarations(args))
    except OSError as exc:
        print(f"bin2h: could not open {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())