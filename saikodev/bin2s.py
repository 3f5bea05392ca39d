"""Convert binary files into GNU assembler data modules."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

USAGE = (
    "usage: bin2s foo.bin bar.bin baz.bin > foo.s\n"
    "Converts binary files to GNU assembly language.\n"
    "Each object is named as the file path with non-alphanumeric\n"
    "characters converted to underscores.  For example, 'res/kitten.chr'\n"
    "becomes 'res_kitten_chr'.  Then each file is written as two symbols:\n"
    " 1. The symbol with '_size' appended (e.g. 'res_kitten_chr_size')\n"
    "    Points to a uint32_t holding the file's length in bytes\n"
    " 2. The symbol itself (e.g. 'res_kitten_chr')\n"
    "    Points to file's contents\n"
    "The sizes are 32-bit aligned, and the contents always directly follow\n"
    "the size, so a program can treat them as Pascal strings and traverse\n"
    "a set of files linearly.\n"
)

DEFAULT_ALIGNMENT = 2
BYTES_PER_LINE = 16

_HELP_FLAGS = ("-h", "--help", "-?")
_CFG_DELIMITERS = " \t\n\r"


def identifier(path: str) -> str:
    """Return the closest valid C identifier to ``path``."""
    out = []
    for index, ch in enumerate(path):
        if index == 0 and ch in string.digits:
            out.append("_")
        out.append(ch if ch.isascii() and ch.isalnum() else "_")
    return "".join(out)


def _strtoul(text: str) -> int:
    """Parse an integer the way ``strtoul(text, NULL, 0)`` does."""
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


def read_alignment(path: str) -> int:
    """Read the alignment from ``<path>.cfg`` if present, else the default."""
    cfg = Path(f"{path}.cfg")
    try:
        text = cfg.read_text(errors="replace")
    except OSError:
        return DEFAULT_ALIGNMENT
    alignment = DEFAULT_ALIGNMENT
    tokens = iter(text.translate({ord(c): " " for c in _CFG_DELIMITERS}).split())
    for token in tokens:
        if token == "align":
            value = next(tokens, None)
            if value is None:
                break
            alignment = _strtoul(value)
    return alignment


def render(path: str, data: bytes, alignment: int = DEFAULT_ALIGNMENT) -> str:
    """Render ``data`` as an assembler module named after ``path``."""
    if not data:
        raise ValueError(f"cannot render empty file {path}")
    name = identifier(path)
    values = [f"{byte:3d}" for byte in data]
    rows = (
        ",".join(values[start:start + BYTES_PER_LINE])
        for start in range(0, len(values), BYTES_PER_LINE)
    )
    return (
        "/* Generated by BIN2S - please don't edit directly */\n"
        ".section .rodata\n"
        f".balign {alignment}\n"
        f".global {name}_size\n"
        f"{name}_size: .dc.l {len(data)}\n"
        f".global {name}\n"
        f"{name}:\n"
        ".byte " + "\n.byte ".join(rows) + "\n"
    )


def _render_files(paths: Iterable[str]) -> Iterator[str]:
    for path in paths:
        if ".cfg" in path:
            continue
        alignment = read_alignment(path)
        data = Path(path).read_bytes()
        if not data:
            print(f"bin2s: warning: skipping empty file {path}", file=sys.stderr)
            continue
        yield render(path, data, alignment)


def convert(paths: Iterable[str]) -> str:
    """Render every file in ``paths``, skipping config and empty files."""
    return "".join(_render_files(paths))


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("bin2s: not enough arguments; try bin2s --help", file=sys.stderr)
        return 1
    if args[0] in _HELP_FLAGS:
        sys.stdout.write(USAGE)
        return 0
    try:
        for chunk in _render_files(args):
            sys.stdout.write(chunk)
    except OSError as exc:
        print(f"bin2s: could not open {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())