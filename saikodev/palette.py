"""Colour encoding and queued palette updates for CPS and System 16/18."""

from __future__ import annotations

from saikodev.memmap import CPS_CRAM_BASE, S16_CRAM_BASE
from saikodev.palcmd import PalCmd, PalCmdOp, PalCmdQueue, PalValue
from saikodev.target import bit

# Background colour respected only on the original CPS.
CPS_BG_PAL = 0xBFF

# Shadow/highlight flag on System 16.
S16_PAL_SH = bit(15)

_WORD = 2


def cps_pal444(r: int, g: int, b: int) -> int:
    return (b >> 4) | (g & 0xF0) | ((r << 4) & 0xF00)


def cps_pal555(r: int, g: int, b: int) -> int:
    return cps_pal444(r >> 1, g >> 1, b >> 1)


def cps_pal888(r: int, g: int, b: int) -> int:
    return cps_pal444(r, g, b)


def cps_pal333(r: int, g: int, b: int) -> int:
    return cps_pal444(r << 1, g << 1, b << 1)


def cps_palhex(x: int) -> int:
    return cps_pal888((x >> 16) & 0xFF, (x >> 8) & 0xFF, x & 0xFF)


def s16_pal555(r: int, g: int, b: int) -> int:
    return (
        (bit(12) if r & bit(4) else 0)
        | (bit(13) if g & bit(4) else 0)
        | (bit(14) if b & bit(4) else 0)
        | ((r >> 1) & 0xF)
        | (((g >> 1) & 0xF) << 4)
        | (((b >> 1) & 0xF) << 8)
    )


def s16_pal444(r: int, g: int, b: int) -> int:
    return s16_pal555(r << 1, g << 1, b << 1)


def s16_pal888(r: int, g: int, b: int) -> int:
    return s16_pal555(r >> 3, g >> 3, b >> 3)


def s16_pal333(r: int, g: int, b: int) -> int:
    return s16_pal555(r << 2, g << 2, b << 2)


def s16_palhex(x: int) -> int:
    return s16_pal888((x >> 16) & 0xFF, (x >> 8) & 0xFF, x & 0xFF)


class CpsPalette:
    """Queues palette writes for CPS colour RAM (16 colours per line)."""

    def __init__(self, queue: PalCmdQueue, cram_base: int = CPS_CRAM_BASE) -> None:
        self.queue = queue
        self.cram_base = cram_base

    def _address(self, color: int) -> int:
        return self.cram_base + color * _WORD

    def set(self, idx: int, val: int) -> PalCmd | None:
        """Set a single colour."""
        return self.fill(idx, val, 1)

    def fill(self, idx: int, val: int, count: int) -> PalCmd | None:
        """Fill ``count`` colours starting at ``idx`` with ``val``."""
        return self.queue.add(PalCmdOp.SET_COLOR, count, self._address(idx), val)

    def load(self, dest: int, src: PalValue, count: int) -> PalCmd | None:
        """Copy ``count`` 16-colour lines from ``src`` to line ``dest``."""
        return self.queue.add(PalCmdOp.COPY_LINE_LONG, count, self._address(dest * 16), src)


class S16Palette:
    """Queues palette writes for System 16/18 colour RAM.

    Lines 0-127 are 8-colour background lines; 128-191 are 16-colour sprite
    lines stored from colour 1024 onward.
    """

    def __init__(self, queue: PalCmdQueue, cram_base: int = S16_CRAM_BASE) -> None:
        self.queue = queue
        self.cram_base = cram_base

    def _address(self, color: int) -> int:
        return self.cram_base + color * _WORD

    def set(self, idx: int, val: int) -> PalCmd | None:
        """Set a single colour."""
        return self.queue.add(PalCmdOp.SET_COLOR, 1, self._address(idx), val)

    def load_bg(self, dest: int, src: PalValue, count: int) -> PalCmd | None:
        """Copy ``count`` 8-colour background lines to line ``dest``."""
        return self.queue.add(PalCmdOp.COPY_LINE_HALF, count, self._address(dest * 8), src)

    def load_spr(self, dest: int, src: PalValue, count: int) -> PalCmd | None:
        """Copy ``count`` 16-colour sprite lines to sprite line ``dest``."""
        return self.queue.add(
            PalCmdOp.COPY_LINE_LONG, count, self._address(1024 + dest * 16), src
        )

    def load(self, dest: int, src: PalValue, count: int) -> PalCmd | None:
        """Load to a background line below 128, otherwise to a sprite line."""
        if dest < 128:
            return self.load_bg(dest, src, count)
        return self.load_spr(dest - 128, src, count)