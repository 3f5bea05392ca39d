"""Register layout and helpers for the CPS-A and CPS-B video chips."""

from __future__ import annotations

from enum import IntEnum

from saikodev.memmap import memory_map
from saikodev.target import Target, bit

# CPS-A "PPU1" register offsets. Base registers take a 68k address >> 8.
CPSA_OFFS_OBJ_BASE = 0x00
CPSA_OFFS_SCROLL1_BASE = 0x02
CPSA_OFFS_SCROLL2_BASE = 0x04
CPSA_OFFS_SCROLL3_BASE = 0x06
CPSA_OFFS_ROWSCROLL_BASE = 0x08
CPSA_OFFS_PALETTE_BASE = 0x0A

CPSA_OFFS_SCROLL1_X = 0x0C
CPSA_OFFS_SCROLL1_Y = 0x0E
CPSA_OFFS_SCROLL2_X = 0x10
CPSA_OFFS_SCROLL2_Y = 0x12
CPSA_OFFS_SCROLL3_X = 0x14
CPSA_OFFS_SCROLL3_Y = 0x16
CPSA_OFFS_STAR1_X = 0x18
CPSA_OFFS_STAR1_Y = 0x1A
CPSA_OFFS_STAR2_X = 0x1C
CPSA_OFFS_STAR2_Y = 0x1E

CPSA_OFFS_ROWSCROLL_START = 0x20
CPSA_OFFS_VIDEO_CTRL = 0x22

CPSA_VIDEO_CTRL_FLIP = bit(15)
CPSA_VIDEO_CTRL_UNK14 = bit(14)
CPSA_VIDEO_CTRL_STAR2 = bit(5)
CPSA_VIDEO_CTRL_STAR1 = bit(4)
CPSA_VIDEO_CTRL_SCROLL3 = bit(3)
CPSA_VIDEO_CTRL_SCROLL2 = bit(2)
CPSA_VIDEO_CTRL_SCROLL1 = bit(1)
CPSA_VIDEO_CTRL_LINESCROLL = bit(0)
CPSA_VIDEO_CTRL_DEFAULT = (
    CPSA_VIDEO_CTRL_SCROLL1 | CPSA_VIDEO_CTRL_SCROLL2 | CPSA_VIDEO_CTRL_SCROLL3
)

CPSA_OFFS_TILEMAP_UNK = 0x24
CPSA_OFFS_ID = 0x26
CPSA_SCANLINE = 0x28

# CPS-B-21 "PPU2" register offsets.
CPSB_OFFS_MULT_X = 0x00
CPSB_OFFS_MULT_Y = 0x02
CPSB_OFFS_MULT_LSB = 0x04
CPSB_OFFS_MULT_MSB = 0x06
CPSB_OFFS_MULT_TC = 0x08
CPSB_OFFS_CHECK1 = 0x0A
CPSB_OFFS_CHECK2 = 0x0C
CPSB_OFFS_RASTER1 = 0x0E
CPSB_OFFS_RASTER2 = 0x10
CPSB_OFFS_RASTER3 = 0x12

CPSB_OFFS_LAYER_CTRL = 0x26
CPSB_LAYER_CTRL_DRAW0_BIT = 12
CPSB_LAYER_CTRL_DRAW1_BIT = 10
CPSB_LAYER_CTRL_DRAW2_BIT = 8
CPSB_LAYER_CTRL_DRAW3_BIT = 6
CPSB_LAYER_CTRL_STAR2_EN = bit(4)
CPSB_LAYER_CTRL_STAR1_EN = bit(3)
CPSB_LAYER_CTRL_SCROLL3_EN = bit(2)
CPSB_LAYER_CTRL_SCROLL2_EN = bit(1)
CPSB_LAYER_CTRL_SCROLL1_EN = bit(0)

# Priority mask registers (CPS1 only).
CPSB_OFFS_PRIO0 = 0x28
CPSB_OFFS_PRIO1 = 0x2A
CPSB_OFFS_PRIO2 = 0x2C
CPSB_OFFS_PRIO3 = 0x2E

CPSB_OFFS_PAL_CTRL = 0x30
CPSB_PAL_CTRL_STAR2 = bit(5)
CPSB_PAL_CTRL_STAR1 = bit(4)
CPSB_PAL_CTRL_SCROLL3 = bit(3)
CPSB_PAL_CTRL_SCROLL2 = bit(2)
CPSB_PAL_CTRL_SCROLL1 = bit(1)
CPSB_PAL_CTRL_OBJ = bit(0)
CPSB_PAL_CTRL_DEFAULT = (
    CPSB_PAL_CTRL_OBJ
    | CPSB_PAL_CTRL_SCROLL1
    | CPSB_PAL_CTRL_SCROLL2
    | CPSB_PAL_CTRL_SCROLL3
    | CPSB_PAL_CTRL_STAR1
    | CPSB_PAL_CTRL_STAR2
)

CPSB_ID = 0x32
CPSB_SCANLINE = 0x3E

# Background tilemap attribute bits.
CPS_BG_FLIPX = bit(5)
CPS_BG_FLIPY = bit(6)

CPS_SCROLL_X_DEFAULT = -64
CPS_SCROLL_Y_DEFAULT = -16


class Plane(IntEnum):
    """Scrolling planes addressed by the scroll registers."""

    SCROLL1 = 0
    SCROLL2 = 1
    SCROLL3 = 2
    STAR1 = 3
    STAR2 = 4


def layer_order(ly0: int, ly1: int, ly2: int, ly3: int) -> int:
    """Pack four draw-order layer numbers into the layer control word."""
    return (
        (ly0 << CPSB_LAYER_CTRL_DRAW0_BIT)
        | (ly1 << CPSB_LAYER_CTRL_DRAW1_BIT)
        | (ly2 << CPSB_LAYER_CTRL_DRAW2_BIT)
        | (ly3 << CPSB_LAYER_CTRL_DRAW3_BIT)
    )


# Scroll 1 on top, then 2, then 3, with all three enabled.
CPSB_LAYER_ORDER_DEFAULT = layer_order(1, 2, 3, 0) | 0xE


def bg_attr(pal: int, prio: int) -> int:
    """Return the tilemap attribute for a palette and priority."""
    return pal | (prio << 7)


def scroll1_offset(x: int, y: int) -> int:
    """VRAM byte offset of tile (x, y) on scroll 1."""
    return x * 128 + y * 4


def scroll2_offset(x: int, y: int) -> int:
    """VRAM byte offset of tile (x, y) on scroll 2."""
    return x * 64 + y * 4


def scroll3_offset(x: int, y: int) -> int:
    """VRAM byte offset of tile (x, y) on scroll 3."""
    return x * 32 + y * 4


def _cpsa_base(target: Target | int) -> int:
    resolved = Target(target)
    if resolved not in (Target.CPS, Target.CPS2):
        raise ValueError(f"target has no CPS-A registers: {resolved.name}")
    return memory_map(resolved)["cpsa_reg_base"]


def scroll_x_register(plane: Plane | int, target: Target | int = Target.CPS) -> int:
    """Address of the horizontal scroll register for ``plane``."""
    return _cpsa_base(target) + CPSA_OFFS_SCROLL1_X + int(Plane(plane)) * 2


def scroll_y_register(plane: Plane | int, target: Target | int = Target.CPS) -> int:
    """Address of the vertical scroll register for ``plane``."""
    return _cpsa_base(target) + CPSA_OFFS_SCROLL1_Y + int(Plane(plane)) * 2