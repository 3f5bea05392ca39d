"""CPS and CPS2 sprite entries and the per-frame sprite list."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

from saikodev.target import Target, bit

CPS_OBJ_FLIPX_BIT = 5
CPS_OBJ_FLIPY_BIT = 6
CPS_OBJ_FLIPX = bit(CPS_OBJ_FLIPX_BIT)
CPS_OBJ_FLIPY = bit(CPS_OBJ_FLIPY_BIT)

CPS_OBJ_COUNT_MAX = 256
CPS_OBJ_BANK_OFFS = 0x8000
CPS2_OBJ_COUNT_MAX = 1024

# CPS2 object register offsets and their usual values.
CPS2_OBJ_OFFS_BASE = 0x00
CPS2_OBJ_OFFS_UNK1 = 0x02
CPS2_OBJ_OFFS_PRIO = 0x04
CPS2_OBJ_OFFS_UNK2 = 0x06
CPS2_OBJ_OFFS_XOFF = 0x08
CPS2_OBJ_OFFS_YOFF = 0x0A

CPS2_OBJ_PRIO_DEFAULT = 0x1234
CPS2_OBJ_XOFF_DEFAULT = 0x0040
CPS2_OBJ_YOFF_DEFAULT = 0x0010

_OBJ_FORMAT = struct.Struct(">HHHH")
OBJ_SIZE_BYTES = _OBJ_FORMAT.size


def obj_size(w: int, h: int) -> int:
    """Encode a sprite block of ``w`` by ``h`` tiles."""
    return (w - 1) | ((h - 1) << 4)


def obj_attr(pal: int) -> int:
    """Encode the attribute byte for palette ``pal``."""
    return pal


def obj_at16(pal: int, size: int) -> int:
    """Encode the combined size/attribute word."""
    return obj_attr(pal) | (size << 8)


@dataclass
class CpsObj:
    """One sprite entry: position, tile code and size/attribute word."""

    x: int
    y: int
    code: int
    sizeattr: int

    @property
    def size(self) -> int:
        """The block size byte (high byte of ``sizeattr``)."""
        return (self.sizeattr >> 8) & 0xFF

    @property
    def attr(self) -> int:
        """The attribute byte (low byte of ``sizeattr``)."""
        return self.sizeattr & 0xFF

    def pack(self) -> bytes:
        """Return the 8-byte big-endian entry as the hardware reads it."""
        return _OBJ_FORMAT.pack(
            self.x & 0xFFFF, self.y & 0xFFFF, self.code & 0xFFFF, self.sizeattr & 0xFFFF
        )


class ObjList:
    """Sprite list filled during a frame.

    Once full, further draws step back through the list and hand out the
    existing entries unchanged rather than adding new ones.
    """

    def __init__(self, capacity: int = CPS_OBJ_COUNT_MAX) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._objs: list[CpsObj] = []
        self._cursor = 0

    @classmethod
    def for_target(cls, target: Target | int) -> ObjList:
        """Return an empty list sized for ``target``."""
        resolved = Target(target)
        if resolved == Target.CPS:
            return cls(CPS_OBJ_COUNT_MAX)
        if resolved == Target.CPS2:
            return cls(CPS2_OBJ_COUNT_MAX)
        raise ValueError(f"target has no CPS sprites: {resolved.name}")

    def draw(self, x: int, y: int, code: int, sizeattr: int) -> CpsObj:
        """Add a sprite and return its entry."""
        if len(self._objs) >= self.capacity:
            self._cursor = max(self._cursor - 1, 0)
            return self._objs[self._cursor]
        obj = CpsObj(x, y, code, sizeattr)
        self._objs.append(obj)
        self._cursor = len(self._objs)
        return obj

    def reset(self) -> None:
        """Empty the list for the next frame."""
        self._objs.clear()
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._objs)

    def __iter__(self) -> Iterator[CpsObj]:
        return iter(list(self._objs))