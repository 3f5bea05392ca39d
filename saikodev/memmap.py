"""Memory maps of the supported target boards."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from saikodev.target import Target

# Region numbers assigned to the System 16B / 18 memory mapper.
S16_REGIONS = MappingProxyType({
    "ROM0": 0,
    "ROM1": 1,
    "ROM2": 2,
    "WRAM": 3,
    "VRAM": 4,
    "SPR": 5,
    "CRAM": 6,
    "IO": 7,
})

CPS_VRAM_BASE = 0x900000
CPS_CRAM_BASE = CPS_VRAM_BASE
S16_CRAM_BASE = 0x700000


@dataclass(frozen=True)
class MemoryMap:
    """Base addresses and sizes of a board's memory regions."""

    target: Target
    rom_base: int
    wram_base: int
    wram_size: int
    cram_base: int
    vram_base: int
    vram_size: int
    addresses: Mapping[str, int] = field(default_factory=dict)

    def __getitem__(self, name: str) -> int:
        return self.addresses[name]


def _cps(target: Target) -> MemoryMap:
    cps2 = target == Target.CPS2
    addresses = {
        "cpsa_reg_base": 0x804100 if cps2 else 0x800100,
        "cpsb_reg_base": 0x804140 if cps2 else 0x800140,
        "io_base": 0x800000,
        "objram": CPS_VRAM_BASE + 0x18000,
        "scroll1": CPS_VRAM_BASE + 0x0C000,
        "scroll2": CPS_VRAM_BASE + 0x04000,
        "scroll3": CPS_VRAM_BASE + 0x08000,
        "rowscroll": CPS_VRAM_BASE + 0x02000,
        "palette": CPS_VRAM_BASE,
    }
    if cps2:
        addresses.update(
            cps2_reg_base=0xFFFFF0,
            cps2_reg_base_good_battery=0x400000,
            cps2_io_base=0x804000,
            cps2_objram_base=0x700000,
            cps2_objram_size=0x2000,
            qsound_base=0x618000,
            qsound_bytes=0x2000,
        )
    return MemoryMap(
        target=target,
        rom_base=0x000000,
        wram_base=0xFF0000,
        wram_size=0x10000,
        cram_base=CPS_CRAM_BASE,
        vram_base=CPS_VRAM_BASE,
        vram_size=0x30000,
        addresses=MappingProxyType(addresses),
    )


def _system16(target: Target) -> MemoryMap:
    io_base = 0xC40000
    rom2_base = 0x400000
    addresses = {
        "rom0_base": 0x000000,
        "rom1_base": 0x200000,
        "rom2_base": rom2_base,
        "spr_base": 0x600000,
        "spr_size": 0x800,
        "cram_size": 0x1000,
        "io_base": io_base,
        "mapper_base": 0xC00000,
    }
    if target == Target.S18:
        addresses.update(
            vdp_base=rom2_base,
            s5296_base=io_base,
            vlatch_base=io_base + 0x2001,
        )
    return MemoryMap(
        target=target,
        rom_base=0x000000,
        wram_base=0xE00000,
        wram_size=0x004000,
        cram_base=S16_CRAM_BASE,
        vram_base=0x800000,
        vram_size=0x10000,
        addresses=MappingProxyType(addresses),
    )


_BUILDERS = {
    Target.CPS: _cps,
    Target.CPS2: _cps,
    Target.S16B: _system16,
    Target.S18: _system16,
}


def memory_map(target: Target | int) -> MemoryMap:
    """Return the memory map of ``target``."""
    try:
        resolved = Target(target)
    except ValueError:
        raise ValueError(f"unsupported target: {target!r}") from None
    builder = _BUILDERS.get(resolved)
    if builder is None:
        raise ValueError(f"unsupported target: {resolved.name}")
    return builder(resolved)