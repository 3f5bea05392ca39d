"""I/O port layouts of the CPS, CPS2, System 16B and System 18 boards."""

from __future__ import annotations

from enum import IntEnum, IntFlag

from saikodev.memmap import S16_REGIONS, memory_map
from saikodev.target import Target, bit


class CpsIoPort(IntEnum):
    """CPS I/O port offsets from the I/O base."""

    PL = 0x00
    SYS = 0x18
    DIP1 = 0x1A
    DIP2 = 0x1C
    DIP3 = 0x11
    SOUND1 = 0x80
    SOUND2 = 0x88


# CPS player port bits.
CPS1_IO_SW_PL_RIGHT_BIT = 0
CPS1_IO_SW_PL_LEFT_BIT = 1
CPS1_IO_SW_PL_DOWN_BIT = 2
CPS1_IO_SW_PL_UP_BIT = 3
CPS1_IO_SW_PL_SW1_BIT = 4
CPS1_IO_SW_PL_SW2_BIT = 5
CPS1_IO_SW_PL_SW3_BIT = 6
CPS1_IO_SW_PL_SW4_BIT = 7

# CPS system port bits.
CPS1_IO_SW_COIN1_BIT = 0
CPS1_IO_SW_COIN2_BIT = 1
CPS1_IO_SW_SERVICE_BIT = 2
CPS1_IO_SW_START1_BIT = 4
CPS1_IO_SW_START2_BIT = 5
CPS1_IO_SW_TEST_BIT = 6


class Cps2IoPort(IntEnum):
    """CPS2 I/O port offsets from the CPS2 I/O base."""

    PL0 = 0x00  # P1, P2
    PL1 = 0x10  # kick, P3/P4
    SYS = 0x20  # starts, coins, EEPROM read
    VOL = 0x30  # volume and B board expansion flags
    EEP = 0x40  # EEPROM signals, Z80 control
    OU1 = 0x80
    OU2 = 0x90
    SRM = 0xA0  # bit 0 enables DRAM refresh
    DIP = 0xB0  # debug DIP switches
    BNK = 0xE0  # object RAM bank


# CPS2 player port bits; these match CPS.
CPS2_IO_SW_PL_RIGHT_BIT = 0
CPS2_IO_SW_PL_LEFT_BIT = 1
CPS2_IO_SW_PL_DOWN_BIT = 2
CPS2_IO_SW_PL_UP_BIT = 3
CPS2_IO_SW_PL_SW1_BIT = 4
CPS2_IO_SW_PL_SW2_BIT = 5
CPS2_IO_SW_PL_SW3_BIT = 6
CPS2_IO_SW_PL_SW4_BIT = 7

# PL1 port bits used as kick inputs.
CPS2_IO_SW_PL1_KICK1_BIT = 0
CPS2_IO_SW_PL1_KICK2_BIT = 1
CPS2_IO_SW_PL1_KICK3_BIT = 2
CPS2_IO_SW_PL2_KICK1_BIT = 4
CPS2_IO_SW_PL2_KICK2_BIT = 5

# SYS port bits; player 2's strong kick also lives here.
CPS2_IO_SYS_EEP_DO_BIT = 0
CPS2_IO_SW_TEST_BIT = 1
CPS2_IO_SW_SERVICE_BIT = 2
CPS2_IO_SW_START1_BIT = 8
CPS2_IO_SW_START2_BIT = 9
CPS2_IO_SW_START3_BIT = 10
CPS2_IO_SW_START4_BIT = 11
CPS2_IO_SW_COIN1_BIT = 12
CPS2_IO_SW_COIN2_BIT = 13
CPS2_IO_SW_COIN3_BIT = 14
CPS2_IO_SW_COIN4_BIT = 15
CPS2_IO_SW_PL2_KICK3_BIT = 14

# VOL port bits.
CPS2_IO_SW_VOL_DOWN = 1
CPS2_IO_SW_VOL_UP = 2

# EEP port bits.
CPS2_IO_EEP_COINC1_BIT = 0
CPS2_IO_EEP_COINC2_BIT = 1
CPS2_IO_EEP_Z80_RESET = 4  # bring high before accessing Z80 memory
CPS2_IO_EEP_LOCK1_BIT = 5
CPS2_IO_EEP_LOCK2_BIT = 6
CPS2_IO_EEP_CN5_PIN7 = 7
CPS2_IO_EEP_CN5_PIN8 = 8
CPS2_IO_EEP_DI_BIT = 12
CPS2_IO_EEP_CLK_BIT = 13
CPS2_IO_EEP_CS_BIT = 14


class S16IoPort(IntEnum):
    """System 16B I/O port offsets from the I/O base."""

    MISC = 0x0001
    INPUT_1 = 0x1001  # player specials, coins, starts
    INPUT_2 = 0x1003  # generally player 1
    INPUT_3 = 0x1005  # additional inputs
    INPUT_4 = 0x1007  # generally player 2
    DIP2 = 0x2001
    DIP1 = 0x2003


S16_IO_MISC_FLIP = bit(6)
S16_IO_MISC_DISP_EN = bit(5)
S16_IO_MISC_LAMP2 = bit(3)
S16_IO_MISC_LAMP1 = bit(2)
S16_IO_MISC_CNT2 = bit(1)
S16_IO_MISC_CNT1 = bit(0)
S16_IO_MISC_DEFAULT = S16_IO_MISC_DISP_EN

S16_IO_INPUT_1_COIN1_BIT = 0
S16_IO_INPUT_1_COIN2_BIT = 1
S16_IO_INPUT_1_TEST_BIT = 2
S16_IO_INPUT_1_SERVICE_BIT = 3
S16_IO_INPUT_1_START1_BIT = 4
S16_IO_INPUT_1_START2_BIT = 5

# Edge connector pins behind each input port, bit 7 first.
S16_INPUT_PINS = {
    S16IoPort.INPUT_1: ("A", "Z", "Y", "X", "23", "22", "21", "20"),
    S16IoPort.INPUT_2: ("15", "14", "13", "12", "11", "10", "9", "8"),
    S16IoPort.INPUT_3: ("W", "V", "U", "T", "19", "18", "17", "16"),
    S16IoPort.INPUT_4: ("S", "R", "P", "N", "M", "L", "K", "J"),
}

# 315-5195 mapper register offsets.
S16_MAPPER_OFFS_SND = 0x07
_MAPPER_REGION_CTRL_FIRST = 0x21
_MAPPER_REGION_STRIDE = 4
_MAPPER_REGION_COUNT = 8


class S18PlayerBits(IntFlag):
    """System 18 player port bits (ports A, B and C)."""

    A = bit(0)
    B = bit(1)
    C = bit(2)
    D = bit(3)
    DOWN = bit(4)
    UP = bit(5)
    RIGHT = bit(6)
    LEFT = bit(7)


S18_IO_DIR_DEFAULT = 0x88  # ports D and H as outputs
S18_IO_CNT_VID_S18_EN = bit(1)
S18_IO_CNT_VID_VDP_EN = bit(2)

# Port D: miscellaneous outputs.
S18_IO_MO_GREYSCALE = bit(6)
S18_IO_MO_FLIP = bit(5)
S18_IO_MO_LOCKOUT2 = bit(3)
S18_IO_MO_LOCKOUT1 = bit(2)
S18_IO_MO_METER2 = bit(1)
S18_IO_MO_METER1 = bit(0)
S18_IO_MO_DEFAULT = 0

# Port E: system inputs.
S18_IO_SYS_UNUSED = bit(7)
S18_IO_SYS_SELECT = bit(6)
S18_IO_SYS_START2 = bit(5)
S18_IO_SYS_START1 = bit(4)
S18_IO_SYS_SERVICE = bit(3)
S18_IO_SYS_TEST = bit(2)
S18_IO_SYS_COIN1 = bit(1)
S18_IO_SYS_COIN2 = bit(0)


def cps_io_address(port: CpsIoPort | int) -> int:
    """Absolute address of a CPS I/O port."""
    return memory_map(Target.CPS)["io_base"] + int(CpsIoPort(port))


def cps2_io_address(port: Cps2IoPort | int) -> int:
    """Absolute address of a CPS2 I/O port."""
    return memory_map(Target.CPS2)["cps2_io_base"] + int(Cps2IoPort(port))


def s16_io_address(port: S16IoPort | int) -> int:
    """Absolute address of a System 16B I/O port."""
    return memory_map(Target.S16B)["io_base"] + int(S16IoPort(port))


def s16_mapper_region_offsets(region: int | str) -> tuple[int, int]:
    """Return the (control, address) register offsets of a mapper region.

    ``region`` is a region number 0-7 or a region name such as ``"WRAM"``.
    """
    if isinstance(region, str):
        try:
            number = S16_REGIONS[region.upper()]
        except KeyError:
            raise ValueError(f"unknown mapper region: {region!r}") from None
    else:
        number = int(region)
    if not 0 <= number < _MAPPER_REGION_COUNT:
        raise ValueError(f"mapper region out of range: {region!r}")
    ctrl = _MAPPER_REGION_CTRL_FIRST + number * _MAPPER_REGION_STRIDE
    return ctrl, ctrl + 2


def s18_io_control_default() -> int:
    """Default I/O control value enabling both video sources."""
    return S18_IO_CNT_VID_S18_EN | S18_IO_CNT_VID_VDP_EN