import pytest

from saikodev.io_map import (
    S16_INPUT_PINS,
    S18_IO_CNT_VID_S18_EN,
    S18_IO_CNT_VID_VDP_EN,
    Cps2IoPort,
    CpsIoPort,
    S16IoPort,
    S18PlayerBits,
    cps2_io_address,
    cps_io_address,
    s16_io_address,
    s16_mapper_region_offsets,
    s18_io_control_default,
)
from saikodev.memmap import S16_REGIONS, memory_map
from saikodev.target import Target, bit


def test_cps_io_address_pinned():
    assert cps_io_address(CpsIoPort.PL) == 0x800000


@pytest.mark.parametrize("port", list(CpsIoPort))
def test_cps_io_address_offsets(port):
    base = memory_map(Target.CPS)["io_base"]
    assert cps_io_address(port) - base == port.value


@pytest.mark.parametrize("port", list(Cps2IoPort))
def test_cps2_io_address_offsets(port):
    base = memory_map(Target.CPS2)["cps2_io_base"]
    assert cps2_io_address(port) - base == port.value


def test_cps2_io_base_pinned():
    assert cps2_io_address(Cps2IoPort.PL0) == 0x804000


@pytest.mark.parametrize("port", list(S16IoPort))
def test_s16_io_address_offsets(port):
    base = memory_map(Target.S16B)["io_base"]
    assert s16_io_address(port) - base == port.value


def test_s16_io_accepts_plain_int():
    assert s16_io_address(0x1003) == s16_io_address(S16IoPort.INPUT_2)


def test_cps_io_rejects_unknown_port():
    with pytest.raises(ValueError):
        cps_io_address(0x99)


def test_cps2_io_rejects_unknown_port():
    with pytest.raises(ValueError):
        cps2_io_address(0x05)


def test_mapper_region_zero():
    assert s16_mapper_region_offsets(0) == (0x21, 0x23)


def test_mapper_region_seven():
    assert s16_mapper_region_offsets(7) == (0x3D, 0x3F)


def test_mapper_region_by_name():
    assert s16_mapper_region_offsets("WRAM") == (0x2D, 0x2F)
    assert s16_mapper_region_offsets("cram") == s16_mapper_region_offsets(
        S16_REGIONS["CRAM"]
    )


def test_mapper_regions_distinct_and_paired():
    offsets = [s16_mapper_region_offsets(r) for r in range(8)]
    flat = [o for pair in offsets for o in pair]
    assert len(set(flat)) == len(flat)
    assert all(addr == ctrl + 2 for ctrl, addr in offsets)


@pytest.mark.parametrize("region", [-1, 8, "BOGUS"])
def test_mapper_region_invalid(region):
    with pytest.raises(ValueError):
        s16_mapper_region_offsets(region)


def test_s18_player_bits():
    assert S18PlayerBits.LEFT == bit(7)
    assert S18PlayerBits.A == bit(0)
    combined = S18PlayerBits.UP | S18PlayerBits.B
    assert S18PlayerBits.UP in combined
    assert S18PlayerBits.DOWN not in combined


def test_s18_player_bits_cover_byte():
    full = S18PlayerBits(0xFF)
    assert int(full) == 0xFF
    assert all(flag in full for flag in S18PlayerBits)


def test_s18_io_control_default():
    result = s18_io_control_default()
    assert result == S18_IO_CNT_VID_S18_EN | S18_IO_CNT_VID_VDP_EN
    assert result & bit(0) == 0


def test_s16_input_pins_per_port():
    assert set(S16_INPUT_PINS) == {
        S16IoPort.INPUT_1,
        S16IoPort.INPUT_2,
        S16IoPort.INPUT_3,
        S16IoPort.INPUT_4,
    }
    assert all(len(pins) == 8 for pins in S16_INPUT_PINS.values())
    assert S16_INPUT_PINS[S16IoPort.INPUT_1][0] == "A"