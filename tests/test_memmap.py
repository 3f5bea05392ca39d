import pytest

from saikodev.memmap import S16_REGIONS, memory_map
from saikodev.target import Target


def test_cps_base_addresses():
    mm = memory_map(Target.CPS)
    assert mm.rom_base == 0x000000
    assert mm.wram_base == 0xFF0000
    assert mm.wram_size == 0x10000
    assert mm.vram_base == 0x900000
    assert mm.vram_size == 0x30000
    assert mm.cram_base == mm["palette"] == mm.vram_base


def test_cps_register_bases_differ_on_cps2():
    assert memory_map(Target.CPS)["cpsa_reg_base"] == 0x800100
    assert memory_map(Target.CPS)["cpsb_reg_base"] == 0x800140
    assert memory_map(Target.CPS2)["cpsa_reg_base"] == 0x804100
    assert memory_map(Target.CPS2)["cpsb_reg_base"] == 0x804140


def test_cps_vram_layout_inside_vram():
    mm = memory_map(Target.CPS)
    for name in ("objram", "scroll1", "scroll2", "scroll3", "rowscroll"):
        assert mm.vram_base <= mm[name] < mm.vram_base + mm.vram_size


def test_cps2_extras():
    mm = memory_map(Target.CPS2)
    assert mm["cps2_reg_base"] == 0xFFFFF0
    assert mm["cps2_reg_base_good_battery"] == 0x400000
    assert mm["cps2_objram_base"] == 0x700000
    assert mm["qsound_base"] == 0x618000
    assert "qsound_base" not in memory_map(Target.CPS).addresses


def test_s16b_map():
    mm = memory_map(Target.S16B)
    assert mm.wram_base == 0xE00000
    assert mm.cram_base == 0x700000
    assert mm["mapper_base"] == 0xC00000
    assert mm["io_base"] == 0xC40000
    assert "vdp_base" not in mm.addresses


def test_s18_adds_vdp_and_latch():
    mm = memory_map(Target.S18)
    assert mm["vdp_base"] == mm["rom2_base"] == 0x400000
    assert mm["s5296_base"] == mm["io_base"]
    assert mm["vlatch_base"] == mm["io_base"] + 0x2001


def test_accepts_plain_int():
    assert memory_map(6) == memory_map(Target.CPS)


def test_regions_are_distinct():
    assert sorted(S16_REGIONS.values()) == list(range(8))


@pytest.mark.parametrize("target", [Target.UNDEFINED, Target.MD, Target.ESPRADE, 99])
def test_unsupported_target_raises(target):
    with pytest.raises(ValueError):
        memory_map(target)


def test_map_is_immutable():
    mm = memory_map(Target.CPS)
    with pytest.raises(TypeError):
        mm.addresses["io_base"] = 0
    assert mm["io_base"] == 0x800000