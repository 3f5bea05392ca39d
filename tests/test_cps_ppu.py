import pytest

from saikodev import cps_ppu
from saikodev.cps_ppu import (
    Plane,
    bg_attr,
    layer_order,
    scroll1_offset,
    scroll2_offset,
    scroll3_offset,
    scroll_x_register,
    scroll_y_register,
)
from saikodev.memmap import memory_map
from saikodev.target import Target


def test_layer_order_matches_documented_typical_default():
    value = layer_order(2, 2, 2, 1) | cps_ppu.CPSB_LAYER_CTRL_SCROLL2_EN
    assert value == 0x2A42


def test_layer_order_fields_do_not_overlap():
    assert layer_order(3, 0, 0, 0) & layer_order(0, 3, 0, 0) == 0
    assert layer_order(0, 0, 3, 0) & layer_order(0, 0, 0, 3) == 0
    assert layer_order(3, 3, 3, 3) == (
        layer_order(3, 0, 0, 0)
        | layer_order(0, 3, 0, 0)
        | layer_order(0, 0, 3, 0)
        | layer_order(0, 0, 0, 3)
    )


def test_default_layer_order_enables_three_scroll_planes():
    default = cps_ppu.CPSB_LAYER_ORDER_DEFAULT
    assert default & 0xF == 0xE
    assert default & ~0xF == layer_order(1, 2, 3, 0)


def test_bg_attr_places_priority_above_palette():
    assert bg_attr(0x1F, 0) == 0x1F
    assert bg_attr(0, 1) == 1 << 7
    assert bg_attr(5, 3) == 5 | (3 << 7)


@pytest.mark.parametrize(
    "func, column",
    [(scroll1_offset, 128), (scroll2_offset, 64), (scroll3_offset, 32)],
)
def test_scroll_offsets_step(func, column):
    assert func(0, 0) == 0
    assert func(1, 0) == column
    assert func(0, 1) == 4
    assert func(3, 2) == 3 * func(1, 0) + 2 * func(0, 1)


def test_scroll_register_for_scroll1_on_cps():
    base = memory_map(Target.CPS)["cpsa_reg_base"]
    assert scroll_x_register(Plane.SCROLL1) == base + cps_ppu.CPSA_OFFS_SCROLL1_X
    assert scroll_y_register(Plane.SCROLL1) == base + cps_ppu.CPSA_OFFS_SCROLL1_Y


def test_scroll_register_follows_target_base():
    diff = memory_map(Target.CPS2)["cpsa_reg_base"] - memory_map(Target.CPS)["cpsa_reg_base"]
    for plane in Plane:
        assert scroll_x_register(plane, Target.CPS2) - scroll_x_register(plane, Target.CPS) == diff


def test_scroll_register_steps_by_plane():
    assert scroll_x_register(Plane.SCROLL2) - scroll_x_register(Plane.SCROLL1) == 2
    assert scroll_y_register(2) - scroll_y_register(0) == 4


def test_scroll_register_rejects_non_cps_target():
    with pytest.raises(ValueError):
        scroll_x_register(Plane.SCROLL1, Target.S16B)
    with pytest.raises(ValueError):
        scroll_y_register(Plane.SCROLL1, Target.MD)


def test_scroll_register_rejects_unknown_plane():
    with pytest.raises(ValueError):
        scroll_x_register(9)