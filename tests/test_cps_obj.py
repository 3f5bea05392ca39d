import struct

import pytest

from saikodev.cps_obj import (
    CPS2_OBJ_COUNT_MAX,
    CPS_OBJ_COUNT_MAX,
    CpsObj,
    ObjList,
    obj_at16,
    obj_attr,
    obj_size,
)
from saikodev.target import Target


def test_obj_size_single_tile_is_zero():
    assert obj_size(1, 1) == 0


def test_obj_size_fields():
    assert obj_size(4, 1) == 3
    assert obj_size(1, 4) == 3 << 4
    assert obj_size(16, 16) == 0xFF


def test_obj_at16_round_trips_through_entry():
    obj = CpsObj(0, 0, 0, obj_at16(7, obj_size(2, 3)))
    assert obj.attr == obj_attr(7)
    assert obj.size == obj_size(2, 3)


def test_pack_is_eight_big_endian_words():
    obj = CpsObj(-64, 16, 0x1234, obj_at16(3, obj_size(2, 2)))
    packed = obj.pack()
    assert len(packed) == 8
    x, y, code, sizeattr = struct.unpack(">hhHH", packed)
    assert (x, y, code, sizeattr) == (-64, 16, 0x1234, obj.sizeattr)


def test_pack_places_size_byte_before_attr_byte():
    obj = CpsObj(0, 0, 0, obj_at16(0x05, 0x21))
    packed = obj.pack()
    assert packed[6] == 0x21
    assert packed[7] == 0x05


def test_draw_appends_and_iterates_in_order():
    objs = ObjList(4)
    first = objs.draw(1, 2, 3, 4)
    second = objs.draw(5, 6, 7, 8)
    assert len(objs) == 2
    assert list(objs) == [first, second]
    assert first == CpsObj(1, 2, 3, 4)


def test_draw_when_full_steps_back_without_changes():
    objs = ObjList(3)
    drawn = [objs.draw(i, i, i, i) for i in range(3)]
    assert objs.draw(99, 99, 99, 99) is drawn[2]
    assert objs.draw(98, 98, 98, 98) is drawn[1]
    assert len(objs) == 3
    assert [o.x for o in objs] == [0, 1, 2]


def test_reset_empties_list():
    objs = ObjList(2)
    objs.draw(1, 1, 1, 1)
    objs.draw(2, 2, 2, 2)
    objs.reset()
    assert len(objs) == 0
    fresh = objs.draw(3, 3, 3, 3)
    assert list(objs) == [fresh]


def test_for_target_capacities():
    assert ObjList.for_target(Target.CPS).capacity == CPS_OBJ_COUNT_MAX
    assert ObjList.for_target(Target.CPS2).capacity == CPS2_OBJ_COUNT_MAX
    assert CPS_OBJ_COUNT_MAX == 256
    assert CPS2_OBJ_COUNT_MAX == 1024


def test_for_target_rejects_other_boards():
    with pytest.raises(ValueError):
        ObjList.for_target(Target.S18)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ObjList(0)