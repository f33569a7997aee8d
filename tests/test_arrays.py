import pytest

from glibcore.arrays import Array, ByteArray, PtrArray


def test_append_prepend_insert_order():
    arr = Array()
    arr.append_vals([3, 4])
    arr.prepend_vals([1, 2])
    arr.insert_vals(2, ["a", "b"])
    assert list(arr) == [1, 2, "a", "b", 3, 4]
    assert len(arr) == 6
    assert arr[2] == "a"


def test_methods_return_self_for_chaining():
    arr = Array()
    assert arr.append_vals([1]).prepend_vals([0]) is arr
    assert list(arr) == [0, 1]


def test_insert_out_of_range():
    arr = Array().append_vals([1])
    with pytest.raises(IndexError):
        arr.insert_vals(5, [2])


def test_set_size_grow_with_clear_fills_zero():
    arr = Array(clear=True).append_vals([7])
    arr.set_size(4)
    assert list(arr) == [7, 0, 0, 0]


def test_set_size_grow_without_clear_fills_none():
    arr = Array().append_vals([7])
    arr.set_size(3)
    assert list(arr) == [7, None, None]


def test_set_size_shrink():
    arr = Array().append_vals([1, 2, 3, 4])
    arr.set_size(2)
    assert list(arr) == [1, 2]
    with pytest.raises(ValueError):
        arr.set_size(-1)


def test_remove_index_preserves_order():
    arr = Array().append_vals([10, 20, 30, 40])
    assert arr.remove_index(1) == 20
    assert list(arr) == [10, 30, 40]


def test_remove_index_fast_moves_last():
    arr = Array().append_vals([10, 20, 30, 40])
    assert arr.remove_index_fast(0) == 10
    assert list(arr) == [40, 20, 30]
    assert arr.remove_index_fast(2) == 30
    assert list(arr) == [40, 20]


def test_remove_index_out_of_range():
    arr = Array().append_vals([1])
    with pytest.raises(IndexError):
        arr.remove_index(1)
    with pytest.raises(IndexError):
        arr.remove_index_fast(-1)


def test_byte_array():
    ba = ByteArray()
    ba.append(b"cd").prepend(b"ab")
    assert bytes(ba) == b"abcd"
    ba.set_size(6)
    assert bytes(ba) == b"abcd\x00\x00"
    assert ba.remove_index(0) == ord("a")
    assert bytes(ba) == b"bcd\x00\x00"


def test_byte_array_rejects_non_bytes():
    ba = ByteArray()
    with pytest.raises(ValueError):
        ba.append([256])
    assert len(ba) == 0


def test_ptr_array_add_and_remove():
    pa = PtrArray()
    items = ["x", "y", "z"]
    for item in items:
        pa.add(item)
    assert list(pa) == items
    assert pa.remove("y") is True
    assert list(pa) == ["x", "z"]
    assert pa.remove("missing") is False


def test_ptr_array_remove_fast():
    pa = PtrArray()
    for item in ["a", "b", "c", "d"]:
        pa.add(item)
    assert pa.remove_fast("a") is True
    assert list(pa) == ["d", "b", "c"]


def test_ptr_array_remove_index_variants():
    pa = PtrArray()
    for item in ["a", "b", "c"]:
        pa.add(item)
    assert pa.remove_index_fast(0) == "a"
    assert list(pa) == ["c", "b"]
    assert pa.remove_index(1) == "b"
    assert list(pa) == ["c"]
    with pytest.raises(IndexError):
        pa.remove_index(3)


def test_ptr_array_set_size():
    pa = PtrArray()
    pa.add("a")
    pa.set_size(3)
    assert list(pa) == ["a", None, None]
    pa.set_size(0)
    assert len(pa) == 0


def test_ptr_array_many_adds():
    pa = PtrArray()
    for i in range(100):
        pa.add(i)
    assert len(pa) == 100
    assert pa[99] == 99