import pytest

from umachine.memory import SegmentError, SegmentedMemory


def test_segment_zero_is_mapped_and_zeroed():
    mem = SegmentedMemory(5)
    assert mem.segment_length(0) == 5
    assert [mem.get(0, off) for off in range(5)] == [0] * 5


def test_put_then_get():
    mem = SegmentedMemory(4)
    mem.put(0, 2, 0xCAFEBABE)
    assert mem.get(0, 2) == 0xCAFEBABE
    assert mem.get(0, 1) == 0


def test_put_truncates_to_32_bits():
    mem = SegmentedMemory(1)
    mem.put(0, 0, (1 << 32) + 3)
    assert mem.get(0, 0) == 3


def test_map_returns_fresh_zeroed_segment():
    mem = SegmentedMemory(1)
    seg = mem.map(6)
    assert seg != 0
    assert mem.segment_length(seg) == 6
    assert all(mem.get(seg, off) == 0 for off in range(6))


def test_map_order_fills_initial_slots_then_grows():
    mem = SegmentedMemory(1)
    indices = [mem.map(1) for _ in range(9)]
    assert indices == list(range(1, 10))
    assert mem.map(1) == 10
    assert mem.map(1) == 11


def test_unmapped_number_is_reused():
    mem = SegmentedMemory(1)
    for _ in range(10):
        mem.map(2)
    mem.unmap(3)
    assert mem.map(7) == 3
    assert mem.segment_length(3) == 7


def test_freed_numbers_queue_behind_initial_slots():
    mem = SegmentedMemory(1)
    first = mem.map(1)
    mem.unmap(first)
    following = [mem.map(1) for _ in range(9)]
    assert following[-1] == first
    assert first not in following[:-1]


def test_remapped_segment_is_zeroed():
    mem = SegmentedMemory(1)
    for _ in range(10):
        mem.map(3)
    mem.put(5, 1, 42)
    mem.unmap(5)
    assert mem.map(3) == 5
    assert mem.get(5, 1) == 0


def test_cannot_unmap_segment_zero():
    with pytest.raises(SegmentError):
        SegmentedMemory(1).unmap(0)


def test_cannot_unmap_twice():
    mem = SegmentedMemory(1)
    seg = mem.map(1)
    mem.unmap(seg)
    with pytest.raises(SegmentError):
        mem.unmap(seg)


def test_access_to_unmapped_segment():
    mem = SegmentedMemory(1)
    seg = mem.map(2)
    mem.unmap(seg)
    with pytest.raises(SegmentError):
        mem.get(seg, 0)
    with pytest.raises(SegmentError):
        mem.put(seg, 0, 1)
    with pytest.raises(SegmentError):
        mem.get(500, 0)


@pytest.mark.parametrize("off", [3, -1, 100])
def test_offset_out_of_range(off):
    mem = SegmentedMemory(3)
    with pytest.raises(SegmentError):
        mem.get(0, off)
    with pytest.raises(SegmentError):
        mem.put(0, off, 1)


def test_negative_length_rejected():
    mem = SegmentedMemory(0)
    with pytest.raises(ValueError):
        mem.map(-1)


def test_load_into_zero_copies_segment():
    mem = SegmentedMemory(2)
    seg = mem.map(4)
    for off in range(4):
        mem.put(seg, off, off + 100)
    mem.load_into_zero(seg)
    assert mem.segment_length(0) == 4
    assert [mem.get(0, off) for off in range(4)] == [mem.get(seg, off) for off in range(4)]
    mem.put(0, 0, 7)
    assert mem.get(seg, 0) == 100


def test_load_into_zero_from_zero_is_noop():
    mem = SegmentedMemory(3)
    mem.put(0, 1, 9)
    mem.load_into_zero(0)
    assert mem.segment_length(0) == 3
    assert mem.get(0, 1) == 9


def test_load_into_zero_from_unmapped_segment():
    mem = SegmentedMemory(1)
    seg = mem.map(1)
    mem.unmap(seg)
    with pytest.raises(SegmentError):
        mem.load_into_zero(seg)