import pytest

from baamboo.freelist import FreeList


def test_sequential_allocation():
    fl = FreeList()
    assert [fl.allocate() for _ in range(3)] == [0, 1, 2]
    assert fl.size() == 3
    assert fl.free_count() == 0


def test_released_indices_are_reused_lifo():
    fl = FreeList()
    for _ in range(4):
        fl.allocate()
    fl.release(1)
    fl.release(3)
    assert fl.free_count() == 2
    assert fl.allocate() == 3
    assert fl.allocate() == 1
    assert fl.allocate() == 4
    assert fl.size() == 5


def test_release_out_of_range():
    fl = FreeList()
    fl.allocate()
    with pytest.raises(IndexError):
        fl.release(1)
    with pytest.raises(IndexError):
        fl.release(-1)


def test_clear_resets():
    fl = FreeList()
    fl.allocate()
    fl.allocate()
    fl.release(0)
    fl.clear()
    assert fl.size() == 0
    assert fl.free_count() == 0
    assert fl.allocate() == 0


def test_reserve_rejects_negative():
    fl = FreeList()
    fl.reserve(1024)
    assert fl.free_count() == 0
    with pytest.raises(ValueError):
        fl.reserve(-1)