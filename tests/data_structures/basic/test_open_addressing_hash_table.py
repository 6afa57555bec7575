import logging
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../../..")))

from algorithms.data_structures.basic.open_addressing_hash_table import (
    OpenAddressingHashTable,
    SlotState,
)


class Collide:
    """哈希值固定的对象，用于强制线性探测。"""

    def __init__(self, value):
        self.value = value

    def __hash__(self):
        return 42

    def __eq__(self, other):
        return isinstance(other, Collide) and self.value == other.value


class NoResizeTable(OpenAddressingHashTable):
    """阈值大于 1，永远不会扩容，用于构造满表。"""

    LOAD_FACTOR_THRESHOLD = 2.0


def test_open_addressing_collisions_then_resize():
    table = OpenAddressingHashTable(initial_capacity=4)
    a, b, c, d = Collide("A"), Collide("B"), Collide("C"), Collide("D")

    assert table.insert(a)
    assert table.insert(b)
    assert table.insert(c)
    assert table.count == 3
    assert table.capacity == 4

    assert table.insert(d)
    assert table.capacity == 8
    assert table.count == 4
    assert all(table.find(x) for x in (a, b, c, d))


def test_open_addressing_reinsert_after_remove():
    table = OpenAddressingHashTable()
    assert table.insert(5)
    assert table.remove(5)
    assert table.tombstone_count() == 1

    assert table.insert(5)
    assert table.count == 1
    assert table.tombstone_count() == 0
    assert table.find(5)


def test_open_addressing_duplicate_behind_tombstone():
    table = OpenAddressingHashTable(initial_capacity=8)
    a, b = Collide("A"), Collide("B")
    table.insert(a)
    table.insert(b)

    assert table.remove(a)
    # 探测会越过 a 留下的墓碑，找到后面的 b
    assert table.find(b)
    assert not table.insert(b)
    assert table.count == 1

    assert table.insert(a)
    assert table.count == 2
    assert table.tombstone_count() == 0


def test_open_addressing_tombstone_reuse():
    n = 10
    table = OpenAddressingHashTable(initial_capacity=16)
    for i in range(n):
        assert table.insert(i)
    for i in range(n):
        assert table.remove(i)
    assert table.is_empty

    for i in range(100, 100 + n):
        assert table.insert(i)
    assert table.count == n
    assert not any(table.find(i) for i in range(n))


def test_open_addressing_all_tombstones_still_accepts_inserts():
    table = NoResizeTable(initial_capacity=4)
    for i in range(4):
        assert table.insert(i)
    for i in range(4):
        assert table.remove(i)
    assert table.tombstone_count() == 4

    assert not table.find(7)
    for i in range(10, 14):
        assert table.insert(i)
    assert table.count == 4


def test_open_addressing_table_full_is_reported(caplog):
    table = NoResizeTable(initial_capacity=4)
    for i in range(4):
        assert table.insert(i)

    with caplog.at_level(logging.WARNING):
        assert not table.insert(99)
    assert table.count == 4
    assert not table.find(99)
    assert not table.remove(99)
    assert "已满" in caplog.text


def test_open_addressing_resize_drops_tombstones():
    table = OpenAddressingHashTable(initial_capacity=8)
    for i in range(5):
        table.insert(i)
    table.remove(0)
    table.remove(1)
    for i in (10, 11, 12):
        assert table.insert(i)
    assert table.capacity == 8
    assert table.count == 6

    assert table.insert(13)
    assert table.capacity == 16
    assert table.count == 7
    assert table.tombstone_count() == 0
    assert all(table.find(i) for i in (2, 3, 4, 10, 11, 12, 13))


def test_open_addressing_clear():
    table = OpenAddressingHashTable(initial_capacity=4)
    for i in range(6):
        table.insert(i)
    table.remove(2)
    capacity = table.capacity

    table.clear()
    assert table.is_empty
    assert table.capacity == capacity
    assert table.tombstone_count() == 0
    assert table.execute()["tombstones"] == 0


def test_open_addressing_capacity_is_clamped():
    assert OpenAddressingHashTable(initial_capacity=0).capacity == 4
    assert OpenAddressingHashTable(initial_capacity=1).capacity == 4
    assert OpenAddressingHashTable().capacity == 16


def test_slot_states_are_distinct():
    assert SlotState.EMPTY is not SlotState.DELETED
