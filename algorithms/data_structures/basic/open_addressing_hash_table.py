from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from algorithms.data_structures.basic.hashing import (
    DEFAULT_CAPACITY,
    OPEN_ADDRESSING_LOAD_FACTOR,
    HashTableBase,
    clamp_capacity,
    same_element,
)

logger = logging.getLogger(__name__)


class SlotState(Enum):
    """不携带元素的槽位标记。"""
    EMPTY = "empty"
    DELETED = "deleted"


@dataclass(frozen=True)
class Occupied:
    """已占用的槽位，总是携带一个元素。"""
    value: Any


Slot = Union[SlotState, Occupied]


class OpenAddressingHashTable(HashTableBase):
    """基于开放寻址（线性探测）实现的哈希集合。

    所有元素存放在一个扁平的槽位数组中。发生冲突时依次检查下一个槽位
    （下标加一后对容量取模），直到找到目标或空槽。

    槽位有三种状态：
        - SlotState.EMPTY: 从未使用，探测到这里即可停止
        - Occupied(value): 存放一个元素
        - SlotState.DELETED: 墓碑，删除后留下，探测会越过它继续

    墓碑在插入时可以被复用，并在扩容时被全部回收。

    时间复杂度:
        - insert / find / remove: 平均 O(1)，负载较高时退化为 O(n)
        - 扩容: O(n)
    空间复杂度: O(n)，比拉链法更利于缓存局部性
    """

    LOAD_FACTOR_THRESHOLD = OPEN_ADDRESSING_LOAD_FACTOR

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """初始化哈希表。

        参数:
            initial_capacity: 初始槽位数量，小于 4 时按 4 处理
        """
        self._capacity = clamp_capacity(initial_capacity)
        self._slots: List[Slot] = [SlotState.EMPTY] * self._capacity
        self._count = 0

    def _locate(self, item: Any) -> Optional[int]:
        """沿探测序列查找元素所在槽位。

        遇到空槽即停止；墓碑和其他元素会被跳过；最多探测一整圈。

        返回:
            Optional[int]: 元素所在下标，未找到返回 None
        """
        start = self._hash(item)
        index = start
        while True:
            slot = self._slots[index]
            if slot is SlotState.EMPTY:
                return None
            if isinstance(slot, Occupied) and same_element(slot.value, item):
                return index
            index = (index + 1) % self._capacity
            if index == start:
                return None

    def insert(self, item: Any) -> bool:
        """插入元素。

        返回:
            bool: 插入成功返回 True；元素已存在或表已满返回 False
        """
        if self._needs_resize():
            self._resize()
        return self._place(item)

    def _place(self, item: Any) -> bool:
        start = self._hash(item)
        index = start
        tombstone: Optional[int] = None
        target: Optional[int] = None

        while True:
            slot = self._slots[index]
            if slot is SlotState.EMPTY:
                target = index
                break
            if slot is SlotState.DELETED:
                if tombstone is None:
                    tombstone = index
            elif same_element(slot.value, item):
                return False
            index = (index + 1) % self._capacity
            if index == start:
                break

        # 确认不存在重复元素后，优先复用探测路径上的第一个墓碑
        if tombstone is not None:
            target = tombstone
        if target is None:
            logger.warning(
                "OpenAddressingHashTable 已满：容量 %d，元素 %d", self._capacity, self._count
            )
            return False

        self._slots[target] = Occupied(item)
        self._count += 1
        return True

    def find(self, item: Any) -> bool:
        """判断元素是否存在，不修改表。"""
        return self._locate(item) is not None

    def remove(self, item: Any) -> bool:
        """删除元素并在原位置留下墓碑。

        返回:
            bool: 删除成功返回 True，元素不存在返回 False
        """
        index = self._locate(item)
        if index is None:
            return False
        self._slots[index] = SlotState.DELETED
        self._count -= 1
        return True

    def clear(self) -> None:
        """将所有槽位重置为空，容量保持不变。"""
        self._slots = [SlotState.EMPTY] * self._capacity
        self._count = 0

    def tombstone_count(self) -> int:
        """当前墓碑槽位的数量。"""
        return sum(1 for slot in self._slots if slot is SlotState.DELETED)

    def _resize(self) -> None:
        """将容量翻倍，只重新插入已占用的槽位，墓碑随之丢弃。"""
        old_slots = self._slots
        old_count = self._count
        self._capacity *= 2
        self._slots = [SlotState.EMPTY] * self._capacity
        self._count = 0

        for slot in old_slots:
            if isinstance(slot, Occupied):
                self._place(slot.value)

        logger.debug(
            "OpenAddressingHashTable 扩容至 %d 个槽位，重新哈希 %d 个元素",
            self._capacity,
            old_count,
        )

    def execute(self, *args, **kwargs) -> Dict[str, Any]:
        """返回统计快照，额外包含墓碑数量。"""
        stats = super().execute(*args, **kwargs)
        stats["tombstones"] = self.tombstone_count()
        return stats
