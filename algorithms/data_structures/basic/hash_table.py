from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from algorithms.data_structures.basic.hashing import (
    CHAINING_LOAD_FACTOR,
    DEFAULT_CAPACITY,
    HashTableBase,
    clamp_capacity,
    same_element,
)

logger = logging.getLogger(__name__)


@dataclass
class _ChainNode:
    """桶内单向链表的节点。

    属性:
        value: 节点存储的元素
        next: 链中的下一个节点，链尾为 None
    """
    value: Any
    next: Optional[_ChainNode] = None


class ChainedHashTable(HashTableBase):
    """基于拉链法实现的哈希集合。

    每个桶保存一条单向链表，映射到同一个桶的元素都挂在这条链上。
    元素本身就是查找键，不允许重复。

    主要操作：
        - insert: 插入元素，重复元素返回 False
        - find: 判断元素是否存在
        - remove: 删除元素，不存在时返回 False
        - clear: 清空所有桶

    当 count / capacity 达到 LOAD_FACTOR_THRESHOLD 时，下一次插入会先把
    桶数量翻倍并重新哈希全部元素。

    时间复杂度:
        - insert / find / remove: 平均 O(1)，所有元素冲突时 O(n)
        - 扩容: O(n)，在触发扩容的那次 insert 中同步完成
    空间复杂度: O(n)
    """

    LOAD_FACTOR_THRESHOLD = CHAINING_LOAD_FACTOR

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """初始化哈希表。

        参数:
            initial_capacity: 初始桶数量，小于 4 时按 4 处理
        """
        self._capacity = clamp_capacity(initial_capacity)
        self._buckets: List[Optional[_ChainNode]] = [None] * self._capacity
        self._count = 0

    def insert(self, item: Any) -> bool:
        """插入元素。

        返回:
            bool: 插入成功返回 True，元素已存在返回 False
        """
        if self._needs_resize():
            self._resize()
        return self._place(item)

    def _place(self, item: Any) -> bool:
        index = self._hash(item)
        current = self._buckets[index]
        while current is not None:
            if same_element(current.value, item):
                return False
            current = current.next

        # 头插法
        self._buckets[index] = _ChainNode(item, self._buckets[index])
        self._count += 1
        return True

    def find(self, item: Any) -> bool:
        """判断元素是否存在，不修改表。"""
        current = self._buckets[self._hash(item)]
        while current is not None:
            if same_element(current.value, item):
                return True
            current = current.next
        return False

    def remove(self, item: Any) -> bool:
        """删除元素。

        返回:
            bool: 删除成功返回 True，元素不存在返回 False
        """
        index = self._hash(item)
        current = self._buckets[index]
        prev: Optional[_ChainNode] = None

        while current is not None:
            if same_element(current.value, item):
                if prev is not None:
                    prev.next = current.next
                else:
                    self._buckets[index] = current.next
                self._count -= 1
                return True
            prev = current
            current = current.next
        return False

    def clear(self) -> None:
        """清空所有桶，容量保持不变。"""
        self._buckets = [None] * self._capacity
        self._count = 0

    def _resize(self) -> None:
        """将桶数量翻倍并重新哈希已有元素。"""
        old_buckets = self._buckets
        old_count = self._count
        self._capacity *= 2
        self._buckets = [None] * self._capacity
        self._count = 0

        for head in old_buckets:
            current = head
            while current is not None:
                self._place(current.value)
                current = current.next

        logger.debug(
            "ChainedHashTable 扩容至 %d 个桶，重新哈希 %d 个元素", self._capacity, old_count
        )
