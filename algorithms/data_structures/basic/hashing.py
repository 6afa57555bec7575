"""哈希表共享的哈希与扩容策略。

两种冲突解决策略（拉链法与线性探测）使用相同的取模哈希函数、
最小容量约束以及基于负载因子的翻倍扩容规则。
"""
import logging
from typing import Any, Dict, Final, List, Sequence

from algorithms.base import DataStructure
from algorithms.performance.benchmark_system import PerformanceResult, run_table_benchmark

logger = logging.getLogger(__name__)

MIN_CAPACITY: Final[int] = 4
DEFAULT_CAPACITY: Final[int] = 16
CHAINING_LOAD_FACTOR: Final[float] = 0.75
OPEN_ADDRESSING_LOAD_FACTOR: Final[float] = 0.70


def clamp_capacity(requested: int) -> int:
    """将请求的初始容量限制在最小容量之上。

    非正数或过小的容量不会报错，而是被提升到 MIN_CAPACITY。
    """
    if requested < MIN_CAPACITY:
        logger.debug("初始容量 %s 过小，调整为 %s", requested, MIN_CAPACITY)
        return MIN_CAPACITY
    return requested


def bucket_index(item: Any, capacity: int) -> int:
    """计算元素在容量为 capacity 的表中的起始下标。

    Python 整数没有溢出，abs 对任何哈希值都得到非负结果，
    因此最小负哈希值也能映射到 [0, capacity) 内。

    异常:
        TypeError: 元素不可哈希
    """
    return abs(hash(item)) % capacity


def needs_resize(count: int, capacity: int, threshold: float) -> bool:
    """判断下一次插入前是否需要先扩容。"""
    return count / capacity >= threshold


def same_element(stored: Any, item: Any) -> bool:
    """判断槽位或节点中的元素是否与 item 相同。

    先比较身份再比较相等，与内置 set 一致，
    因此 float("nan") 这类不等于自身的值也能被找到。
    """
    return stored is item or stored == item


class HashTableBase(DataStructure):
    """两种哈希表共享的容量、哈希与统计逻辑。

    子类负责维护 _capacity 与 _count，并实现具体的冲突解决策略。
    """

    LOAD_FACTOR_THRESHOLD: float

    _capacity: int
    _count: int

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._count / self._capacity

    def _hash(self, item: Any) -> int:
        """计算元素的起始下标。"""
        return bucket_index(item, self._capacity)

    def _needs_resize(self) -> bool:
        return needs_resize(self._count, self._capacity, self.LOAD_FACTOR_THRESHOLD)

    def run_benchmark(self, test_data: Sequence[Any], warmup_runs: int = 3) -> List[PerformanceResult]:
        """对插入、查找、删除分别计时。"""
        return run_table_benchmark(type(self), test_data, warmup_runs=warmup_runs, table=self)

    def execute(self, *args, **kwargs) -> Dict[str, Any]:
        """返回当前哈希表的统计快照。"""
        stats = super().execute(*args, **kwargs)
        stats["capacity"] = self._capacity
        stats["load_factor"] = self.load_factor
        return stats
