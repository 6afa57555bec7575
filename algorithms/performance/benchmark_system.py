"""
哈希表性能基准测试

对单个哈希表实例的插入、查找、删除分别计时，
并提供测试数据生成与结果汇总功能。
"""

import logging
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np


logger = logging.getLogger(__name__)

OPERATIONS = ("Insert", "Find", "Remove")


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    test_sizes: List[int] = field(default_factory=lambda: [100, 1000, 5000, 10000])
    warmup_runs: int = 3
    seed: Optional[int] = None
    tables: List[str] = field(default_factory=lambda: ["chaining", "open_addressing"])


@dataclass
class PerformanceResult:
    """单个操作的性能记录"""
    data_structure_name: str
    operation_name: str
    elapsed_ms: float
    data_size: int
    success: bool
    timestamp: str = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

    def __str__(self) -> str:
        return (
            f"{self.data_structure_name}.{self.operation_name}: {self.elapsed_ms:.4f}ms "
            f"(Size: {self.data_size}, Success: {self.success})"
        )


class DataGenerator:
    """测试数据生成器"""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    @staticmethod
    def generate_sequential(size: int) -> List[int]:
        """生成 1..size 的有序整数"""
        return list(range(1, size + 1))

    def generate_shuffled(self, size: int) -> List[int]:
        """生成 1..size 的随机排列"""
        return self._rng.permutation(np.arange(1, size + 1)).tolist()


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def run_table_benchmark(
    factory: Callable[[], Any],
    test_data: Sequence[Any],
    warmup_runs: int = 3,
    name: Optional[str] = None,
    table: Any = None,
) -> List[PerformanceResult]:
    """
    对哈希表的插入、查找、删除分别计时

    Args:
        factory: 创建空表的可调用对象，用于预热
        test_data: 测试数据
        warmup_runs: 预热次数，非正数表示不预热
        name: 结果中使用的结构名称，默认取表的类名
        table: 被测实例，为空时由 factory 创建；测试前会被清空

    Returns:
        Insert、Find、Remove 三条性能记录
    """
    if table is None:
        table = factory()
    if name is None:
        name = type(table).__name__
    size = len(test_data)

    for _ in range(max(0, warmup_runs)):
        warmup_table = factory()
        for item in test_data:
            warmup_table.insert(item)

    table.clear()
    results: List[PerformanceResult] = []

    start = time.perf_counter()
    inserted = 0
    for item in test_data:
        if table.insert(item):
            inserted += 1
    results.append(PerformanceResult(name, "Insert", _elapsed_ms(start), size, inserted > 0))

    start = time.perf_counter()
    all_found = True
    for item in test_data:
        if not table.find(item):
            all_found = False
    results.append(PerformanceResult(name, "Find", _elapsed_ms(start), size, all_found))

    start = time.perf_counter()
    for item in test_data:
        table.remove(item)
    results.append(PerformanceResult(name, "Remove", _elapsed_ms(start), size, table.is_empty))

    for result in results:
        logger.info(str(result))
    return results


def summarize(results: Sequence[PerformanceResult]) -> Dict[str, Dict[str, float]]:
    """按操作汇总耗时统计（毫秒）"""
    groups: Dict[str, List[float]] = {}
    for result in results:
        groups.setdefault(result.operation_name, []).append(result.elapsed_ms)

    summary = {}
    for operation, times in groups.items():
        summary[operation] = {
            "samples": len(times),
            "mean": statistics.mean(times),
            "median": statistics.median(times),
            "min": min(times),
            "max": max(times),
        }
    return summary


class HashTableBenchmark:
    """
    哈希表基准测试运行器

    对每个测试规模分别使用有序数据和随机数据运行所有选定的哈希表。
    """

    def __init__(self, factories: Dict[str, Callable[[], Any]], config: Optional[BenchmarkConfig] = None):
        """
        Args:
            factories: 表名到工厂函数的映射
            config: 测试配置
        """
        self.factories = factories
        self.config = config or BenchmarkConfig()
        self.data_generator = DataGenerator(self.config.seed)

    def run(self) -> List[PerformanceResult]:
        """运行全部配置的基准测试"""
        all_results: List[PerformanceResult] = []
        selected = {k: v for k, v in self.factories.items() if k in self.config.tables}
        if not selected:
            logger.warning(f"没有可运行的哈希表: {self.config.tables}")
            return all_results

        for size in self.config.test_sizes:
            datasets = {
                "sequential": self.data_generator.generate_sequential(size),
                "shuffled": self.data_generator.generate_shuffled(size),
            }
            for pattern, data in datasets.items():
                logger.info(f"测试数据: {pattern}, 大小: {size}")
                for table_name, factory in selected.items():
                    all_results.extend(
                        run_table_benchmark(
                            factory,
                            data,
                            warmup_runs=self.config.warmup_runs,
                            name=table_name,
                        )
                    )
        return all_results
