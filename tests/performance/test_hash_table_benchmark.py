import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../..")))

import pytest

from algorithms.data_structures.basic.hash_table import ChainedHashTable
from algorithms.data_structures.basic.open_addressing_hash_table import OpenAddressingHashTable
from algorithms.performance.benchmark_system import (
    BenchmarkConfig,
    DataGenerator,
    HashTableBenchmark,
    PerformanceResult,
    run_table_benchmark,
    summarize,
)


@pytest.mark.parametrize("table_cls", [ChainedHashTable, OpenAddressingHashTable])
def test_run_benchmark_reports_three_operations(table_cls):
    table = table_cls()
    table.insert(-1)
    results = table.run_benchmark(list(range(500)), warmup_runs=1)

    assert [r.operation_name for r in results] == ["Insert", "Find", "Remove"]
    assert all(r.success for r in results)
    assert all(r.data_size == 500 for r in results)
    assert all(r.elapsed_ms >= 0 for r in results)
    assert all(r.data_structure_name == table_cls.__name__ for r in results)
    # 计时前会清空实例，结束时全部删除
    assert table.is_empty


def test_run_table_benchmark_with_duplicates_and_no_warmup():
    results = run_table_benchmark(ChainedHashTable, [1, 1, 2], warmup_runs=-2, name="chain")
    insert, find, remove = results
    assert insert.success
    assert find.success
    assert remove.success
    assert insert.data_structure_name == "chain"


def test_run_table_benchmark_empty_data_insert_fails():
    results = run_table_benchmark(OpenAddressingHashTable, [], warmup_runs=0)
    assert not results[0].success
    assert results[1].success
    assert results[2].success


def test_performance_result_str():
    result = PerformanceResult("HashTableChaining", "Insert", 1.23456, 100, True)
    assert str(result) == "HashTableChaining.Insert: 1.2346ms (Size: 100, Success: True)"
    assert result.timestamp is not None


def test_data_generator_shuffled_is_permutation():
    generator = DataGenerator(seed=7)
    data = generator.generate_shuffled(50)
    assert sorted(data) == list(range(1, 51))
    assert DataGenerator(seed=7).generate_shuffled(50) == data
    assert DataGenerator.generate_sequential(3) == [1, 2, 3]


def test_summarize_groups_by_operation():
    results = [
        PerformanceResult("t", "Insert", 1.0, 10, True),
        PerformanceResult("t", "Insert", 3.0, 10, True),
        PerformanceResult("t", "Find", 2.0, 10, True),
    ]
    summary = summarize(results)
    assert summary["Insert"]["mean"] == 2.0
    assert summary["Insert"]["samples"] == 2
    assert summary["Find"]["min"] == summary["Find"]["max"] == 2.0


def test_hash_table_benchmark_runs_selected_tables():
    config = BenchmarkConfig(test_sizes=[10, 20], warmup_runs=0, seed=1, tables=["chaining"])
    runner = HashTableBenchmark(
        {"chaining": ChainedHashTable, "open_addressing": OpenAddressingHashTable}, config
    )
    results = runner.run()

    # 2 种规模 x 2 种数据 x 3 个操作
    assert len(results) == 12
    assert {r.data_structure_name for r in results} == {"chaining"}
    assert all(r.success for r in results)


def test_hash_table_benchmark_without_matching_tables():
    config = BenchmarkConfig(test_sizes=[10], tables=["missing"])
    assert HashTableBenchmark({"chaining": ChainedHashTable}, config).run() == []
