#!/usr/bin/env python3
"""Benchmark insert/find/remove on the chaining and open addressing hash tables."""
from __future__ import annotations

import argparse
from typing import List, Optional

import structlog

from algorithms.data_structures.basic.hash_table import ChainedHashTable
from algorithms.data_structures.basic.open_addressing_hash_table import OpenAddressingHashTable
from algorithms.performance.benchmark_system import (
    OPERATIONS,
    BenchmarkConfig,
    HashTableBenchmark,
    summarize,
)
from common.logging_config import configure_logging

logger = structlog.get_logger("hash-table-benchmark")

FACTORIES = {
    "chaining": ChainedHashTable,
    "open_addressing": OpenAddressingHashTable,
}


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", type=_positive_int, nargs="+", default=[100, 1000, 5000, 10000])
    parser.add_argument("--table", choices=[*FACTORIES, "all"], default="all")
    parser.add_argument("--warmup", type=int, default=3, help="Warmup runs per table and data set")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shuffled data")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", choices=["json", "keyvalue", "console"], default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, fmt=args.log_format)

    tables = list(FACTORIES) if args.table == "all" else [args.table]
    config = BenchmarkConfig(
        test_sizes=args.sizes,
        warmup_runs=args.warmup,
        seed=args.seed,
        tables=tables,
    )
    logger.info("benchmark_start", sizes=config.test_sizes, tables=tables, warmup=config.warmup_runs)

    results = HashTableBenchmark(FACTORIES, config).run()
    for result in results:
        print(result)

    failed = [r for r in results if not r.success]
    for name in tables:
        summary = summarize([r for r in results if r.data_structure_name == name])
        for operation in OPERATIONS:
            if operation in summary:
                logger.info("benchmark_summary", table=name, operation=operation, **summary[operation])

    if failed:
        logger.error("benchmark_failures", count=len(failed))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
