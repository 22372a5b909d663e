#!/usr/bin/env python3
"""
Benchmark for the Order-Statistic Tree storage.

Reads three fixture files from a directory:
1. write.txt  - initial values, one per line
2. modify.txt - "<index> <token>": erase at index, then insert token
3. read.txt   - "<index> <token>": value expected at index after the modify step

Reports whether every lookup matched and the time spent in storage calls.

Usage:
    python benchmark.py [fixtures_dir]

Environment:
    LOG_LEVEL - logging level (default INFO)
"""

import asyncio
import logging
import os
import sys

from ostree.harness import BenchmarkRunner, load_workload
from ostree.models.exceptions import IndexOutOfRangeError, WorkloadFormatError
from ostree.models.sortedcontainers import OrderStatisticTree
from ostree.models.storage import Storage

DEFAULT_FIXTURES_DIR = "./test_samples"

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


async def main(fixtures_dir: str) -> int:
    print("Start processing")

    try:
        workload = await load_workload(fixtures_dir)
    except (OSError, WorkloadFormatError) as e:
        logger.error(f"Failed to load workload: {e}")
        return 2

    runner = BenchmarkRunner(Storage(OrderStatisticTree()))
    try:
        result = runner.run(workload)
    except IndexOutOfRangeError as e:
        logger.error(f"Workload does not match storage contents: {e}")
        return 1

    print(f"result: {result.passed}. elapsed time {result.elapsed_ms:.3f}ms")
    print("End processing")
    return 0 if result.passed else 1


if __name__ == "__main__":
    fixtures_dir = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_FIXTURES_DIR
    sys.exit(asyncio.run(main(fixtures_dir)))
