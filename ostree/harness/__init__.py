"""
Benchmark harness: fixture loading and the timed remove/insert/lookup loop.
"""

from ostree.harness.runner import BenchmarkResult, BenchmarkRunner
from ostree.harness.workload import Workload, load_workload, read_pairs, read_tokens

__all__ = [
    "BenchmarkResult",
    "BenchmarkRunner",
    "Workload",
    "load_workload",
    "read_pairs",
    "read_tokens",
]
