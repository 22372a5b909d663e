"""
BenchmarkRunner - drives a Storage through a workload and times it.
"""

import logging
import time
from dataclasses import dataclass

from ostree.harness.workload import Workload
from ostree.models.storage import Storage

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Outcome of a benchmark run."""

    passed: bool
    operations: int
    elapsed_ns: int
    failed_at: int | None = None

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000


class BenchmarkRunner:
    """
    Runs the remove/insert/lookup loop against a Storage.

    For every aligned (modify, read) pair:
    1. erase(modify.index)
    2. insert(modify.token)
    3. get(read.index) and compare with read.token

    Only these three calls are timed. The run stops at the first mismatch.
    """

    def __init__(self, storage: Storage, progress_percent: int = 5) -> None:
        """
        Initialize BenchmarkRunner.

        Args:
            storage: The store under test.
            progress_percent: Log progress every this many percent of the steps.
        """
        self._storage = storage
        self._progress_percent = progress_percent

    @property
    def storage(self) -> Storage:
        return self._storage

    def populate(self, writes: list[str]) -> None:
        """Bulk-insert the initial values."""
        for value in writes:
            self._storage.insert(value)
        logger.info(f"Populated storage with {self._storage.size()} values")

    def run(self, workload: Workload) -> BenchmarkResult:
        """
        Populate the storage and run every step of the workload.

        Args:
            workload: The parsed fixture sequences.

        Returns:
            BenchmarkResult with pass/fail, step count and timed nanoseconds.
        """
        self.populate(workload.writes)

        steps = workload.steps()
        total = len(steps)
        progress_every = max(total * self._progress_percent // 100, 1)
        elapsed_ns = 0

        for step, ((modify_index, token), (read_index, expected)) in enumerate(steps, start=1):
            op_start = time.perf_counter_ns()

            self._storage.erase(modify_index)
            self._storage.insert(token)
            actual = self._storage.get(read_index)

            elapsed_ns += time.perf_counter_ns() - op_start

            if actual != expected:
                logger.error(
                    f"Step {step}: get({read_index}) returned {actual!r}, expected {expected!r}"
                )
                return BenchmarkResult(
                    passed=False, operations=step, elapsed_ns=elapsed_ns, failed_at=step
                )

            if step % progress_every == 0:
                logger.info(
                    f"time: {elapsed_ns // 1_000_000}ms progress: {step} / {total}"
                )

        return BenchmarkResult(passed=True, operations=total, elapsed_ns=elapsed_ns)
