"""
Workload - the three benchmark fixture sequences and their file parsers.

File formats:
- write.txt: one token per line
- modify.txt / read.txt: "<index> <token>" per line
"""

import asyncio
import logging
import os
from dataclasses import dataclass, field

from ostree.models.exceptions import WorkloadFormatError

logger = logging.getLogger(__name__)

WRITE_FILE = "write.txt"
MODIFY_FILE = "modify.txt"
READ_FILE = "read.txt"


@dataclass
class Workload:
    """Initial values plus the aligned modify/read pair sequences."""

    writes: list[str] = field(default_factory=list)
    modifications: list[tuple[int, str]] = field(default_factory=list)
    reads: list[tuple[int, str]] = field(default_factory=list)

    def steps(self) -> list[tuple[tuple[int, str], tuple[int, str]]]:
        """Aligned (modify, read) pairs, truncated to the shorter sequence."""
        return list(zip(self.modifications, self.reads))


def _lines(path: str):
    # utf-8-sig drops a leading BOM; newline="" keeps \r so it can be stripped explicitly
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        for line_no, line in enumerate(f, start=1):
            yield line_no, line.rstrip("\n").rstrip("\r")


def read_tokens(path: str) -> list[str]:
    """
    Read one token per line, skipping blank lines.

    Args:
        path: Path to the fixture file.

    Returns:
        Tokens in file order.
    """
    return [line.strip() for _, line in _lines(path) if line.strip()]


def read_pairs(path: str) -> list[tuple[int, str]]:
    """
    Read "<index> <token>" pairs, skipping blank lines.

    Args:
        path: Path to the fixture file.

    Returns:
        (index, token) tuples in file order.

    Raises:
        WorkloadFormatError: If a line does not hold a non-negative index and a token.
    """
    pairs = []
    for line_no, line in _lines(path):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2 or not parts[0].isdecimal():
            raise WorkloadFormatError(path, line_no, line)
        pairs.append((int(parts[0]), parts[1]))
    return pairs


async def load_workload(directory: str) -> Workload:
    """
    Load the three fixture files from a directory - parsing runs in the thread pool.

    Args:
        directory: Directory holding write.txt, modify.txt and read.txt.

    Returns:
        The parsed Workload.
    """
    loop = asyncio.get_running_loop()
    writes, modifications, reads = await asyncio.gather(
        loop.run_in_executor(None, read_tokens, os.path.join(directory, WRITE_FILE)),
        loop.run_in_executor(None, read_pairs, os.path.join(directory, MODIFY_FILE)),
        loop.run_in_executor(None, read_pairs, os.path.join(directory, READ_FILE)),
    )

    if len(modifications) != len(reads):
        logger.warning(
            f"modify has {len(modifications)} entries but read has {len(reads)}; "
            f"extra entries are ignored"
        )

    logger.debug(
        f"Loaded workload from {directory}: {len(writes)} writes, "
        f"{len(modifications)} modifications, {len(reads)} reads"
    )
    return Workload(writes=writes, modifications=modifications, reads=reads)
