"""
Shared pytest fixtures for order-statistic tree tests.
"""

import os
import random
import string
import tempfile

import pytest

from ostree.models.sortedcontainers import OrderStatisticTree
from ostree.models.storage import Storage


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def tree():
    """Provide a fresh, empty OrderStatisticTree."""
    return OrderStatisticTree()


@pytest.fixture
def abc_tree():
    """Provide a tree built from ["b", "a", "c"]."""
    t = OrderStatisticTree()
    for value in ["b", "a", "c"]:
        t.insert(value)
    return t


@pytest.fixture
def storage():
    """Provide a Storage backed by a fresh OrderStatisticTree."""
    return Storage(OrderStatisticTree())


@pytest.fixture
def random_strings():
    """Provide 1000 distinct random strings with a fixed seed."""
    rng = random.Random(1234)
    values = set()
    while len(values) < 1000:
        values.add("".join(rng.choices(string.ascii_letters + string.digits, k=8)))
    return list(values)


def write_fixture_dir(
    directory: str,
    writes: list[str],
    modifications: list[tuple[int, str]],
    reads: list[tuple[int, str]],
) -> None:
    """Write write.txt, modify.txt and read.txt into directory."""
    with open(os.path.join(directory, "write.txt"), "w", encoding="utf-8") as f:
        f.write("\n".join(writes) + "\n")
    with open(os.path.join(directory, "modify.txt"), "w", encoding="utf-8") as f:
        f.write("".join(f"{i} {token}\n" for i, token in modifications))
    with open(os.path.join(directory, "read.txt"), "w", encoding="utf-8") as f:
        f.write("".join(f"{i} {token}\n" for i, token in reads))


def build_consistent_workload(seed: int, initial: int, steps: int):
    """
    Generate a workload whose read expectations are derived from a sorted list model.

    Returns:
        (writes, modifications, reads)
    """
    rng = random.Random(seed)
    alphabet = string.ascii_lowercase
    used: set[str] = set()

    def fresh() -> str:
        while True:
            token = "".join(rng.choices(alphabet, k=6))
            if token not in used:
                used.add(token)
                return token

    writes = [fresh() for _ in range(initial)]
    model = sorted(writes)
    modifications = []
    reads = []
    for _ in range(steps):
        index = rng.randrange(len(model))
        token = fresh()
        model.pop(index)
        model.append(token)
        model.sort()
        read_index = rng.randrange(len(model))
        modifications.append((index, token))
        reads.append((read_index, model[read_index]))
    return writes, modifications, reads
