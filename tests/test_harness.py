"""
Tests for the benchmark harness: fixture parsing, workload loading and the timed loop.
"""

import os

import pytest

import benchmark
from conftest import build_consistent_workload, write_fixture_dir
from ostree.harness import BenchmarkRunner, Workload, load_workload, read_pairs, read_tokens
from ostree.models.exceptions import IndexOutOfRangeError, WorkloadFormatError
from ostree.models.sortedcontainers import OrderStatisticTree
from ostree.models.storage import Storage


class TestFixtureParsing:
    """Tests for read_tokens and read_pairs."""

    def test_read_tokens(self, temp_dir):
        """Test tokens are read one per line, blank lines skipped."""
        path = os.path.join(temp_dir, "write.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("bravo\n\nalpha\ncharlie")

        assert read_tokens(path) == ["bravo", "alpha", "charlie"]

    def test_read_pairs(self, temp_dir):
        """Test index/token pairs are parsed."""
        path = os.path.join(temp_dir, "modify.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("0 alpha\n12 bravo\n")

        assert read_pairs(path) == [(0, "alpha"), (12, "bravo")]

    def test_crlf_and_bom(self, temp_dir):
        """Test Windows line endings and a UTF-8 BOM are tolerated."""
        path = os.path.join(temp_dir, "read.txt")
        with open(path, "wb") as f:
            f.write(b"\xef\xbb\xbf3 \xd0\xb4\r\n4 zz\r\n")

        assert read_pairs(path) == [(3, "д"), (4, "zz")]

    @pytest.mark.parametrize("line", ["abc", "1", "-1 token", "1 two tokens", "x token"])
    def test_malformed_line(self, temp_dir, line):
        """Test malformed lines raise WorkloadFormatError with the line number."""
        path = os.path.join(temp_dir, "modify.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"0 ok\n{line}\n")

        with pytest.raises(WorkloadFormatError) as exc_info:
            read_pairs(path)

        assert exc_info.value.line_no == 2
        assert exc_info.value.path == path


class TestLoadWorkload:
    """Tests for async workload loading."""

    async def test_load(self, temp_dir):
        """Test all three files are loaded."""
        write_fixture_dir(temp_dir, ["b", "a"], [(0, "c")], [(1, "c")])

        workload = await load_workload(temp_dir)

        assert workload.writes == ["b", "a"]
        assert workload.modifications == [(0, "c")]
        assert workload.reads == [(1, "c")]

    async def test_missing_file(self, temp_dir):
        """Test a missing fixture file propagates the OS error."""
        with pytest.raises(FileNotFoundError):
            await load_workload(temp_dir)

    def test_steps_truncate_to_shorter(self):
        workload = Workload(
            writes=[], modifications=[(0, "a"), (0, "b")], reads=[(0, "a")]
        )
        assert workload.steps() == [((0, "a"), (0, "a"))]


class TestBenchmarkRunner:
    """Tests for the timed remove/insert/lookup loop."""

    def test_consistent_workload_passes(self):
        """Test a workload derived from a sorted model passes every step."""
        writes, modifications, reads = build_consistent_workload(seed=3, initial=200, steps=300)
        runner = BenchmarkRunner(Storage(OrderStatisticTree()))

        result = runner.run(Workload(writes, modifications, reads))

        assert result.passed
        assert result.operations == 300
        assert result.failed_at is None
        assert result.elapsed_ns > 0
        assert runner.storage.size() == 200
        runner.storage.container.validate()

    def test_mismatch_stops_run(self):
        """Test the run stops at the first wrong lookup."""
        writes, modifications, reads = build_consistent_workload(seed=5, initial=50, steps=20)
        index, _ = reads[9]
        reads[9] = (index, "not-a-value")
        runner = BenchmarkRunner(Storage(OrderStatisticTree()))

        result = runner.run(Workload(writes, modifications, reads))

        assert not result.passed
        assert result.failed_at == 10
        assert result.operations == 10

    def test_out_of_range_index_propagates(self):
        """Test an erase index beyond the storage size raises."""
        runner = BenchmarkRunner(Storage(OrderStatisticTree()))

        with pytest.raises(IndexOutOfRangeError):
            runner.run(Workload(["a"], [(5, "b")], [(0, "a")]))

    def test_elapsed_ms(self):
        runner = BenchmarkRunner(Storage(OrderStatisticTree()))
        result = runner.run(Workload(["a"], [], []))
        assert result.passed
        assert result.elapsed_ms == result.elapsed_ns / 1_000_000


class TestBenchmarkMain:
    """Tests for the command line entry point."""

    async def test_main_passes(self, temp_dir, capsys):
        """Test a consistent fixture directory exits 0."""
        writes, modifications, reads = build_consistent_workload(seed=11, initial=30, steps=40)
        write_fixture_dir(temp_dir, writes, modifications, reads)

        assert await benchmark.main(temp_dir) == 0
        assert "result: True." in capsys.readouterr().out

    async def test_main_fails_on_mismatch(self, temp_dir):
        """Test a wrong expectation exits 1."""
        write_fixture_dir(temp_dir, ["a", "b"], [(0, "c")], [(0, "a")])

        assert await benchmark.main(temp_dir) == 1

    async def test_main_missing_dir(self, temp_dir):
        """Test a missing fixture directory exits 2."""
        assert await benchmark.main(os.path.join(temp_dir, "missing")) == 2
