"""Tests for perflite.display — terminal formatting of results."""

from __future__ import annotations

import io
import unittest

from perflite.display import format_result, format_results_table, format_table, print_result
from perflite.results import BenchmarkResult
from perflite.units import TimeUnit


def _result(label: str = "deterministic", unit: TimeUnit = TimeUnit.MICROSECONDS) -> BenchmarkResult:
    return BenchmarkResult.from_samples(label, [1000, 2000, 3000], unit)


class TestFormatResult(unittest.TestCase):
    def test_layout(self) -> None:
        text = format_result(_result())
        self.assertEqual(
            text,
            "Benchmark: deterministic\n"
            "  Min:      1.000 µs\n"
            "  Mean:     2.000 µs\n"
            "  StdDev:   1.000 µs\n"
            "  Ops/sec:  500000.000\n",
        )

    def test_precision_follows_unit(self) -> None:
        self.assertIn("Mean:     2000.00 ns", format_result(_result(unit=TimeUnit.NANOSECONDS)))
        self.assertIn("Mean:     0.000000 s", format_result(_result(unit=TimeUnit.SECONDS)))
        self.assertIn("Mean:     0.0000 ms", format_result(_result(unit=TimeUnit.MILLISECONDS)))

    def test_print_result(self) -> None:
        buf = io.StringIO()
        print_result(_result(), file=buf)
        self.assertTrue(buf.getvalue().startswith("Benchmark: deterministic\n"))
        self.assertTrue(buf.getvalue().endswith("\n\n"))


class TestFormatTable(unittest.TestCase):
    def test_empty_headers(self) -> None:
        self.assertEqual(format_table([], []), "")

    def test_alignment(self) -> None:
        text = format_table(["a", "num"], [["x", "1"], ["long", "100"]], alignments=["l", "r"])
        lines = text.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[2].endswith("  1"))
        self.assertTrue(lines[3].endswith("100"))

    def test_short_rows_are_padded(self) -> None:
        text = format_table(["a", "b"], [["only"]])
        self.assertIn("only", text)


class TestFormatResultsTable(unittest.TestCase):
    def test_contains_all_results(self) -> None:
        text = format_results_table([_result("first"), _result("second")])
        self.assertIn("first", text)
        self.assertIn("second", text)
        self.assertIn("Ops/sec", text)
        self.assertIn("500,000", text)
        self.assertIn("2.000 µs", text)


if __name__ == "__main__":
    unittest.main()
