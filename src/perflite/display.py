"""Terminal display formatting for benchmark results.

Produces the per-benchmark summary block and an aligned table when
several benchmarks are reported together.  No external dependencies.
"""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from perflite.results import BenchmarkResult


# ---------------------------------------------------------------------------
# Table formatting utilities
# ---------------------------------------------------------------------------


def format_table(
    headers: list[str],
    rows: list[list[str]],
    *,
    alignments: list[str] | None = None,
    indent: int = 2,
) -> str:
    """Format a list of rows as an aligned text table.

    Column widths are computed from content.  Columns marked ``'r'`` in
    *alignments* are right-aligned, everything else is left-aligned.
    """
    if not headers:
        return ""

    ncols = len(headers)
    aligns = list(alignments or [])
    aligns += ["l"] * (ncols - len(aligns))

    padded_rows = [(list(row) + [""] * ncols)[:ncols] for row in rows]

    widths = [len(h) for h in headers]
    for row in padded_rows:
        for ci, cell in enumerate(row):
            widths[ci] = max(widths[ci], len(cell))

    def _cell(text: str, width: int, align: str) -> str:
        return text.rjust(width) if align == "r" else text.ljust(width)

    prefix = " " * indent
    lines = [prefix + "  ".join(_cell(headers[i], widths[i], aligns[i]) for i in range(ncols))]
    lines.append(prefix + "  ".join("\u2500" * widths[i] for i in range(ncols)))
    for row in padded_rows:
        lines.append(prefix + "  ".join(_cell(row[i], widths[i], aligns[i]) for i in range(ncols)))
    return "\n".join(lines).rstrip()


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


# ---------------------------------------------------------------------------
# Single result display
# ---------------------------------------------------------------------------


def format_result(result: BenchmarkResult) -> str:
    """Format one result as a summary block.

    Min, mean and stddev are printed in the result's unit with a
    unit-dependent number of decimals (2 for ns up to 6 for s)::

        Benchmark: sort
          Min:      812.00 ns
          Mean:     901.37 ns
          StdDev:   55.10 ns
          Ops/sec:  1109424.21
    """
    precision = result.unit.precision
    symbol = result.unit.symbol
    lines = [
        f"Benchmark: {result.label}",
        f"  Min:      {_fmt(result.min_time, precision)} {symbol}",
        f"  Mean:     {_fmt(result.mean_time, precision)} {symbol}",
        f"  StdDev:   {_fmt(result.stddev_time, precision)} {symbol}",
        f"  Ops/sec:  {_fmt(result.ops_per_sec, precision)}",
    ]
    return "\n".join(lines) + "\n"


def print_result(result: BenchmarkResult, file: TextIO | None = None) -> None:
    """Write ``format_result(result)`` followed by a blank line to *file*."""
    stream = file if file is not None else sys.stdout
    stream.write(format_result(result) + "\n")


# ---------------------------------------------------------------------------
# Multi-result display
# ---------------------------------------------------------------------------


def format_results_table(results: Sequence[BenchmarkResult]) -> str:
    """Format several results as one aligned table."""
    headers = ["Benchmark", "Samples", "Min", "Mean", "StdDev", "Ops/sec"]
    rows: list[list[str]] = []
    for r in results:
        precision = r.unit.precision
        symbol = r.unit.symbol
        rows.append(
            [
                r.label,
                str(r.n_samples),
                f"{_fmt(r.min_time, precision)} {symbol}",
                f"{_fmt(r.mean_time, precision)} {symbol}",
                f"{_fmt(r.stddev_time, precision)} {symbol}",
                f"{r.ops_per_sec:,.0f}",
            ]
        )
    return format_table(headers, rows, alignments=["l", "r", "r", "r", "r", "r"])
