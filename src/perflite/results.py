"""Benchmark result record.

A ``BenchmarkResult`` is created once per run, after the reducer has
populated it, and is immutable from then on.  The raw samples are kept
so callers can inspect or re-reduce them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from perflite.stats import summarize
from perflite.units import TimeUnit


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one benchmark run."""

    label: str
    samples: tuple[int, ...]  # nanoseconds, one per measured invocation
    min_time: float = 0.0
    mean_time: float = 0.0
    stddev_time: float = 0.0
    ops_per_sec: float = 0.0  # always derived from the nanosecond mean
    unit: TimeUnit = TimeUnit.NANOSECONDS

    @classmethod
    def from_samples(
        cls,
        label: str,
        samples: Sequence[int],
        unit: TimeUnit = TimeUnit.NANOSECONDS,
    ) -> BenchmarkResult:
        """Reduce *samples* and build the populated record."""
        frozen = tuple(samples)
        summary = summarize(frozen, unit, label=label)
        return cls(
            label=label,
            samples=frozen,
            min_time=summary.min_time,
            mean_time=summary.mean_time,
            stddev_time=summary.stddev_time,
            ops_per_sec=summary.ops_per_sec,
            unit=unit,
        )

    @property
    def n_samples(self) -> int:
        """Number of measured invocations."""
        return len(self.samples)

    @property
    def has_samples(self) -> bool:
        """False if nothing was measured; the statistics are then meaningless."""
        return bool(self.samples)

    @property
    def total_time_ns(self) -> int:
        """Sum of all measured samples in nanoseconds."""
        return sum(self.samples)

    def to_dict(self, *, include_samples: bool = False) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        d: dict[str, Any] = {
            "label": self.label,
            "unit": self.unit.symbol,
            "n_samples": self.n_samples,
            "min": round(self.min_time, 6),
            "mean": round(self.mean_time, 6),
            "stddev": round(self.stddev_time, 6),
            "ops_per_sec": round(self.ops_per_sec, 3),
        }
        if include_samples:
            d["samples_ns"] = list(self.samples)
        return d
