"""Reduction of raw latency samples to summary statistics.

The reducer is a pure function: given the nanosecond samples recorded by
the runner and a reporting unit, it produces min, mean, sample standard
deviation and throughput.  Two ordering rules matter for bit-exact
results with truncating unit conversion:

- The mean converts the *sum* of all samples to the reporting unit and
  then divides by the count.  Converting each sample first would
  accumulate one truncation error per sample.
- Throughput is always derived from the nanosecond mean, so ops/sec is
  the same whichever reporting unit is chosen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from perflite.logging import get_logger
from perflite.units import TimeUnit, to_unit

log = get_logger("stats")

# Nanosecond means at or below this are treated as zero for ops/sec.
NEGLIGIBLE_MEAN_NS = 1e-9

NS_PER_SECOND = 1e9


@dataclass(frozen=True)
class SampleSummary:
    """Summary statistics for one sample sequence."""

    n: int
    min_time: float
    mean_time: float
    stddev_time: float
    ops_per_sec: float
    unit: TimeUnit

    @property
    def empty(self) -> bool:
        """True if the summary was computed from no samples at all."""
        return self.n == 0


def summarize(
    samples_ns: Sequence[int],
    unit: TimeUnit,
    *,
    label: str = "",
) -> SampleSummary:
    """Reduce nanosecond samples to statistics expressed in *unit*.

    Args:
        samples_ns: Per-invocation elapsed times in integer nanoseconds.
        unit: Reporting unit for min, mean and stddev.
        label: Benchmark label, used only in the empty-sample warning.

    Returns:
        SampleSummary.  If *samples_ns* is empty, all derived fields are
        0.0, ``n`` is 0 and a warning is logged.
    """
    n = len(samples_ns)
    if n == 0:
        log.warning("No durations recorded for benchmark '%s'", label)
        return SampleSummary(
            n=0,
            min_time=0.0,
            mean_time=0.0,
            stddev_time=0.0,
            ops_per_sec=0.0,
            unit=unit,
        )

    min_time = to_unit(min(samples_ns), unit)

    total_ns = sum(samples_ns)
    mean_time = to_unit(total_ns, unit) / n

    if n > 1:
        squared = 0.0
        for d in samples_ns:
            diff = to_unit(d, unit) - mean_time
            squared += diff * diff
        variance = squared / (n - 1)
    else:
        variance = 0.0
    stddev_time = math.sqrt(variance)

    mean_ns = to_unit(total_ns, TimeUnit.NANOSECONDS) / n
    if mean_ns > NEGLIGIBLE_MEAN_NS:
        ops_per_sec = NS_PER_SECOND / mean_ns
    else:
        ops_per_sec = 0.0

    return SampleSummary(
        n=n,
        min_time=min_time,
        mean_time=mean_time,
        stddev_time=stddev_time,
        ops_per_sec=ops_per_sec,
        unit=unit,
    )
