"""Benchmark execution engine.

Runs a callable through a fixed protocol:

1. Warmup: ``warmup_iterations`` untimed calls.
2. Calibration: ``CALIBRATION_ITERATIONS`` calls timed as one block to
   estimate the cost of a single call.
3. Adjustment: scale the iteration count so the measured phase lasts
   roughly ``target_duration_ms``, clamped to
   ``[MIN_ITERATIONS, MAX_ITERATIONS]``.
4. Measurement: time every call individually.
5. Reduction: hand the samples to :func:`perflite.stats.summarize`.

Everything runs synchronously on the caller's thread.  If the callable
raises at any point, the exception propagates unchanged and no result
is produced.
"""

from __future__ import annotations

import enum
import functools
import time
from typing import Any, Callable

from perflite.config import BenchConfig
from perflite.logging import get_logger
from perflite.results import BenchmarkResult

log = get_logger("runner")

CALIBRATION_ITERATIONS = 1000
MIN_ITERATIONS = 1000
MAX_ITERATIONS = 1_000_000

Clock = Callable[[], int]


class RunPhase(enum.Enum):
    """Phases of a benchmark run, in order."""

    IDLE = "idle"
    WARMUP = "warmup"
    CALIBRATE = "calibrate"
    ADJUST = "adjust"
    MEASURE = "measure"
    REDUCED = "reduced"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Optimizer barrier
# ---------------------------------------------------------------------------


class _Sink:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: Any = None


_sink = _Sink()


def do_not_optimize(value: Any) -> None:
    """Keep *value* observably alive after a benchmarked call.

    The value is stored in a module-level sink so the result of the
    workload is always used.  ``None`` results go through the same path.
    """
    _sink.value = value


# ---------------------------------------------------------------------------
# Iteration-count calibration
# ---------------------------------------------------------------------------


def compute_adjusted_iterations(
    calibration_total_ns: int,
    target_duration_ns: int,
    nominal_iterations: int,
) -> int:
    """Pick the number of measured iterations from a calibration probe.

    Args:
        calibration_total_ns: Wall time of the whole calibration block.
        target_duration_ns: Desired wall time of the measurement phase.
        nominal_iterations: Configured iteration count.

    Returns:
        ``target / per_iteration`` truncated and clamped to
        ``[MIN_ITERATIONS, MAX_ITERATIONS]``.  If the calibration block
        measured no time at all (clock too coarse), *nominal_iterations*
        is returned unclamped.
    """
    if calibration_total_ns <= 0:
        return nominal_iterations

    adjusted = nominal_iterations
    per_iteration_ns = calibration_total_ns / CALIBRATION_ITERATIONS
    if per_iteration_ns > 0:
        adjusted = int(target_duration_ns / per_iteration_ns)

    return max(MIN_ITERATIONS, min(adjusted, MAX_ITERATIONS))


# ---------------------------------------------------------------------------
# CalibratedRunner
# ---------------------------------------------------------------------------


class CalibratedRunner:
    """Executes benchmarks according to a BenchConfig.

    Usage::

        runner = CalibratedRunner(BenchConfig(label="sort"))
        result = runner.run(sorted, data)

    The runner holds no per-run state; one instance may be reused for
    any number of sequential or concurrent runs.
    """

    def __init__(
        self,
        config: BenchConfig | None = None,
        *,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self.config = config if config is not None else BenchConfig()
        self._clock = clock

    def run(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> BenchmarkResult:
        """Benchmark ``func(*args, **kwargs)``.

        Returns:
            The populated, immutable BenchmarkResult.

        Raises:
            Whatever *func* raises, unchanged.
        """
        if args or kwargs:
            func = functools.partial(func, *args, **kwargs)

        config = self.config
        phase = RunPhase.IDLE
        try:
            phase = self._enter(RunPhase.WARMUP, config)
            self._warmup(func, config.warmup_iterations)

            phase = self._enter(RunPhase.CALIBRATE, config)
            calibration_ns = self._calibrate(func)

            phase = self._enter(RunPhase.ADJUST, config)
            iterations = compute_adjusted_iterations(
                calibration_ns,
                config.target_duration_ns,
                config.nominal_iterations,
            )
            log.debug(
                "Calibration for '%s': %dns over %d calls -> %d iterations",
                config.label,
                calibration_ns,
                CALIBRATION_ITERATIONS,
                iterations,
            )

            phase = self._enter(RunPhase.MEASURE, config)
            samples = self._measure(func, iterations)
        except BaseException:
            log.debug(
                "Benchmark '%s': %s during %s", config.label, RunPhase.FAILED.value, phase.value
            )
            raise

        result = BenchmarkResult.from_samples(config.label, samples, config.unit)
        self._enter(RunPhase.REDUCED, config)
        return result

    @staticmethod
    def _enter(phase: RunPhase, config: BenchConfig) -> RunPhase:
        log.debug("Benchmark '%s': %s", config.label, phase.value)
        return phase

    @staticmethod
    def _warmup(func: Callable[[], Any], count: int) -> None:
        for _ in range(count):
            func()

    def _calibrate(self, func: Callable[[], Any]) -> int:
        clock = self._clock
        start = clock()
        for _ in range(CALIBRATION_ITERATIONS):
            do_not_optimize(func())
        return clock() - start

    def _measure(self, func: Callable[[], Any], iterations: int) -> list[int]:
        clock = self._clock
        samples: list[int] = []
        append = samples.append
        for _ in range(iterations):
            start = clock()
            do_not_optimize(func())
            end = clock()
            append(end - start)
        return samples


def benchmark(func: Callable[..., Any], *args: Any, **kwargs: Any) -> BenchmarkResult:
    """Benchmark ``func(*args, **kwargs)`` with the default configuration.

    Defaults: 10 warmup calls, 1000 nominal iterations, 100ms target
    duration, nanosecond reporting, label ``"Benchmark"``.
    """
    return CalibratedRunner().run(func, *args, **kwargs)
