"""perflite: a calibrated micro-benchmarking harness for Python callables."""

from __future__ import annotations

__version__ = "0.1.0"

from perflite.config import BenchConfig  # noqa: E402
from perflite.results import BenchmarkResult  # noqa: E402
from perflite.runner import CalibratedRunner, benchmark, do_not_optimize  # noqa: E402
from perflite.units import TimeUnit  # noqa: E402

__all__ = [
    "BenchConfig",
    "BenchmarkResult",
    "CalibratedRunner",
    "TimeUnit",
    "__version__",
    "benchmark",
    "do_not_optimize",
]
