"""Benchmark configuration.

Handles:
- The immutable ``BenchConfig`` snapshot consumed by the runner.
- Eager validation: a bad value is rejected when the snapshot is built,
  never later when the benchmark runs.
- Loading YAML profiles and merging them with CLI overrides.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from perflite.logging import get_logger
from perflite.units import TimeUnit

log = get_logger("config")

DEFAULT_WARMUP = 10
DEFAULT_ITERATIONS = 1000
DEFAULT_TARGET_DURATION_MS = 100
DEFAULT_LABEL = "Benchmark"


def _check_count(what: str, value: Any) -> None:
    """Reject anything but a positive int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer (got {value!r}).")
    if value <= 0:
        raise ValueError(f"{what} must be greater than zero (got {value}).")


# ---------------------------------------------------------------------------
# BenchConfig
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BenchConfig:
    """Configuration snapshot for a single benchmark run.

    Every ``with_*`` method returns a new, re-validated snapshot, so
    setters chain::

        config = BenchConfig().with_warmup(5).with_unit(TimeUnit.MICROSECONDS)
    """

    warmup_iterations: int = DEFAULT_WARMUP
    nominal_iterations: int = DEFAULT_ITERATIONS
    target_duration_ms: float = DEFAULT_TARGET_DURATION_MS
    unit: TimeUnit = TimeUnit.NANOSECONDS
    label: str = DEFAULT_LABEL

    def __post_init__(self) -> None:
        _check_count("Warmup iterations", self.warmup_iterations)
        _check_count("Benchmark iterations", self.nominal_iterations)
        duration = self.target_duration_ms
        if (
            isinstance(duration, bool)
            or not isinstance(duration, (int, float))
            or not math.isfinite(duration)
            or duration <= 0
        ):
            raise ValueError(
                f"Target duration must be a finite number of milliseconds "
                f"greater than zero (got {duration!r})."
            )
        if not isinstance(self.unit, TimeUnit):
            raise ValueError(f"unit must be a TimeUnit, got {type(self.unit).__name__}")

    @property
    def target_duration_ns(self) -> int:
        """Target duration of the measurement phase in nanoseconds."""
        return int(self.target_duration_ms * 1_000_000)

    def with_warmup(self, count: int) -> BenchConfig:
        """Return a copy with *count* warmup iterations."""
        return dataclasses.replace(self, warmup_iterations=count)

    def with_iterations(self, count: int) -> BenchConfig:
        """Return a copy with *count* nominal iterations."""
        return dataclasses.replace(self, nominal_iterations=count)

    def with_target_duration(self, milliseconds: float) -> BenchConfig:
        """Return a copy targeting *milliseconds* of measurement time."""
        return dataclasses.replace(self, target_duration_ms=milliseconds)

    def with_unit(self, unit: TimeUnit | str) -> BenchConfig:
        """Return a copy reporting in *unit*."""
        return dataclasses.replace(self, unit=TimeUnit.parse(unit))

    def with_label(self, label: str) -> BenchConfig:
        """Return a copy named *label*."""
        return dataclasses.replace(self, label=label)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "warmup_iterations": self.warmup_iterations,
            "nominal_iterations": self.nominal_iterations,
            "target_duration_ms": self.target_duration_ms,
            "unit": self.unit.symbol,
            "label": self.label,
        }


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a benchmark profile from a YAML file.

    Profile format::

        label: "json encoding"
        warmup: 10
        iterations: 1000
        target_duration_ms: 100
        unit: us
        targets:
          - json:dumps

    Returns:
        The parsed YAML as a dict.
    """
    import yaml

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    data = yaml.safe_load(profile_path.read_text())
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    log.debug("Loaded profile %s: %s", profile_path, sorted(data))
    return data


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> BenchConfig:
    """Build a BenchConfig from a parsed profile.

    CLI overrides take precedence over profile values, which take
    precedence over the defaults.  Override values of ``None`` are
    treated as "not given".

    Args:
        profile_data: Parsed YAML profile dict (may be empty).
        cli_overrides: Dict with any of ``warmup``, ``iterations``,
            ``target_duration_ms``, ``unit``, ``label``.

    Raises:
        ValueError: If a merged value is invalid.
    """
    cli = {k: v for k, v in (cli_overrides or {}).items() if v is not None}

    def _pick(key: str, default: Any, convert: Callable[[Any], Any]) -> Any:
        if key in cli:
            value = cli[key]
        else:
            value = profile_data.get(key, default)
        if value is None:
            raise ValueError(f"Profile key '{key}' has no value.")
        try:
            return convert(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid value for '{key}': {value!r} ({exc})") from exc

    return BenchConfig(
        warmup_iterations=_pick("warmup", DEFAULT_WARMUP, _numeric(int)),
        nominal_iterations=_pick("iterations", DEFAULT_ITERATIONS, _numeric(int)),
        target_duration_ms=_pick(
            "target_duration_ms", DEFAULT_TARGET_DURATION_MS, _numeric(float)
        ),
        unit=_pick("unit", TimeUnit.NANOSECONDS, TimeUnit.parse),
        label=_pick("label", DEFAULT_LABEL, str),
    )


def _numeric(kind: type) -> Callable[[Any], Any]:
    """Parse numeric strings; leave other values for BenchConfig to validate."""

    def convert(value: Any) -> Any:
        if isinstance(value, str):
            return kind(value.strip())
        return value

    return convert


def profile_targets(profile_data: dict[str, Any]) -> list[str]:
    """Return the callable references listed under ``targets`` in a profile."""
    targets = profile_data.get("targets", [])
    if isinstance(targets, str):
        return [targets]
    if not isinstance(targets, list):
        raise ValueError("Profile 'targets' must be a list of 'module:callable' references")
    return [str(t) for t in targets]
