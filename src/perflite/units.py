"""Time units used for reporting benchmark statistics.

Samples are always recorded as integer nanoseconds.  Conversion to a
reporting unit truncates toward zero, so a 1999ns sample reported in
microseconds is ``1.0``, not ``2.0``.
"""

from __future__ import annotations

import enum


class TimeUnit(enum.Enum):
    """Reporting unit for min/mean/stddev."""

    NANOSECONDS = "ns"
    MICROSECONDS = "µs"
    MILLISECONDS = "ms"
    SECONDS = "s"

    @property
    def symbol(self) -> str:
        """Short display symbol (``ns``, ``µs``, ``ms``, ``s``)."""
        return self.value

    @property
    def factor_ns(self) -> int:
        """Number of nanoseconds in one of this unit."""
        return _FACTORS_NS[self]

    @property
    def precision(self) -> int:
        """Decimal places used when printing values in this unit."""
        return _PRECISION[self]

    @classmethod
    def parse(cls, text: str | TimeUnit) -> TimeUnit:
        """Parse a unit from its name, symbol or a common alias.

        Raises:
            ValueError: If *text* does not name a known unit.
        """
        if isinstance(text, TimeUnit):
            return text
        if not isinstance(text, str):
            raise ValueError(
                f"Time unit must be a string, got {type(text).__name__}: {text!r}"
            )
        key = text.strip().lower()
        unit = _ALIASES.get(key)
        if unit is None:
            raise ValueError(
                f"Unknown time unit: '{text}'. Valid units: ns, us, ms, s."
            )
        return unit


_FACTORS_NS: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 1,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.SECONDS: 1_000_000_000,
}

_PRECISION: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 2,
    TimeUnit.MICROSECONDS: 3,
    TimeUnit.MILLISECONDS: 4,
    TimeUnit.SECONDS: 6,
}

_ALIASES: dict[str, TimeUnit] = {
    "ns": TimeUnit.NANOSECONDS,
    "nano": TimeUnit.NANOSECONDS,
    "nanoseconds": TimeUnit.NANOSECONDS,
    "us": TimeUnit.MICROSECONDS,
    "µs": TimeUnit.MICROSECONDS,
    "\u03bcs": TimeUnit.MICROSECONDS,
    "micro": TimeUnit.MICROSECONDS,
    "microseconds": TimeUnit.MICROSECONDS,
    "ms": TimeUnit.MILLISECONDS,
    "milli": TimeUnit.MILLISECONDS,
    "milliseconds": TimeUnit.MILLISECONDS,
    "s": TimeUnit.SECONDS,
    "sec": TimeUnit.SECONDS,
    "seconds": TimeUnit.SECONDS,
}


def to_unit(duration_ns: int, unit: TimeUnit) -> float:
    """Convert a nanosecond duration to *unit*, truncating toward zero."""
    factor = unit.factor_ns
    whole = abs(duration_ns) // factor
    return float(whole if duration_ns >= 0 else -whole)
