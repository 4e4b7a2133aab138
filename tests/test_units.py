"""Tests for perflite.units — time units and truncating conversion."""

from __future__ import annotations

import unittest

from perflite.units import TimeUnit, to_unit


class TestToUnit(unittest.TestCase):
    """Tests for to_unit()."""

    def test_nanoseconds_identity(self) -> None:
        self.assertEqual(to_unit(1500, TimeUnit.NANOSECONDS), 1500.0)

    def test_truncates_sub_unit_remainder(self) -> None:
        """1999ns is 1µs, not 2µs: remainders are discarded."""
        self.assertEqual(to_unit(1999, TimeUnit.MICROSECONDS), 1.0)
        self.assertEqual(to_unit(1_999_999, TimeUnit.MILLISECONDS), 1.0)
        self.assertEqual(to_unit(999_999_999, TimeUnit.SECONDS), 0.0)

    def test_exact_multiples(self) -> None:
        self.assertEqual(to_unit(3_000_000_000, TimeUnit.SECONDS), 3.0)
        self.assertEqual(to_unit(2_000_000, TimeUnit.MILLISECONDS), 2.0)

    def test_negative_truncates_toward_zero(self) -> None:
        self.assertEqual(to_unit(-1500, TimeUnit.MICROSECONDS), -1.0)

    def test_returns_float(self) -> None:
        self.assertIsInstance(to_unit(5, TimeUnit.NANOSECONDS), float)


class TestTimeUnit(unittest.TestCase):
    """Tests for TimeUnit properties and parsing."""

    def test_factors(self) -> None:
        self.assertEqual(TimeUnit.NANOSECONDS.factor_ns, 1)
        self.assertEqual(TimeUnit.MICROSECONDS.factor_ns, 1_000)
        self.assertEqual(TimeUnit.MILLISECONDS.factor_ns, 1_000_000)
        self.assertEqual(TimeUnit.SECONDS.factor_ns, 1_000_000_000)

    def test_precision_grows_with_unit(self) -> None:
        self.assertEqual(
            [u.precision for u in TimeUnit],
            [2, 3, 4, 6],
        )

    def test_symbols(self) -> None:
        self.assertEqual(TimeUnit.MICROSECONDS.symbol, "µs")
        self.assertEqual(TimeUnit.SECONDS.symbol, "s")

    def test_parse_aliases(self) -> None:
        self.assertIs(TimeUnit.parse("ns"), TimeUnit.NANOSECONDS)
        self.assertIs(TimeUnit.parse("us"), TimeUnit.MICROSECONDS)
        self.assertIs(TimeUnit.parse("µs"), TimeUnit.MICROSECONDS)
        self.assertIs(TimeUnit.parse("μs"), TimeUnit.MICROSECONDS)
        self.assertIs(TimeUnit.parse("MS"), TimeUnit.MILLISECONDS)
        self.assertIs(TimeUnit.parse(" seconds "), TimeUnit.SECONDS)

    def test_parse_passthrough(self) -> None:
        self.assertIs(TimeUnit.parse(TimeUnit.SECONDS), TimeUnit.SECONDS)

    def test_parse_unknown(self) -> None:
        with self.assertRaises(ValueError):
            TimeUnit.parse("fortnights")

    def test_parse_non_string(self) -> None:
        with self.assertRaises(ValueError):
            TimeUnit.parse(None)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            TimeUnit.parse(1)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
