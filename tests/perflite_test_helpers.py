"""Shared test fixtures for perflite tests."""

from __future__ import annotations


class FakeClock:
    """Integer nanosecond clock that advances by *step* on every read."""

    def __init__(self, step: int, start: int = 0) -> None:
        self.step = step
        self.now = start
        self.reads = 0

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        self.reads += 1
        return value


class CallCounter:
    """Zero-argument callable that counts calls and can fail on a given call."""

    def __init__(self, fail_on: int | None = None, result: object = None) -> None:
        self.calls = 0
        self.fail_on = fail_on
        self.result = result
        self.error = RuntimeError("workload failed")

    def __call__(self) -> object:
        self.calls += 1
        if self.fail_on is not None and self.calls == self.fail_on:
            raise self.error
        return self.result


def always_fails() -> None:
    """Target for CLI tests: a workload that always raises."""
    raise ZeroDivisionError("boom")


def answer() -> int:
    return 42
