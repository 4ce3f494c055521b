from __future__ import annotations
from typing import List

import pytest


class FakeLogger:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def warning(self, msg: str) -> None:
        self.messages.append(msg)


class FakeClock:
    # Readings only move when the test says so.
    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def log() -> FakeLogger:
    return FakeLogger()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(100.0)
