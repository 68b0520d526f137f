"""Metrics that capture system progress during a run."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Count:
    """An event counter whose value is committed to its history once per round."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.value = 0
        self.history: list[int] = []

    def record(self, num_events: int = 1) -> None:
        """Add the given number of events to the count."""
        if num_events < 0:
            raise ValueError("number of events must be non-negative")
        self.value += num_events

    def __repr__(self) -> str:
        return f"Count(name={self.name!r}, value={self.value})"


class Measure(ABC):
    """A quantity computed from the whole system every ``freq`` rounds."""

    def __init__(self, name: str, freq: int) -> None:
        if freq < 1:
            raise ValueError("frequency must be at least 1")
        self.name = name
        self.freq = freq
        self.history: list[float] = []

    @abstractmethod
    def calculate(self) -> float:
        """Compute the current value of the measure."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, freq={self.freq})"