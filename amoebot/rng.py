"""Shared random number source for particles and systems."""

from __future__ import annotations

import random
from typing import Any, MutableSequence

# Seeded from operating-system entropy on import.
_rng = random.Random()


def seed(value: Any) -> None:
    """Reseed the shared generator, making later draws reproducible."""
    _rng.seed(value)


def rand_int(start: int, stop: int) -> int:
    """Return a uniform integer in [start, stop)."""
    if stop <= start:
        raise ValueError("empty range")
    return _rng.randrange(start, stop)


def rand_dir() -> int:
    """Return a uniform direction in 0..5."""
    return rand_int(0, 6)


def rand_double(start: float, stop: float) -> float:
    """Return a uniform float in [start, stop)."""
    if stop < start:
        raise ValueError("empty range")
    value = start + (stop - start) * _rng.random()
    return start if value >= stop else value


def rand_float(start: float, stop: float) -> float:
    """Return a uniform float in [start, stop)."""
    return rand_double(start, stop)


def rand_bool(true_prob: float = 0.5) -> bool:
    """Return True with the given probability."""
    return rand_float(0.0, 1.0) < true_prob


def shuffle(items: MutableSequence[Any]) -> None:
    """Shuffle the sequence in place."""
    _rng.shuffle(items)