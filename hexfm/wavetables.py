"""Single-cycle waveform tables used by the oscillators."""

from __future__ import annotations

import math

TABLE_SIZE = 512


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"table size must be positive, got {size}")


def sine_table(size: int = TABLE_SIZE) -> list[float]:
    """One cycle of a sine wave, starting at zero and rising."""
    _check_size(size)
    step = 2.0 * math.pi / size
    return [math.sin(step * index) for index in range(size)]


def triangle_table(size: int = TABLE_SIZE) -> list[float]:
    """One cycle of a triangle wave: -1 rising to +1 at mid-cycle, then falling."""
    _check_size(size)
    half = size / 2.0
    return [
        -1.0 + 2.0 * index / half if index <= half else 3.0 - 2.0 * index / half
        for index in range(size)
    ]


def saw_table(size: int = TABLE_SIZE) -> list[float]:
    """One cycle of a rising sawtooth from -1 up to just below +1."""
    _check_size(size)
    return [-1.0 + 2.0 * index / size for index in range(size)]