"""Band-limited square-wave tables built from summed odd harmonics."""

from __future__ import annotations

import math

from hexfm.wavetables import TABLE_SIZE


def square_series_table(terms: int, size: int = TABLE_SIZE) -> list[float]:
    """One cycle of a square wave approximated by its first ``terms`` odd harmonics.

    Each sample is ``sum(sin(k*x) / k)`` over the odd ``k`` from 1 to
    ``2*terms - 1``, with no normalisation.
    """
    if terms < 1:
        raise ValueError(f"at least one harmonic term is required, got {terms}")
    if size <= 0:
        raise ValueError(f"table size must be positive, got {size}")
    step = 2.0 * math.pi / size
    harmonics = range(1, 2 * terms, 2)
    return [
        sum(math.sin(k * step * index) / k for k in harmonics)
        for index in range(size)
    ]