"""Thread-safe parameter cells and the shared set of patch parameters."""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

TOTAL_OPERATORS = 6
TOTAL_LFOS = 4

T = TypeVar("T")


class _Loadable(Protocol):
    def load(self) -> Any: ...


class AtomicParam(Generic[T]):
    """A single value that may be read and written from several threads."""

    def __init__(self, value: T = 0) -> None:  # type: ignore[assignment]
        self._lock = threading.Lock()
        self._value = value

    def load(self) -> T:
        with self._lock:
            return self._value

    def store(self, value: T) -> None:
        with self._lock:
            self._value = value

    def store_from(self, source: _Loadable) -> None:
        """Copy the current value out of another loadable cell."""
        self.store(source.load())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AtomicParam):
            return self.load() == other.load()
        return self.load() == other

    __hash__ = None  # type: ignore[assignment]

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, AtomicParam):
            other = other.load()
        return self.load() > other

    def __repr__(self) -> str:
        return f"AtomicParam({self.load()!r})"


def _floats(count: int) -> list[AtomicParam[float]]:
    return [AtomicParam(0.0) for _ in range(count)]


def _ints(count: int) -> list[AtomicParam[int]]:
    return [AtomicParam(0) for _ in range(count)]


@dataclass
class PatchParameters:
    """All the parameters of one patch, shared between the UI and audio threads."""

    op_delay_time: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_attack_time: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_hold_time: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_decay_time: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_sustain_level: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_release_time: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_audible: list[AtomicParam[int]] = field(default_factory=lambda: _ints(TOTAL_OPERATORS))
    op_routing: list[list[AtomicParam[int]]] = field(
        default_factory=lambda: [_ints(TOTAL_OPERATORS) for _ in range(TOTAL_OPERATORS)]
    )
    op_ratio: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_amplitude_mod: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_env_level: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_level: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_mod_index: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_ratio_mod: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    op_pan_value: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_OPERATORS))
    routing_has_changed: AtomicParam[int] = field(default_factory=lambda: AtomicParam(0))
    working_fundamental: float = 440.0
    lfo_rate: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_LFOS))
    lfo_level: list[AtomicParam[float]] = field(default_factory=lambda: _floats(TOTAL_LFOS))
    lfo_target: list[AtomicParam[int]] = field(default_factory=lambda: _ints(TOTAL_LFOS))
    lfo_wave: list[AtomicParam[int]] = field(default_factory=lambda: _ints(TOTAL_LFOS))
    lfo_ratio_mode: list[AtomicParam[int]] = field(default_factory=lambda: _ints(TOTAL_LFOS))

    def set_routing(self, tree: Mapping[str, float], grid: Sequence[Sequence[str]]) -> None:
        """Mark each routing cell 1 where its parameter in ``tree`` is non-zero, else 0.

        ``grid[i][n]`` names the parameter for operator ``i`` modulating ``n``.
        """
        if len(grid) < TOTAL_OPERATORS or any(len(row) < TOTAL_OPERATORS for row in grid[:TOTAL_OPERATORS]):
            raise ValueError(f"routing grid must be at least {TOTAL_OPERATORS}x{TOTAL_OPERATORS}")
        for cells, ids in zip(self.op_routing, grid):
            for cell, param_id in zip(cells, ids):
                cell.store(1 if float(tree[param_id]) != 0.0 else 0)