"""Wavetable sine oscillator and a sample-and-hold random oscillator."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable

from hexfm.wavetables import TABLE_SIZE, sine_table


class SineTableOscillator:
    """A sine oscillator reading a 512-point table with linear interpolation."""

    def __init__(self) -> None:
        self._table = sine_table(TABLE_SIZE)
        self._position = 0.0
        self._sample_rate = 44100.0
        self._nyquist = 22050.0

    @property
    def position(self) -> float:
        """Current phase as a fraction of a cycle."""
        return self._position

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    def set_sample_rate(self, rate: float) -> None:
        """Set the sample rate; the frequency limit becomes half of it."""
        if not rate > 0.0:
            raise ValueError(f"sample rate must be positive, got {rate}")
        self._sample_rate = float(rate)
        self._nyquist = self._sample_rate / 2.0

    def sample(self, frequency: float) -> float:
        """Advance the phase for ``frequency`` Hz and return the next sample."""
        if frequency > self._nyquist:
            frequency = self._nyquist
        delta = frequency / self._sample_rate
        if math.isfinite(delta):
            position = (self._position + delta) % 1.0
            self._position = 0.0 if position >= 1.0 else position
        size = len(self._table)
        scaled = self._position * size
        lower = int(math.floor(scaled))
        skew = scaled - lower
        low_value = self._table[lower]
        high_value = self._table[(lower + 1) % size]
        return low_value + skew * (high_value - low_value)


class RandomOscillator:
    """Holds a random value in 0..1, drawing a new one once every period.

    The period starts at one second and changes whenever ``sample`` is asked
    for a different rate, which restarts the timing.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._rate_ms = 1000
        self._output = 0.0
        self._period: float | None = None
        self._next_tick: float | None = None
        self._start(self._rate_ms)

    def _start(self, ms_per_cycle: int) -> None:
        if ms_per_cycle > 0:
            self._period = ms_per_cycle / 1000.0
            self._next_tick = self._clock() + self._period
        else:
            self._period = None
            self._next_tick = None

    def _advance(self) -> None:
        if self._next_tick is None or self._period is None:
            return
        now = self._clock()
        if now < self._next_tick:
            return
        ticks = int((now - self._next_tick) // self._period) + 1
        self._output = self._rng.random()
        self._next_tick += ticks * self._period

    def sample(self, ms_per_cycle: int) -> float:
        """Return the held value, restarting the timer if the rate changed."""
        self._advance()
        if ms_per_cycle != self._rate_ms:
            self._rate_ms = ms_per_cycle
            self._start(ms_per_cycle)
        return self._output