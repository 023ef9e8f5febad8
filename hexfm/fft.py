"""In-place style radix-2 complex FFT (forward transform, unnormalised)."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def _bit_reverse(value: int, bits: int) -> int:
    result = 0
    for _ in range(bits):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def fft(real: Sequence[float], imag: Sequence[float]) -> tuple[list[float], list[float]]:
    """Return the forward DFT of the complex signal ``real + i*imag``.

    The transform uses the ``exp(-2*pi*i*k*n/N)`` kernel and is not scaled.
    The length must be a power of two (or zero).
    """
    if len(real) != len(imag):
        raise ValueError("real and imaginary parts must have the same length")
    n = len(real)
    if n & (n - 1):
        raise ValueError(f"FFT length must be a power of two, got {n}")
    if n == 0:
        return [], []

    bits = n.bit_length() - 1
    samples = [complex(r, i) for r, i in zip(real, imag)]
    data = [samples[_bit_reverse(index, bits)] for index in range(n)]

    size = 2
    while size <= n:
        half = size // 2
        twiddles = [cmath.exp(-1j * math.pi * k / half) for k in range(half)]
        for start in range(0, n, size):
            for offset, w in enumerate(twiddles):
                top = start + offset
                bottom = top + half
                t = data[bottom] * w
                data[bottom] = data[top] - t
                data[top] = data[top] + t
        size *= 2

    return [z.real for z in data], [z.imag for z in data]