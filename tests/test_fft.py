import math

import pytest

from hexfm.fft import fft


def test_impulse_gives_flat_spectrum():
    re, im = fft([1.0, 0.0, 0.0, 0.0], [0.0] * 4)
    assert re == pytest.approx([1.0] * 4)
    assert im == pytest.approx([0.0] * 4, abs=1e-12)


def test_constant_signal_concentrates_in_dc_bin():
    n = 8
    re, im = fft([1.0] * n, [0.0] * n)
    assert re[0] == pytest.approx(n)
    assert re[1:] == pytest.approx([0.0] * (n - 1), abs=1e-9)
    assert im == pytest.approx([0.0] * n, abs=1e-9)


def test_shifted_impulse_uses_negative_exponent():
    re, im = fft([0.0, 1.0, 0.0, 0.0], [0.0] * 4)
    assert re[1] == pytest.approx(0.0, abs=1e-12)
    assert im[1] == pytest.approx(-1.0)


def test_cosine_peaks_at_its_bin_and_mirror():
    n = 16
    signal = [math.cos(2 * math.pi * k / n) for k in range(n)]
    re, im = fft(signal, [0.0] * n)
    assert re[1] == pytest.approx(n / 2)
    assert re[n - 1] == pytest.approx(n / 2)
    others = [abs(complex(r, i)) for idx, (r, i) in enumerate(zip(re, im)) if idx not in (1, n - 1)]
    assert max(others) < 1e-9


def test_parseval_holds():
    n = 32
    real = [math.sin(0.3 * k) + 0.5 * math.cos(1.7 * k) for k in range(n)]
    imag = [0.25 * math.sin(2.1 * k) for k in range(n)]
    re, im = fft(real, imag)
    time_energy = sum(r * r + i * i for r, i in zip(real, imag))
    freq_energy = sum(r * r + i * i for r, i in zip(re, im))
    assert freq_energy == pytest.approx(n * time_energy)


def test_linearity():
    n = 8
    a = [float(k % 3) for k in range(n)]
    b = [math.sin(k) for k in range(n)]
    zeros = [0.0] * n
    ra, ia = fft(a, zeros)
    rb, ib = fft(b, zeros)
    rs, is_ = fft([x + y for x, y in zip(a, b)], zeros)
    assert rs == pytest.approx([x + y for x, y in zip(ra, rb)])
    assert is_ == pytest.approx([x + y for x, y in zip(ia, ib)], abs=1e-9)


def test_single_sample_is_identity():
    assert fft([3.5], [-2.0]) == ([3.5], [-2.0])


def test_empty_input():
    assert fft([], []) == ([], [])


def test_inputs_are_not_modified():
    real = [1.0, 2.0, 3.0, 4.0]
    imag = [0.0, 0.0, 0.0, 0.0]
    fft(real, imag)
    assert real == [1.0, 2.0, 3.0, 4.0]
    assert imag == [0.0, 0.0, 0.0, 0.0]


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        fft([1.0, 2.0], [0.0])


def test_non_power_of_two_raises():
    with pytest.raises(ValueError):
        fft([1.0, 2.0, 3.0], [0.0, 0.0, 0.0])