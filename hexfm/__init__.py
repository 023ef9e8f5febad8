"""Building blocks of a six-operator FM synthesizer: FFT, wavetables, oscillators, patch parameters and label formatting."""

__version__ = "0.1.0"