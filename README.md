# hexfm

Building blocks for a six-operator FM synthesizer. The package is pure
Python, uses only the standard library, and runs without any audio host.

## Modules

- `hexfm.fft`: `fft(real, imag)` returns the forward, unscaled DFT of
  `real + i*imag` as a `(real, imag)` pair of lists. It uses a radix-2
  algorithm. The length must be a power of two, and a different length
  raises `ValueError`.
- `hexfm.wavetables`: single-cycle tables of `TABLE_SIZE` (512) points by
  default. They are `sine_table(size)`, `triangle_table(size)` and
  `saw_table(size)`.
- `hexfm.square_tables`: `square_series_table(terms, size)` approximates a
  square wave. It sums `sin(k*x)/k` over the first `terms` odd harmonics.
- `hexfm.oscillators`:
  - `SineTableOscillator` reads a 512-point sine table with linear
    interpolation. Its methods are `set_sample_rate(rate)` and
    `sample(frequency)`. The frequency is clamped to half the sample rate.
  - `RandomOscillator` is a sample-and-hold source. It holds a random value
    in 0..1 and draws a new one once every `ms_per_cycle` milliseconds. The
    period restarts whenever `sample(ms_per_cycle)` is given a different
    rate. The clock and random generator can be injected.
- `hexfm.params`:
  - `AtomicParam` is a lock-protected value cell. It has `load`, `store`
    and `store_from`, and supports `==` and `>`.
  - `PatchParameters` holds one patch's per-operator and per-LFO
    parameters: 6 operators and 4 LFOs. Its
    `set_routing(tree, grid)` fills the 6×6 routing matrix from a mapping
    of parameter values.
- `hexfm.labels`: text formatting for slider value labels. It provides
  `format_number`, `initial_label_text`, `label_text` and
  `parse_label_value`. `slider_param_id(kind, index)` gives the parameter
  id a slider controls, for example `"attackParam2"`.

## Installation

```
pip install .
```

## Example

```python
from hexfm.fft import fft
from hexfm.labels import label_text, slider_param_id
from hexfm.oscillators import SineTableOscillator
from hexfm.params import PatchParameters

osc = SineTableOscillator()
osc.set_sample_rate(48000.0)
block = [osc.sample(750.0) for _ in range(256)]
spectrum_re, spectrum_im = fft(block, [0.0] * len(block))

params = PatchParameters()
grid = [[f"{i}to{n}Param" for n in range(6)] for i in range(6)]
values = {name: 0.0 for row in grid for name in row}
values["0to1Param"] = 1.0
params.set_routing(values, grid)
print(params.op_routing[0][1].load())         # 1

print(slider_param_id("release", 3))          # releaseParam3
print(label_text(1234.5, "ms"))               # 1234.ms
```

## What it does not do

This package holds no voice engine, and it does not render audio. It is
not a plugin, and it has no editor screen. It does not define a full
parameter layout, and it cannot save or restore parameter state. It does
not store or browse patch files on disk, and it has no colour palette.
`PatchParameters.set_routing` accepts any mapping of parameter ids to
values. The caller has to supply that mapping.

## Tests

```
pip install .[test]
pytest
```