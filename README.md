# qdsp

Small audio DSP building blocks in pure Python. Each one is called once per
sample. The package needs nothing outside the standard library.

## Modules

- `qdsp.base`: fast math approximations (`fast_exp3` … `fast_exp9`,
  `fast_rational_tanh`, `fast_inverse`, `fast_div`), `linear_interpolate`,
  tolerance checks (`abs_within`, `rel_within`) and decibel conversion
  (`lin_float` turns dB into a linear gain, `lin_to_db` turns a linear value
  into dB, with 0 giving negative infinity and negative values raising
  `ValueError`). It also has a linear congruential random generator,
  `FastRandom`, which returns integers in 0..32767, and `fast_rand()`, which
  draws from one shared instance.
- `qdsp.phase`: `Phase`, an unsigned 32-bit fraction of a cycle that wraps
  on addition and subtraction. `PhaseIterator` accumulates a phase by a step
  set from a frequency and sample rate. `OneShotPhaseIterator` stops at the
  ends of the cycle instead of wrapping. Also `frac_to_phase`, `frac_double`,
  `frac_float` and `period(freq)`, which returns `1 / freq`.
- `qdsp.sin_table`: `sin_lu`, a sine computed by table lookup with linear
  interpolation. It takes a `Phase` or an angle in radians in [0, 2π].
- `qdsp.dynamics`: `Compressor`, `SoftKneeCompressor`, `Expander` and `Agc`
  take an envelope in dB and return a gain in dB. `NoiseGate` takes its
  thresholds in dB and a linear envelope. `Clip` and `SoftClip` limit the
  signal.
- `qdsp.shaping`: `DcBlock`, `Map` (maps 0..1 onto y1..y2), `Median3` and
  `median3f`.
- `qdsp.triggers`: `Monostable` and `RetriggerableMonostable`, which are
  one-shot pulse generators, and `SchmittTrigger`, a comparator with
  hysteresis.
- `qdsp.moving_maximum`: `MovingMaximum`, a sliding-window maximum that costs
  O(log n) per sample.
- `qdsp.zero_crossing`: `ZeroCrossing` returns a bool pulse. `ZeroCrossingEx`
  returns 1 on a leading edge, -1 on a trailing edge and 0 otherwise, and
  records a `CrossingInfo` with edges, peak, period and fractional period.
- `qdsp.bitset`: `Bitset`, fixed-size bit storage in 8-, 16-, 32- or 64-bit
  words (64 by default), with `set`, `set_range`, `get`, `clear` and a
  `data` copy of the words.
- `qdsp.generators`: `SinCosGen`, a sine/cosine oscillator, plus the window
  tapers `BlackmanGen`, `BlackmanUpwardRampGen`, `BlackmanDownwardRampGen`
  and `HammingGen`.
- `qdsp.ramps`: `ExpUpwardRampGen`, `ExpDownwardRampGen`,
  `LinUpwardRampGen`, `LinDownwardRampGen` and `HoldLineGen`, which is a
  constant 1.0.
- `qdsp.noise`: `WhiteNoiseGen` and `PinkNoiseGen`. White noise values are
  the raw 32-bit state scaled to [0, 2].
- `qdsp.wav`: `WavReader` reads PCM files (8, 16, 24 or 32 bits) and IEEE
  float files (32 or 64 bits) as interleaved floats. `WavWriter` writes
  interleaved 32-bit IEEE float files. Unreadable files raise
  `WavFormatError`.

## Examples

Dynamics processors work on envelopes in decibels. Convert the result to a
linear gain and multiply the signal by it:

```python
from qdsp.base import lin_float, lin_to_db
from qdsp.dynamics import Compressor

comp = Compressor(-6.0, 1 / 4)
out = [s * lin_float(comp(lin_to_db(s))) for s in (0.1, 0.5, 0.9)]
```

Generators are called once per sample:

```python
from qdsp.generators import SinCosGen

gen = SinCosGen(100.0, 48000)
sin_value, cos_value = gen()
```

Writing and reading a WAV file:

```python
from qdsp.wav import WavReader, WavWriter

with WavWriter("out.wav", 1, 48000) as wav:
    wav.write([0.0, 0.5, -0.5])

with WavReader("out.wav") as wav:
    samples = wav.read(3)
```

## What it does not do

- It does not open audio devices, so there is no live input or output.
  Audio goes in and out only through WAV files or your own lists of samples.
- It has no envelope followers, filters beyond `DcBlock`, or pitch
  detection. The dynamics processors and `NoiseGate` expect an envelope that
  you compute yourself.
- It has no MIDI support and no command-line tool.

## Installing

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```