# soundomatic

A small sample-playback synthesis engine built on numpy. It plays a mono
sample through a short-time Fourier transform (STFT) analysis and
resynthesis stage. It also has building blocks for spectral effects and
output gain.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Components

- `soundomatic.fft_processor.FFTProcessor(fft_size, hop_size)`: collects
  samples into a frame with `push_sample`. `ready_to_process()` becomes true
  once the frame is full. `perform_stft()` applies a Hamming window and a
  real FFT, and leaves the first `fft_size // 2` bins in the `real` and `imag`
  arrays. You can edit those bins in place. `perform_istft()` resynthesises
  them into an output frame, applies the window again, and starts a new input
  frame. `pop_sample()` returns the output samples one at a time, and returns
  `0.0` once the frame is used up. `prepare()` resets all state. `fft_size`
  must be a power of two of at least 2; any other value raises `ValueError`.
- `soundomatic.spectral_fx.SpectralFX(bypass=False)`: `process_bins(real, imag)`
  halves the magnitude of every bin in place and keeps its phase. It does
  nothing when `bypass` is true. If the two arrays differ in shape it raises
  `ValueError`.
- `soundomatic.post_fx.PostFX(output_gain=1.0)`: `apply_gain(buffer)` scales
  a numpy buffer in place by `output_gain`. `prepare()` keeps no state.
- `soundomatic.sample_loader.SampleLoader`: `load_sample_from_file(path,
  target_sample_rate)` reads an integer-PCM WAV file (8, 16, 24 or 32 bit)
  with the standard `wave` module. It averages all channels down to mono and
  resamples to the target rate by linear interpolation. If the file cannot be
  read it raises `SampleLoadError`. If the target rate is not positive it
  raises `ValueError`. `set_trim_range(start, end)` clamps a normalised range
  to 0..1 with `end >= start`. The `buffer` property holds the loaded samples,
  and `num_samples` is the number of samples inside the trim range.
- `soundomatic.processor.Sound0maticProcessor(sample_path=None)`: joins these
  together. `prepare_to_play(sample_rate, samples_per_block)` loads the sample
  at the playback rate, resets the trim range and the playback position, and
  prepares a 1024-point FFT with a hop of 512. A file that cannot be loaded is
  logged as a warning and not raised. `process_block(buffer)` fills a
  `(channels, samples)` numpy array in place. Each frame takes the next sample
  (or silence once the sample has run out), passes it through the
  STFT/ISTFT stage, and writes the result to every channel.
  `is_buses_layout_supported(n)` is true only for `n == 2`.

## Example

```python
import numpy as np
from soundomatic.processor import Sound0maticProcessor

proc = Sound0maticProcessor("cymbalom-a3.wav")
proc.prepare_to_play(48000.0, 512)

block = np.zeros((2, 512), dtype=np.float32)
proc.process_block(block)   # block now holds the next 512 output frames
```

## What it does not do

- It is a library only. It has no command, no audio device output, no
  editor or user interface, and no plugin host integration.
- It does not handle MIDI, and it does not save or restore state.
- `Sound0maticProcessor` creates a `SpectralFX` and a `PostFX`, but
  `process_block` does not apply either of them. The resynthesis stage passes
  the bins through unchanged. To use the effects, call them yourself on an
  `FFTProcessor`'s `real`/`imag` arrays or on an output buffer.
- The processor does not use `hop_size` for overlap-add. Each frame is
  processed as a separate block.