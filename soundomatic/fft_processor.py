"""Block-based short-time Fourier analysis and resynthesis."""

from __future__ import annotations

import numpy as np


def _normalised_hamming(size: int) -> np.ndarray:
    """Symmetric Hamming window scaled so that its samples sum to ``size``."""
    window = np.hamming(size)
    return window * (size / window.sum())


class FFTProcessor:
    """Collects samples into frames, transforms them and resynthesises them.

    After :meth:`perform_stft`, the first ``fft_size // 2`` entries of
    :attr:`real` and :attr:`imag` hold the spectrum bins; they may be edited
    in place before :meth:`perform_istft` turns them back into samples.
    """

    def __init__(self, fft_size: int, hop_size: int) -> None:
        self.prepare(fft_size, hop_size)

    def prepare(self, fft_size: int, hop_size: int) -> None:
        """Reset all state for a new frame size and hop size."""
        if fft_size < 2 or fft_size & (fft_size - 1):
            raise ValueError(f"fft_size must be a power of two >= 2, got {fft_size}")
        self.fft_size = fft_size
        self.hop_size = hop_size
        self._input_index = 0
        self._output_index = 0
        self._input = np.zeros(fft_size)
        self._output = np.zeros(fft_size)
        self.real = np.zeros(fft_size)
        self.imag = np.zeros(fft_size)
        self._window = _normalised_hamming(fft_size)

    def push_sample(self, sample: float) -> None:
        """Append a sample to the current frame; ignored once the frame is full."""
        if self._input_index < self.fft_size:
            self._input[self._input_index] = sample
            self._input_index += 1

    def ready_to_process(self) -> bool:
        """Whether a full frame has been collected."""
        return self._input_index >= self.fft_size

    def perform_stft(self) -> None:
        """Window the collected frame and compute its spectrum into real/imag."""
        half = self.fft_size // 2
        spectrum = np.fft.rfft(self._input * self._window)[:half]
        self.real[:] = 0.0
        self.imag[:] = 0.0
        self.real[:half] = spectrum.real
        self.imag[:half] = spectrum.imag

    def perform_istft(self) -> None:
        """Resynthesise the spectrum in real/imag into the output frame."""
        half = self.fft_size // 2
        spectrum = np.zeros(half + 1, dtype=complex)
        spectrum[:half] = self.real[:half] + 1j * self.imag[:half]
        self._output = np.fft.irfft(spectrum, self.fft_size) * self._window
        self._output_index = 0
        self._input_index = 0

    def pop_sample(self) -> float:
        """Return the next output sample, or 0.0 once the frame is exhausted."""
        if self._output_index < len(self._output):
            value = float(self._output[self._output_index])
            self._output_index += 1
            return value
        return 0.0