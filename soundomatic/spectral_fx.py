"""Spectral-domain effects applied to FFT bins."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class SpectralFX:
    """Scales bin magnitudes by one half while keeping their phase."""

    bypass: bool = False

    def process_bins(self, real: np.ndarray, imag: np.ndarray) -> None:
        """Modify the real and imaginary bin arrays in place."""
        if self.bypass:
            return
        if real.shape != imag.shape:
            raise ValueError("real and imag must have the same shape")
        magnitude = np.hypot(real, imag) * 0.5
        phase = np.arctan2(imag, real)
        real[...] = magnitude * np.cos(phase)
        imag[...] = magnitude * np.sin(phase)