"""The sample-playing spectral synthesiser processor."""

from __future__ import annotations

import logging
import os

import numpy as np

from .fft_processor import FFTProcessor
from .post_fx import PostFX
from .sample_loader import SampleLoader, SampleLoadError
from .spectral_fx import SpectralFX

logger = logging.getLogger(__name__)


class Sound0maticProcessor:
    """Plays a loaded sample through an STFT analysis/resynthesis chain."""

    name = "sound0matic"
    accepts_midi = False
    produces_midi = False
    is_midi_effect = False
    has_editor = False
    tail_length_seconds = 0.0
    num_programs = 1
    current_program = 0
    num_output_channels = 2

    FFT_SIZE = 1024
    HOP_SIZE = 512

    def __init__(self, sample_path: str | os.PathLike | None = None) -> None:
        self.sample_path = sample_path
        self.sample_loader = SampleLoader()
        self.playback_position = 0
        self.fft_processor = FFTProcessor(self.FFT_SIZE, self.HOP_SIZE)
        self.spectral_fx = SpectralFX()
        self.post_fx = PostFX()

    def prepare_to_play(self, sample_rate: float, samples_per_block: int) -> None:
        """Load the sample at the playback rate and reset playback state."""
        if self.sample_path is not None:
            try:
                self.sample_loader.load_sample_from_file(self.sample_path, sample_rate)
            except SampleLoadError as exc:
                logger.warning("%s", exc)
        self.sample_loader.set_trim_range(0.0, 1.0)
        self.playback_position = 0
        self.fft_processor.prepare(self.FFT_SIZE, self.HOP_SIZE)

    def release_resources(self) -> None:
        """Release playback resources; nothing is held between sessions."""

    def is_buses_layout_supported(self, num_output_channels: int) -> bool:
        """Only a stereo output is supported."""
        return num_output_channels == 2

    def process_block(self, buffer: np.ndarray) -> None:
        """Fill a (channels, samples) buffer in place with the next output block."""
        if buffer.ndim != 2:
            raise ValueError("buffer must have shape (channels, samples)")
        buffer[...] = 0.0
        source = self.sample_loader.buffer
        available = self.sample_loader.num_samples
        fft = self.fft_processor
        for frame in buffer.T:
            sample = 0.0
            if self.playback_position < available:
                sample = float(source[self.playback_position])
                self.playback_position += 1
            fft.push_sample(sample)
            if fft.ready_to_process():
                fft.perform_stft()
                fft.perform_istft()
            frame[:] = fft.pop_sample()