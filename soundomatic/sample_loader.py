"""Loading of a mono sample from a WAV file."""

from __future__ import annotations

import os
import wave

import numpy as np


class SampleLoadError(Exception):
    """Raised when a sample file cannot be read."""


def _decode_pcm(raw: bytes, width: int) -> np.ndarray:
    if width == 1:
        return (np.frombuffer(raw, dtype=np.uint8).astype(np.float64) - 128.0) / 128.0
    if width == 2:
        return np.frombuffer(raw, dtype="<i2").astype(np.float64) / 32768.0
    if width == 3:
        b = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
        values = b[:, 0] | (b[:, 1] << 8) | (b[:, 2] << 16)
        values = np.where(values >= 1 << 23, values - (1 << 24), values)
        return values.astype(np.float64) / float(1 << 23)
    if width == 4:
        return np.frombuffer(raw, dtype="<i4").astype(np.float64) / float(1 << 31)
    raise SampleLoadError(f"unsupported sample width: {width} bytes")


def _read_wav(path: str | os.PathLike) -> tuple[np.ndarray, int]:
    try:
        with wave.open(os.fspath(path), "rb") as reader:
            channels = reader.getnchannels()
            width = reader.getsampwidth()
            rate = reader.getframerate()
            raw = reader.readframes(reader.getnframes())
    except (OSError, EOFError, wave.Error) as exc:
        raise SampleLoadError(f"cannot read sample {path!s}: {exc}") from exc
    data = _decode_pcm(raw, width)
    usable = len(data) - len(data) % channels
    return data[:usable].reshape(-1, channels), rate


class SampleLoader:
    """Holds a mono sample buffer and a normalised trim range."""

    def __init__(self) -> None:
        self._buffer = np.zeros(0, dtype=np.float32)
        self.trim_start = 0.0
        self.trim_end = 1.0

    def load_sample_from_file(
        self, path: str | os.PathLike, target_sample_rate: float
    ) -> None:
        """Load a WAV file, mix it to mono and resample it to the target rate."""
        if target_sample_rate <= 0:
            raise ValueError("target_sample_rate must be positive")
        frames, rate = _read_wav(path)
        mono = frames.mean(axis=1) if frames.shape[1] > 1 else frames[:, 0]
        if rate != target_sample_rate:
            length = int(len(mono) * (target_sample_rate / rate))
            positions = np.arange(length) * (rate / target_sample_rate)
            mono = np.interp(positions, np.arange(len(mono)), mono)
        self._buffer = mono.astype(np.float32)

    def set_trim_range(self, start: float, end: float) -> None:
        """Set the normalised trim range, clamped to 0..1 with end >= start."""
        self.trim_start = min(max(start, 0.0), 1.0)
        self.trim_end = min(max(end, self.trim_start), 1.0)

    @property
    def buffer(self) -> np.ndarray:
        """The loaded mono samples."""
        return self._buffer

    @property
    def num_samples(self) -> int:
        """Number of samples inside the trim range."""
        total = len(self._buffer)
        return int(self.trim_end * total) - int(self.trim_start * total)