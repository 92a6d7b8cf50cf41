"""Output stage processing."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class PostFX:
    """Applies a fixed output gain to audio buffers."""

    output_gain: float = 1.0

    def prepare(self, sample_rate: float, samples_per_block: int) -> None:
        """Prepare for playback; this stage keeps no rate-dependent state."""

    def apply_gain(self, buffer: np.ndarray) -> None:
        """Scale the buffer in place by the output gain."""
        buffer *= self.output_gain