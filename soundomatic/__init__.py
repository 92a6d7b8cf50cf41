"""Sample-playback synthesis with STFT resynthesis, spectral effects and output gain."""

__version__ = "0.1.0"
__all__ = ["fft_processor", "spectral_fx", "post_fx", "sample_loader", "processor"]