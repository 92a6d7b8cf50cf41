import wave

import numpy as np

from soundomatic.processor import Sound0maticProcessor

RATE = 44100


def _write_wav(path, values):
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(RATE)
        w.writeframes(b"".join(v.to_bytes(2, "little", signed=True) for v in values))
    return path


def _render(processor, blocks):
    processor.prepare_to_play(RATE, 512)
    outputs = []
    for size in blocks:
        buf = np.full((2, size), 7.0)
        processor.process_block(buf)
        outputs.append(buf)
    return np.concatenate(outputs, axis=1)


def _ramp(n, amp):
    return [int(amp * np.sin(i * 0.05)) for i in range(n)]


def test_no_sample_gives_silence():
    out = _render(Sound0maticProcessor(), [2048])
    assert out.tolist() == [[0.0] * 2048, [0.0] * 2048]


def test_missing_file_gives_silence(tmp_path):
    out = _render(Sound0maticProcessor(tmp_path / "missing.wav"), [2048])
    assert out.tolist() == [[0.0] * 2048, [0.0] * 2048]


def test_output_delayed_and_channels_equal(tmp_path):
    path = _write_wav(tmp_path / "s.wav", [16384] * 2048)
    out = _render(Sound0maticProcessor(path), [4096])
    size = Sound0maticProcessor.FFT_SIZE
    assert np.all(out[:, : size - 1] == 0.0)
    assert np.array_equal(out[0], out[1])
    assert np.any(out[0, size - 1 :] != 0.0)


def test_silence_after_sample_ends(tmp_path):
    size = Sound0maticProcessor.FFT_SIZE
    path = _write_wav(tmp_path / "s.wav", [16384] * size)
    out = _render(Sound0maticProcessor(path), [4 * size])
    tail = out[:, 2 * size - 1 :]
    assert tail.shape == (2, 2 * size + 1)
    assert tail.tolist() == [[0.0] * (2 * size + 1), [0.0] * (2 * size + 1)]
    assert np.any(out[0, : 2 * size - 1] != 0.0)


def test_linearity(tmp_path):
    small = _write_wav(tmp_path / "a.wav", _ramp(3000, 8000))
    large = _write_wav(tmp_path / "b.wav", [2 * v for v in _ramp(3000, 8000)])
    a = _render(Sound0maticProcessor(small), [4096])
    b = _render(Sound0maticProcessor(large), [4096])
    assert np.allclose(b, 2 * a, atol=1e-9)


def test_block_size_does_not_change_output(tmp_path):
    path = _write_wav(tmp_path / "s.wav", _ramp(3000, 12000))
    whole = _render(Sound0maticProcessor(path), [4096])
    split = _render(Sound0maticProcessor(path), [1000, 2048, 1048])
    assert np.allclose(whole, split)


def test_prepare_resets_playback(tmp_path):
    path = _write_wav(tmp_path / "s.wav", _ramp(3000, 12000))
    proc = Sound0maticProcessor(path)
    first = _render(proc, [2048])
    second = _render(proc, [2048])
    assert np.array_equal(first, second)


def test_bus_layout():
    proc = Sound0maticProcessor()
    assert proc.is_buses_layout_supported(2) is True
    assert proc.is_buses_layout_supported(1) is False
    assert proc.is_buses_layout_supported(6) is False