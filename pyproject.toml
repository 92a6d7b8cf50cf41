[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soundomatic"
version = "0.1.0"
description = "Sample-playback synthesis engine with an STFT analysis/resynthesis stage and spectral effects"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "synthesis", "stft", "fft", "spectral", "sampler", "dsp", "wav"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["soundomatic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
