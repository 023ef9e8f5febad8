[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexfm"
version = "0.1.0"
description = "Core pieces of a six-operator FM synthesizer: FFT, wavetables, oscillators, shared patch parameters and slider label formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "fm", "audio", "wavetable", "fft", "oscillator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexfm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
