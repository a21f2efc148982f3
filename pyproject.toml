[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stardust"
version = "0.1.0"
description = "Spacecraft navigation telemetry simulator emitting CCSDS space packets"
requires-python = ">=3.10"
dependencies = []
keywords = ["ccsds", "telemetry", "simulation", "space packet", "spacecraft"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stardust = "stardust.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stardust"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
