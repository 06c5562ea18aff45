[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbcart"
version = "0.1.0"
description = "Game Boy cartridge header reader and the start of a Game Boy emulator loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "emulator", "rom", "cartridge", "header", "checksum"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbcart = "gbcart.emu:main"

[tool.hatch.build.targets.wheel]
packages = ["gbcart"]

[tool.pytest.ini_options]
addopts = "-ra"
