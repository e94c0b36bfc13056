[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smdterm"
version = "0.31.0"
description = "Building blocks for a serial-adapter telnet terminal client: string and bounded-format helpers, display tile helpers, flash-filesystem CRC and bit helpers, a frame-driven clock, ELF image checks, a settings table with a binary save format, key-to-telnet encoding, network adapter control and controller port device bits."
requires-python = ">=3.10"
dependencies = []
keywords = ["telnet", "terminal", "xport", "littlefs", "crc32", "elf", "settings", "retro"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Telnet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smdterm"]

[tool.pytest.ini_options]
addopts = "-ra"
