[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saikodev"
version = "0.1.0"
description = "ROM build utilities and hardware definitions for 68000 arcade and console development"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "68000",
    "arcade",
    "cps",
    "cps2",
    "system16",
    "system18",
    "megadrive",
    "rom",
    "eprom",
    "homebrew",
    "embedded",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bin2s = "saikodev.bin2s:main"
bin2h = "saikodev.bin2h:main"
bin2arr = "saikodev.bin2arr:main"
binpad = "saikodev.binpad:main"
bsplit = "saikodev.bsplit:main"
megaloader = "saikodev.megaloader:main"

[tool.hatch.build.targets.wheel]
packages = ["saikodev"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
