[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesstables"
version = "0.1.0"
description = "Bitboard lookup tables for chess: rays, lines, leaper and slider attacks, and Zobrist keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "move generation", "lookup tables", "zobrist"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chesstables"]

[tool.pytest.ini_options]
addopts = "-ra"
