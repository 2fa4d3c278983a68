[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessbits"
version = "0.1.0"
description = "Chess bitboard primitives, attack tables, a KPK endgame bitbase and benchmark command lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "endgame", "bitbase", "uci", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chessbits-bench = "chessbits.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["chessbits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
