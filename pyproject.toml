[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazytower"
version = "0.1.0"
description = "LazyTower accumulator over the BN254 scalar field with a Poseidon width-5 sponge hash"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "bn254", "lazytower", "hash", "sponge", "accumulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lazytower"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
