[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rangeprimes"
version = "0.1.0"
description = "Find the primes in a range [m, n] by trial division or a segmented sieve of Eratosthenes, sequentially or with worker threads."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "primes",
    "sieve",
    "eratosthenes",
    "trial division",
    "segmented sieve",
    "scheduling",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rangeprimes = "rangeprimes.cli:main"
rangeprimes-check = "rangeprimes.check:main"

[tool.hatch.build.targets.wheel]
packages = ["rangeprimes"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
