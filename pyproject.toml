[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenakit"
version = "0.1.0"
description = "Small algorithmic toolkit: modular arithmetic, Fibonacci, binomials, XOR trie, palindromes, sparse tables, search and debug formatting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "modular-arithmetic",
    "fibonacci",
    "binomial",
    "trie",
    "manacher",
    "sparse-table",
    "ternary-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arenakit-fib = "arenakit.fibonacci:main"
arenakit-interactive = "arenakit.interactive:main"

[tool.hatch.build.targets.wheel]
packages = ["arenakit"]

[tool.hatch.build.targets.sdist]
include = ["arenakit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
