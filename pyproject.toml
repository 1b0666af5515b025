[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smtvalues"
version = "0.1.0"
description = "Value types for SMT-LIB style terms: integers, rationals, bit-vectors, strings, plus path and trie helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["smt", "smt-lib", "bitvector", "rational", "unicode", "trie"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["smtvalues"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
