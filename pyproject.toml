[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aklib"
version = "0.1.0"
description = "Runtime building blocks: bit tricks, checked and fixed-point integers, open-addressing hash tables, byte buffers, atomics and format-string checks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash table",
    "fixed point",
    "checked arithmetic",
    "bit manipulation",
    "byte buffer",
    "atomic",
    "format string",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["aklib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
