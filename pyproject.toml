[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tahu"
version = "0.1.0"
description = "Lexer and diagnostics for the Tahu language compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "tokenizer", "diagnostics", "tahu"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tahuc = "tahu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tahu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
