[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rexgram"
version = "0.1.0"
description = "Tokenizer and parser that turn regular-expression patterns into a syntax tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "regular expression", "parser", "tokenizer", "syntax tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rexgram"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
