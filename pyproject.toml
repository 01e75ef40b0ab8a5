[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moonshot"
version = "0.1.0"
description = "Building blocks for an inverted search index: tokenizer, posting decoder, block table, readers and writers"
requires-python = ">=3.10"
keywords = ["search", "inverted-index", "tokenizer", "murmurhash", "posting-list"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Indexing",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
moonshot = "moonshot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["moonshot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
