[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abstractknn"
version = "0.1.0"
description = "Parsing of labelled abstracts and their word and byte-pair count vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["text classification", "bag of words", "byte-pair encoding", "cosine similarity", "stopwords"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["abstractknn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
