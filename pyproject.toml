[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arxivref"
version = "1.1.0"
description = "Parse and validate arXiv identifiers, categories and stamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["arxiv", "identifier", "citation", "parsing", "category"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arxivref"]

[tool.pytest.ini_options]
addopts = "-ra"
