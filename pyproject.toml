[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastaparser"
version = "0.1.0"
description = "Convert sequence records between FASTA, JSON, CSV, TSV and XML, and report GC content and length statistics."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["fasta", "bioinformatics", "sequence", "gc-content", "conversion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fastaparser = "fastaparser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fastaparser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
