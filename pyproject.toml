[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "bankadb"
version = "0.1.0"
description = "A small interactive bank account manager backed by a plain comma-separated text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "cli", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankadb = "bankadb.cli:main"

[tool.setuptools.packages.find]
include = ["bankadb*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
