[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "opinionated"
version = "0.1.0"
description = "A console survey system with user accounts, an admin menu and binary survey files."
requires-python = ">=3.10"
dependencies = []
keywords = ["survey", "questionnaire", "console", "poll"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
opinionated = "opinionated.controller:main"
survey-engine = "opinionated.engine:main"

[tool.setuptools.packages.find]
include = ["opinionated*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
