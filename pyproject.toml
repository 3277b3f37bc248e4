[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iccindex"
version = "0.1.0"
description = "Merge construction cost index (ICC) CSV files, compute monthly and year-on-year variations, and export binary records."
requires-python = ">=3.10"
dependencies = []
keywords = ["icc", "construction cost index", "csv", "statistics", "variation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iccindex = "iccindex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iccindex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
