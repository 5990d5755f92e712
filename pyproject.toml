[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wildwater"
version = "0.1.0"
description = "Aggregate water-network CSV data per treatment plant into histogram data files"
requires-python = ">=3.10"
dependencies = []
keywords = ["water", "hydrology", "avl", "histogram", "csv"]
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
    "Topic :: Scientific/Engineering :: Hydrology",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wildwater = "wildwater.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wildwater"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
