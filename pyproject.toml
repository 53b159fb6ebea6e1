[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wellmeter"
version = "0.1.0"
description = "State model and settings storage for a wireline depth and tension metering display"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireline", "depth", "tension", "metering", "modbus", "sqlite", "hmi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wellmeter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
