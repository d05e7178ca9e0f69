[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "configpolicy"
version = "0.1.0"
description = "Typed models for configuration and operator policy resources, with duration parsing and dict round trips"
requires-python = ">=3.10"
dependencies = []
keywords = ["policy", "compliance", "configuration", "operator", "governance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["configpolicy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
