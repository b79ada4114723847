[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parity_check"
version = "0.1.0"
description = "Tell whether an integer is even or odd."
requires-python = ">=3.10"
dependencies = []
keywords = ["parity", "even", "odd", "integer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parity_check"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
