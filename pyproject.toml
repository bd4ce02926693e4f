[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cptoolkit"
version = "0.1.0"
description = "Competitive-programming algorithms: modular math, graphs, strings, geometry and matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "graphs", "strings", "geometry", "number-theory"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cptoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
