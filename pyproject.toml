[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svlib"
version = "1.0.0"
description = "Semantic versioning: parse versions, comparators and ranges, match and sort them"
requires-python = ">=3.10"
dependencies = []
keywords = ["semver", "semantic versioning", "version", "range", "comparator"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["svlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
