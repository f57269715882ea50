[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chad-input"
version = "0.1.0"
description = "Validated numeric console input: integers and floating-point values with length, range, overflow and precision checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "validation", "console", "stdin", "numbers", "range"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Ukrainian",
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
packages = ["chad_input"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
