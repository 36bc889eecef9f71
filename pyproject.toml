[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arithdemo"
version = "0.1.0"
description = "A small left-to-right integer calculator with status-code lookup and counter helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "unit-testing", "example"]
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
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arithdemo = "arithdemo.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["arithdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
