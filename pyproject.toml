[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sinalsim"
version = "0.1.0"
description = "Discrete-signal block simulator with series, parallel and feedback modules and text-mode charts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "signal",
    "simulation",
    "block diagram",
    "feedback",
    "integrator",
    "differentiator",
    "ascii chart",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sinalsim = "sinalsim.cli:main"
sinalsim-classic = "sinalsim.cli:classic_main"

[tool.hatch.build.targets.wheel]
packages = ["sinalsim"]

[tool.hatch.build.targets.sdist]
include = ["sinalsim", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
