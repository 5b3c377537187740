[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campusreg"
version = "0.1.0"
description = "In-memory university registry of faculties, groups and students with an interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "registry", "students", "groups", "faculties", "shell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
campusreg = "campusreg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["campusreg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
