[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bojkit"
version = "0.1.0"
description = "Solutions to introductory judge problems: arithmetic, star patterns, counting, ordering and a line editor, with a command that solves them from standard input."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "exercises", "counting", "patterns", "line-editor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bojkit = "bojkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bojkit"]

[tool.pytest.ini_options]
addopts = "-ra"
