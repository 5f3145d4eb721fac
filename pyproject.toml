[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnuopt"
version = "2.8.0"
description = "GNU-style command-line option parsing with argument permutation, long options and abbreviations"
requires-python = ">=3.10"
dependencies = []
keywords = ["getopt", "command-line", "options", "argv", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gnuopt-demo = "gnuopt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gnuopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
