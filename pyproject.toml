[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicalc"
version = "0.1.0"
description = "A tiny integer calculator language: lexer, parser, bytecode generator and stack virtual machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "bytecode", "virtual-machine", "parser", "lexer", "calculator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicalc = "minicalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minicalc"]

[tool.pytest.ini_options]
addopts = "-ra"
