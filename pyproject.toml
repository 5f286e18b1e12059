[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicomp"
version = "0.1.0"
description = "Small compiler toolkit: lexers, grammar analysis (FIRST/FOLLOW, useless symbols, predictive check) and an intermediate-code machine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "grammar",
    "first-follow",
    "ll1",
    "intermediate-representation",
    "interpreter",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minicomp-lex = "minicomp.number_lexer:main"
minicomp-grammar = "minicomp.grammar:main"
minicomp-demo = "minicomp.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["minicomp"]

[tool.hatch.build.targets.sdist]
include = ["minicomp", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
