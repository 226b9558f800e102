[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irexec"
version = "0.1.0"
description = "A small lexer and an interpreter for a linked intermediate representation of a toy imperative language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "intermediate representation", "lexer", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
irexec-demo = "irexec.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["irexec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
