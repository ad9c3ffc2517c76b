[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algostudy"
version = "0.1.0"
description = "Classic stack, string, array and binary tree algorithms, with AVL and ternary search trees and an interactive stack menu."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "stack",
    "binary tree",
    "avl",
    "ternary search tree",
    "three sum",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algostudy-stacks = "algostudy.stack_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["algostudy"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
