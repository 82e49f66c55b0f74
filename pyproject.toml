[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dogshelter"
version = "0.1.0"
description = "Animal shelter records kept in a name-ordered AVL tree, with an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree", "shelter", "animals", "records"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dogshelter = "dogshelter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dogshelter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
