[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qubo"
version = "0.1.0"
description = "Terminal question bank: load subjects, chapters and questions from a text file and pick a chapter to study"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "flashcards", "study", "question bank", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qubo = "qubo.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["qubo"]

[tool.pytest.ini_options]
addopts = "-ra"
