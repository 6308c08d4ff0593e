[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memecli"
version = "0.1.0"
description = "Create ASCII art memes from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["meme", "ascii-art", "cli", "terminal", "fun"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memecli = "memecli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["memecli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
