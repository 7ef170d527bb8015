[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handcricket"
version = "0.1.0"
description = "Play hand cricket in the terminal against a computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "cricket", "hand-cricket", "odd-even", "terminal"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
handcricket = "handcricket.game:main"

[tool.hatch.build.targets.wheel]
packages = ["handcricket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
