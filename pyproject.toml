[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "undeadwars"
version = "0.1.0"
description = "A turn-based console strategy game pitting the living against waves of the undead"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "turn-based", "console", "undead"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
undeadwars = "undeadwars.game:main"

[tool.hatch.build.targets.wheel]
packages = ["undeadwars"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
