[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anthill"
version = "0.1.0"
description = "Data model for a text adventure set in an anthill: spaces, links, objects, enemies, inventory and experience"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "role-playing", "inventory", "game-model"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["anthill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
