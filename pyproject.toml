[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilerpg"
version = "0.1.0"
description = "A small tile-based role-playing game with a built-in level editor"
requires-python = ">=3.10"
keywords = ["game", "rpg", "tiles", "level-editor", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilerpg = "tilerpg.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["tilerpg"]

[tool.pytest.ini_options]
addopts = "-ra"
