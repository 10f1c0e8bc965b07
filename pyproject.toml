[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dinorun"
version = "0.1.0"
description = "Engine-free core of a side-scrolling platformer: TMX tile maps, grid searches, animation, bitmap fonts, fades and scene flow"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "tilemap", "tmx", "pathfinding", "astar", "animation", "parallax"]
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
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dinorun"]

[tool.pytest.ini_options]
addopts = "-ra"
