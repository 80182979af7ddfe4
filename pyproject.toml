[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreaker"
version = "0.1.0"
description = "Brick-breaker game pieces with an in-memory drawing toolkit, colour palette, window input model and JPEG compression parameter helpers"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "arcade", "bricks", "breakout", "graphics", "jpeg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["brickbreaker"]

[tool.hatch.build.targets.sdist]
include = ["brickbreaker", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
