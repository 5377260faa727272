[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamebox"
version = "0.1.0"
description = "A small 2D game launcher with a Flappy Bird clone built on pygame"
requires-python = ">=3.10"
keywords = ["game", "flappy bird", "arcade", "pygame", "sprite"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamebox = "gamebox.main:main"

[tool.hatch.build.targets.wheel]
packages = ["gamebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
