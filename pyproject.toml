[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astroship"
version = "0.1.0"
description = "A small top-down asteroid shooter with a tiny entity-component world"
requires-python = ">=3.10"
keywords = ["game", "arcade", "asteroids", "pygame", "ecs"]
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
astroship = "astroship.game:main"

[tool.hatch.build.targets.wheel]
packages = ["astroship"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
