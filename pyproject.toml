[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bombgrid"
version = "0.1.0"
description = "A terminal bomb-laying maze game with linked levels, enemies, power-ups and a high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "arcade", "maze", "bombs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bombgrid = "bombgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bombgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
