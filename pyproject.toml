[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termchess"
version = "0.1.0"
description = "Two-player chess in the terminal, with check, checkmate, stalemate, castling and promotion"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "game", "terminal", "board game", "two-player"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termchess = "termchess.game:main"

[tool.hatch.build.targets.wheel]
packages = ["termchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
