[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marsarcade"
version = "0.1.0"
description = "Small arcade games for an in-memory 84x48 monochrome screen: a Mars explorer platformer, a lane-based space shooter, Pong and a main menu."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "arcade",
    "game",
    "platformer",
    "space-invaders",
    "pong",
    "lcd",
    "pixel",
    "framebuffer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marsarcade"]

[tool.hatch.build.targets.sdist]
include = ["marsarcade", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
