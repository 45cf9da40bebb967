[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickengine"
version = "0.1.0"
description = "A small actor/component engine for a brick-breaking arcade game, with 2D/3D math, Targa texture loading and headless draw commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "breakout", "actor", "component", "vector", "matrix", "quaternion", "targa"]
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
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brickengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
