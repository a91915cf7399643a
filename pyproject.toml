[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenithengine"
version = "0.0.1"
description = "A small 2D game engine core: input state, window events, cameras, and batched sprite and UI rendering to CPU-side vertex data."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["game engine", "2d", "sprites", "batch rendering", "input", "flappy bird"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zenithengine"]

[tool.hatch.build.targets.sdist]
include = ["zenithengine", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
