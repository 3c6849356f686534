[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bravoengine"
version = "0.1.0"
description = "Scene, camera, collision and project-file core of a small first-person shooter engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game-engine", "collision", "raycast", "aabb", "camera", "wavefront-obj"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bravoengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
