[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runbasis"
version = "0.1.0"
description = "Pure-Python 3D engine basics: vector and matrix math, quaternions, Wavefront OBJ/MTL parsing, components and a small ECS."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "wavefront", "obj", "mtl", "ecs", "matrix", "quaternion", "game-engine"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runbasis"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
