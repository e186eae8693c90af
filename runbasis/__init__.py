"""3D engine basics: vector, quaternion and matrix math, Wavefront OBJ/MTL parsing, components and a small ECS."""

__version__ = "0.1.0"

__all__ = [
    "aabb",
    "components",
    "ecs",
    "materials",
    "matrix",
    "mtl",
    "obj",
    "obj_model",
    "quaternion",
    "vector",
]