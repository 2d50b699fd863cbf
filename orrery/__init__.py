"""Scene math for a textured-sphere orrery: meshes, camera, transforms, matrix stacks and input."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "controls",
    "scene",
    "shaders",
    "solar",
    "sphere",
    "torus",
    "transformations",
]