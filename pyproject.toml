[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orrery"
version = "0.1.0"
description = "Scene math for a small textured-sphere orrery: meshes, camera, transforms and matrix stacks"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "3d",
    "graphics",
    "camera",
    "mesh",
    "sphere",
    "torus",
    "matrix-stack",
    "solar-system",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["orrery"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
