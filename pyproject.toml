[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rumengine"
version = "0.1.0"
description = "Scene-side core of a small 3D engine: entities, meshes, skeletons, skeletal animation and material loading"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "engine", "skeletal-animation", "mesh", "materials", "pbr"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rumengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
