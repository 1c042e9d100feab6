"""Scene-side core of a small 3D engine: entities, meshes, models, skeletal animation and materials."""

__version__ = "0.1.0"