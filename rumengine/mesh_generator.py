"""Ready-made simple meshes."""

from __future__ import annotations

from .mesh import Mesh, MeshFactory

_SKYBOX_CORNERS = (
    (1.0, 1.0, 1.0),
    (1.0, 1.0, -1.0),
    (1.0, -1.0, 1.0),
    (1.0, -1.0, -1.0),
    (-1.0, 1.0, 1.0),
    (-1.0, 1.0, -1.0),
    (-1.0, -1.0, 1.0),
    (-1.0, -1.0, -1.0),
)

_SKYBOX_FACES = (
    (5, 7, 3), (3, 1, 5),
    (6, 7, 5), (5, 4, 6),
    (3, 2, 0), (0, 1, 3),
    (6, 4, 0), (0, 2, 6),
    (5, 1, 0), (0, 4, 5),
    (7, 6, 3), (3, 6, 2),
)


def _build(factory: MeshFactory, name: str, positions, colors, uvs, normals, faces) -> Mesh:
    for p in positions:
        factory.add_position(p)
    for c in colors:
        factory.add_color(c)
    for u in uvs:
        factory.add_uv(u)
    for n in normals:
        factory.add_normal(n)
    for face in faces:
        factory.add_face(*face)
    return factory.make(name)


def generate_rectangle(x: float, y: float, z: float) -> Mesh:
    """A flat rectangle at height ``y`` spanning ``[-x, x]`` by ``[-z, z]``."""
    return _build(
        MeshFactory(),
        "Rectangle",
        positions=[(-x, y, -z), (x, y, -z), (-x, y, z), (x, y, z)],
        colors=[(1, 0, 0, 1), (1, 1, 0, 1), (0, 1, 1, 1), (1, 0, 1, 1)],
        uvs=[(0, 0), (1, 0), (1, 1), (0, 1)],
        normals=[(0, 1, 0)] * 4,
        faces=[(0, 2, 1), (1, 2, 3)],
    )


def generate_triangle() -> Mesh:
    """A single coloured triangle in the z = 0 plane."""
    return _build(
        MeshFactory(),
        "Triangle",
        positions=[(-1, -1, 0), (0, 1, 0), (1, -1, 0)],
        colors=[(1, 0, 0, 1), (0, 1, 0, 1), (0, 0, 1, 1)],
        uvs=[(0, 0), (1, 0.5), (0, 1)],
        normals=[(0, 1, 0)] * 3,
        faces=[(0, 2, 1)],
    )


def generate_skybox() -> Mesh:
    """A unit cube centred at the origin with positions only."""
    return _build(
        MeshFactory(),
        "SkyBox",
        positions=_SKYBOX_CORNERS,
        colors=(),
        uvs=(),
        normals=(),
        faces=_SKYBOX_FACES,
    )