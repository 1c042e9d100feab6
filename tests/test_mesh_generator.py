from collections import Counter

import numpy as np

from rumengine.mesh_generator import generate_rectangle, generate_skybox, generate_triangle


def test_rectangle_positions_follow_arguments():
    mesh = generate_rectangle(2.0, 0.5, 3.0)
    assert mesh.name == "Rectangle"
    np.testing.assert_allclose(
        mesh.positions,
        [(-2.0, 0.5, -3.0), (2.0, 0.5, -3.0), (-2.0, 0.5, 3.0), (2.0, 0.5, 3.0)],
    )
    assert mesh.indices.tolist() == [0, 2, 1, 1, 2, 3]
    assert mesh.has_colors() and mesh.has_uvs()
    assert len(mesh.normals) == len(mesh.positions)


def test_triangle_matches_source_data():
    mesh = generate_triangle()
    assert mesh.name == "Triangle"
    np.testing.assert_allclose(mesh.positions, [(-1, -1, 0), (0, 1, 0), (1, -1, 0)])
    np.testing.assert_allclose(mesh.uvs[1], (1, 0.5))
    assert mesh.indices.tolist() == [0, 2, 1]


def test_skybox_is_a_closed_cube():
    mesh = generate_skybox()
    assert mesh.name == "SkyBox"
    assert np.all(np.abs(mesh.positions) == 1.0)
    assert len({tuple(p) for p in mesh.positions.tolist()}) == len(mesh.positions)
    assert mesh.indices[:3].tolist() == [5, 7, 3]
    assert mesh.indices_count() % 3 == 0
    assert int(mesh.indices.max()) < len(mesh.positions)
    assert not mesh.has_colors() and not mesh.has_uvs()


def test_skybox_edges_shared_by_two_triangles():
    mesh = generate_skybox()
    assert mesh.indices_count() == 36
    triangles = mesh.indices.reshape(-1, 3).tolist()
    assert len(triangles) == 12
    edge_counts = Counter(
        frozenset(edge)
        for a, b, c in triangles
        for edge in ((a, b), (b, c), (c, a))
    )
    assert len(edge_counts) == 18
    assert all(count == 2 for count in edge_counts.values())