import numpy as np
import pytest

from rumengine.mesh import Mesh, MeshFactory, MeshLoadingError


def _triangle_factory():
    return (
        MeshFactory()
        .add_position((0, 0, 0))
        .add_position((1, 0, 0))
        .add_position((0, 1, 0))
        .add_normal((0, 0, 1))
        .add_normal((0, 0, 1))
        .add_normal((0, 0, 1))
        .add_face(0, 1, 2)
    )


def test_make_collects_added_data():
    mesh = _triangle_factory().add_color((1, 0, 0, 1)).make("tri")
    assert mesh.name == "tri"
    np.testing.assert_allclose(mesh.positions[1], (1, 0, 0))
    np.testing.assert_allclose(mesh.normals, [(0, 0, 1)] * 3)
    assert mesh.indices.tolist() == [0, 1, 2]
    assert mesh.indices_count() == len(mesh.indices)


def test_flags_reflect_optional_attributes():
    mesh = _triangle_factory().make("plain")
    assert not mesh.has_colors()
    assert not mesh.has_uvs()
    assert not mesh.has_tangents()
    assert not mesh.has_bones()

    factory = _triangle_factory()
    for _ in range(3):
        factory.add_uv((0, 1)).add_tangent((1, 0, 0)).add_color((0, 1, 0, 1))
    rich = factory.allocate_bone_data().make("rich")
    assert rich.has_colors() and rich.has_uvs() and rich.has_tangents() and rich.has_bones()


def test_make_empties_factory_but_keeps_material_id():
    factory = _triangle_factory()
    factory.mat_id = 7
    first = factory.make("a")
    second = factory.make("b")
    assert first.mat_id == 7 and second.mat_id == 7
    assert len(second.positions) == 0
    assert second.indices_count() == 0


def test_bone_data_fills_first_free_slots():
    factory = _triangle_factory().allocate_bone_data()
    factory.add_bone_data(1, 3, 0.25).add_bone_data(1, 5, 0.75)
    mesh = factory.make("boned")
    assert mesh.bone_ids.shape == (3, 4)
    assert mesh.bone_ids[1].tolist() == [3, 5, 0, 0]
    np.testing.assert_allclose(mesh.bone_weights[1][:2], (0.25, 0.75))
    assert mesh.bone_ids[0].tolist() == [0, 0, 0, 0]


def test_bone_id_zero_leaves_slot_free():
    factory = _triangle_factory().allocate_bone_data()
    factory.add_bone_data(0, 0, 0.5).add_bone_data(0, 2, 0.9)
    mesh = factory.make("zero")
    assert mesh.bone_ids[0].tolist() == [2, 0, 0, 0]
    np.testing.assert_allclose(mesh.bone_weights[0][0], 0.9, rtol=1e-6)


def test_more_than_four_bones_is_an_error():
    factory = _triangle_factory().allocate_bone_data()
    for bone in range(1, 5):
        factory.add_bone_data(2, bone, 0.25)
    with pytest.raises(MeshLoadingError):
        factory.add_bone_data(2, 9, 0.1)


def test_allocate_without_positions_is_an_error():
    with pytest.raises(MeshLoadingError):
        MeshFactory().allocate_bone_data()


def test_bone_data_without_allocation_is_an_error():
    with pytest.raises(MeshLoadingError):
        MeshFactory().add_bone_data(0, 1, 1.0)
    with pytest.raises(MeshLoadingError):
        _triangle_factory().add_bone_data(0, 1, 1.0)


def test_bone_data_vertex_out_of_range():
    factory = _triangle_factory().allocate_bone_data()
    with pytest.raises(IndexError):
        factory.add_bone_data(3, 1, 1.0)


def test_invalid_vectors_and_indices_rejected():
    with pytest.raises(ValueError):
        MeshFactory().add_position((1, 2))
    with pytest.raises(ValueError):
        MeshFactory().add_face(0, 1, 70000)
    with pytest.raises(ValueError):
        MeshFactory().add_face(-1, 0, 1)


def test_default_mesh_is_empty():
    mesh = Mesh()
    assert mesh.indices_count() == 0
    assert mesh.positions.shape == (0, 3)
    assert not mesh.has_bones()