import math

import numpy as np
import pytest

from rumengine.linalg import (
    identity,
    look_at,
    mat4_from_row_major,
    mix,
    perspective,
    quat_slerp,
    quat_to_mat4,
    rotate,
    scale,
    translate,
)


def _axis_angle_quat(angle, axis):
    axis = np.asarray(axis, dtype=float)
    return np.concatenate([[math.cos(angle / 2)], math.sin(angle / 2) * axis])


def test_translate_moves_origin_to_offset():
    m = translate(identity(), (1.0, 2.0, 3.0))
    np.testing.assert_allclose(m @ [0, 0, 0, 1], [1, 2, 3, 1])


def test_translate_composes_with_inverse():
    m = translate(translate(identity(), (4, -2, 7)), (-4, 2, -7))
    np.testing.assert_allclose(m, identity())


def test_rotate_is_orthonormal():
    r = rotate(identity(), 0.7, (1, 2, 3))
    np.testing.assert_allclose(r @ r.T, identity(), atol=1e-12)
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_rotate_quarter_turn_about_z():
    r = rotate(identity(), math.pi / 2, (0, 0, 1))
    np.testing.assert_allclose(r @ [1, 0, 0, 0], [0, 1, 0, 0], atol=1e-12)


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate(identity(), 1.0, (0, 0, 0))


def test_scale_uniform_and_vector():
    np.testing.assert_allclose(scale(identity(), 2.0), scale(identity(), (2.0, 2.0, 2.0)))
    s = scale(identity(), (2, 3, 4))
    np.testing.assert_allclose(s @ [1, 1, 1, 1], [2, 3, 4, 1])


def test_perspective_maps_near_and_far_planes():
    near, far = 1.0, 150.0
    p = perspective(math.radians(45), 2.0, near, far)
    at_near = p @ [0, 0, -near, 1]
    at_far = p @ [0, 0, -far, 1]
    assert at_near[2] / at_near[3] == pytest.approx(-1.0)
    assert at_far[2] / at_far[3] == pytest.approx(1.0)


def test_look_at_puts_eye_at_origin_and_center_ahead():
    eye, center = (0.0, 0.0, 3.0), (0.0, 0.0, 0.0)
    v = look_at(eye, center, (0, 1, 0))
    np.testing.assert_allclose(v @ [*eye, 1], [0, 0, 0, 1], atol=1e-12)
    ahead = v @ [*center, 1]
    assert ahead[0] == pytest.approx(0.0)
    assert ahead[1] == pytest.approx(0.0)
    assert ahead[2] < 0


def test_mix_endpoints():
    a, b = np.array([1.0, 2.0, 3.0]), np.array([5.0, -2.0, 0.0])
    np.testing.assert_allclose(mix(a, b, 0.0), a)
    np.testing.assert_allclose(mix(a, b, 1.0), b)


def test_slerp_endpoints_and_unit_length():
    qa = _axis_angle_quat(0.0, (0, 0, 1))
    qb = _axis_angle_quat(math.pi / 2, (0, 0, 1))
    np.testing.assert_allclose(quat_slerp(qa, qb, 0.0), qa, atol=1e-12)
    np.testing.assert_allclose(quat_slerp(qa, qb, 1.0), qb, atol=1e-12)
    assert np.linalg.norm(quat_slerp(qa, qb, 0.3)) == pytest.approx(1.0)


def test_slerp_halfway_is_half_angle():
    qa = _axis_angle_quat(0.0, (0, 0, 1))
    qb = _axis_angle_quat(math.pi / 2, (0, 0, 1))
    np.testing.assert_allclose(
        quat_slerp(qa, qb, 0.5), _axis_angle_quat(math.pi / 4, (0, 0, 1)), atol=1e-12
    )


def test_slerp_takes_shortest_path():
    qa = _axis_angle_quat(0.2, (0, 1, 0))
    qb = _axis_angle_quat(0.6, (0, 1, 0))
    np.testing.assert_allclose(quat_slerp(qa, -qb, 1.0), qb, atol=1e-12)


def test_quat_to_mat4_matches_rotate():
    angle, axis = 1.1, (0.0, 0.6, 0.8)
    np.testing.assert_allclose(
        quat_to_mat4(_axis_angle_quat(angle, axis)), rotate(identity(), angle, axis), atol=1e-12
    )


def test_quat_to_mat4_identity():
    np.testing.assert_allclose(quat_to_mat4((1, 0, 0, 0)), identity())


def test_mat4_from_row_major_round_trip_and_layout():
    m = translate(rotate(identity(), 0.4, (1, 0, 0)), (5, 6, 7))
    np.testing.assert_allclose(mat4_from_row_major(m.flatten()), m)
    t = mat4_from_row_major([1, 0, 0, 9, 0, 1, 0, 8, 0, 0, 1, 7, 0, 0, 0, 1])
    np.testing.assert_allclose(t @ [0, 0, 0, 1], [9, 8, 7, 1])


def test_mat4_from_row_major_wrong_size():
    with pytest.raises(ValueError):
        mat4_from_row_major([1, 2, 3])