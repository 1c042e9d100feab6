import numpy as np
import pytest

from rumengine.animation import (
    AnimationInterpolationError,
    BoneAnimation,
    KeyFrame,
    SkeletalAnimation,
)

IDENTITY_Q = (1.0, 0.0, 0.0, 0.0)
HALF_TURN_Z_Q = (np.cos(np.pi / 4), 0.0, 0.0, np.sin(np.pi / 4))


def make_anim():
    return BoneAnimation(
        translations=[KeyFrame(0, (0, 0, 0)), KeyFrame(2, (2, 4, 6))],
        rotations=[KeyFrame(0, IDENTITY_Q), KeyFrame(2, HALF_TURN_Z_Q)],
        scalings=[KeyFrame(0, (1, 1, 1)), KeyFrame(1, (3, 3, 3))],
    )


def test_keyframe_value_is_tuple_of_floats():
    kf = KeyFrame(1, np.array([1, 2, 3]))
    assert kf.value == (1.0, 2.0, 3.0)
    assert kf.time_stamp == 1.0


def test_single_keyframe_returned_for_any_time():
    anim = BoneAnimation(translations=[KeyFrame(5, (1, 2, 3))])
    assert np.allclose(anim.interpolated_translation(100.0), (1, 2, 3))
    assert np.allclose(anim.nearest_translation(0.0), (1, 2, 3))


def test_interpolated_translation_midway():
    assert np.allclose(make_anim().interpolated_translation(1.0), (1, 2, 3))


def test_interpolated_at_first_keyframe_time_gives_first_value():
    assert np.allclose(make_anim().interpolated_translation(0.0), (0, 0, 0))


def test_interpolated_scaling():
    assert np.allclose(make_anim().interpolated_scaling(0.5), (2, 2, 2))


def test_interpolated_rotation_endpoint_and_unit_length():
    anim = make_anim()
    assert np.allclose(anim.interpolated_rotation(0.0), IDENTITY_Q)
    mid = anim.interpolated_rotation(1.0)
    assert np.isclose(np.linalg.norm(mid), 1.0)
    assert np.isclose(mid[1], 0.0) and np.isclose(mid[2], 0.0)
    assert 0.0 < mid[3] < HALF_TURN_Z_Q[3]


def test_nearest_picks_closer_keyframe():
    anim = make_anim()
    assert np.allclose(anim.nearest_translation(0.4), (0, 0, 0))
    assert np.allclose(anim.nearest_translation(1.6), (2, 4, 6))
    assert np.allclose(anim.nearest_rotation(1.9), HALF_TURN_Z_Q)
    assert np.allclose(anim.nearest_scaling(0.2), (1, 1, 1))


def test_nearest_tie_picks_previous():
    assert np.allclose(make_anim().nearest_translation(1.0), (0, 0, 0))


def test_empty_keyframes_raise():
    anim = BoneAnimation()
    with pytest.raises(AnimationInterpolationError):
        anim.interpolated_translation(0.0)
    with pytest.raises(AnimationInterpolationError):
        anim.nearest_rotation(0.0)


def test_negative_time_raises():
    with pytest.raises(AnimationInterpolationError):
        make_anim().interpolated_translation(-1.0)
    with pytest.raises(AnimationInterpolationError):
        make_anim().nearest_scaling(-0.5)


def test_first_keyframe_ahead_raises():
    anim = BoneAnimation(translations=[KeyFrame(1, (0, 0, 0)), KeyFrame(2, (1, 1, 1))])
    with pytest.raises(AnimationInterpolationError):
        anim.interpolated_translation(0.5)


def test_time_past_last_keyframe_raises():
    with pytest.raises(AnimationInterpolationError):
        make_anim().interpolated_translation(2.0)
    with pytest.raises(AnimationInterpolationError):
        make_anim().nearest_translation(3.0)


def test_find_bone_animation_by_id_and_name():
    bone_anim = make_anim()
    animation = SkeletalAnimation(
        name="walk",
        duration_in_ticks=2.0,
        ticks_per_second=1.0,
        bone_animations_by_id={3: bone_anim},
        bone_animations_by_name={"arm": bone_anim},
    )
    assert animation.find_bone_animation(3) is bone_anim
    assert animation.find_bone_animation("arm") is bone_anim
    assert animation.find_bone_animation(4) is None
    assert animation.find_bone_animation("leg") is None