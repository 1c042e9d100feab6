"""Keyframed bone animations and their interpolation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Union

import numpy as np

from .linalg import mix, quat_slerp


class AnimationInterpolationError(Exception):
    """Raised when a pose cannot be computed from the keyframes at hand."""


@dataclass(frozen=True)
class KeyFrame:
    """A value (3-vector or quaternion ``(w, x, y, z)``) at a time stamp in ticks."""

    time_stamp: float
    value: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_stamp", float(self.time_stamp))
        object.__setattr__(self, "value", tuple(float(c) for c in np.asarray(self.value).reshape(-1)))


_Interpolate = Callable[[Sequence[float], Sequence[float], float], np.ndarray]


def _bracket(time: float, keyframes: Sequence[KeyFrame]) -> tuple[KeyFrame, KeyFrame]:
    """Return the keyframes just before and just after ``time``."""
    if time < 0:
        raise AnimationInterpolationError("Program was asked to calculate a negative time animation pose.")
    if len(keyframes) <= 1:
        raise AnimationInterpolationError(
            "Program was asked to find two nearest keyFrames "
            "while Node Animation did not have at least two keyframes."
        )
    previous: Optional[KeyFrame] = None
    for keyframe in keyframes:
        if keyframe.time_stamp > time:
            if previous is None:
                raise AnimationInterpolationError("First keyframe is already ahead of animation time.")
            return previous, keyframe
        previous = keyframe
    raise AnimationInterpolationError("Time exceeded animation time while searching nearest keyframes")


def _single_or_none(keyframes: Sequence[KeyFrame]) -> Optional[np.ndarray]:
    if not keyframes:
        raise AnimationInterpolationError("Tried to calculate current keyframe from an empty keyframes vector")
    if len(keyframes) == 1:
        return np.array(keyframes[0].value)
    return None


def _interpolated(time: float, keyframes: Sequence[KeyFrame], interpolate: _Interpolate) -> np.ndarray:
    single = _single_or_none(keyframes)
    if single is not None:
        return single
    before, after = _bracket(time, keyframes)
    progression = (time - before.time_stamp) / (after.time_stamp - before.time_stamp)
    return np.asarray(interpolate(before.value, after.value, progression), dtype=float)


def _nearest(time: float, keyframes: Sequence[KeyFrame]) -> np.ndarray:
    single = _single_or_none(keyframes)
    if single is not None:
        return single
    before, after = _bracket(time, keyframes)
    chosen = after if time - before.time_stamp > after.time_stamp - time else before
    return np.array(chosen.value)


@dataclass
class BoneAnimation:
    """Translation, rotation and scaling keyframes of one bone, each sorted by time."""

    translations: list[KeyFrame] = field(default_factory=list)
    rotations: list[KeyFrame] = field(default_factory=list)
    scalings: list[KeyFrame] = field(default_factory=list)

    def interpolated_translation(self, time: float) -> np.ndarray:
        return _interpolated(time, self.translations, mix)

    def interpolated_rotation(self, time: float) -> np.ndarray:
        return _interpolated(time, self.rotations, quat_slerp)

    def interpolated_scaling(self, time: float) -> np.ndarray:
        return _interpolated(time, self.scalings, mix)

    def nearest_translation(self, time: float) -> np.ndarray:
        return _nearest(time, self.translations)

    def nearest_rotation(self, time: float) -> np.ndarray:
        return _nearest(time, self.rotations)

    def nearest_scaling(self, time: float) -> np.ndarray:
        return _nearest(time, self.scalings)


@dataclass
class SkeletalAnimation:
    """A named animation holding bone animations keyed by bone index and by bone name."""

    name: str = ""
    duration_in_ticks: float = 0.0
    ticks_per_second: float = 0.0
    bone_animations_by_id: dict[int, BoneAnimation] = field(default_factory=dict)
    bone_animations_by_name: dict[str, BoneAnimation] = field(default_factory=dict)

    def find_bone_animation(self, key: Union[int, str]) -> Optional[BoneAnimation]:
        """Look up a bone animation by name (``str``) or index (``int``); ``None`` if absent."""
        if isinstance(key, str):
            return self.bone_animations_by_name.get(key)
        return self.bone_animations_by_id.get(key)