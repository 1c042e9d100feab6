"""Computes per-bone pose matrices from a skeleton and its current animation."""

from __future__ import annotations

import math
import time
from typing import Callable, Optional

import numpy as np

from .animation import SkeletalAnimation
from .linalg import identity, quat_to_mat4, scale, translate
from .skeleton import MAX_BONES, Bone, Skeleton


class SkeletalAnimator:
    """Plays an animation on a skeleton, timed by ``clock`` (seconds)."""

    def __init__(self, skeleton: Skeleton, clock: Optional[Callable[[], float]] = None) -> None:
        self.skeleton = skeleton
        self._clock = clock if clock is not None else time.perf_counter
        self.current_animation: Optional[SkeletalAnimation] = None
        self.starting_time = 0.0
        self.current_time = 0.0
        self.current_time_in_ticks = 0.0
        self._pose = np.tile(np.eye(4), (MAX_BONES, 1, 1))

    def set_current_animation(self, animation: SkeletalAnimation) -> None:
        """Switch to ``animation`` and restart timing from now."""
        self.current_animation = animation
        self.starting_time = self._clock()

    def calculate_current_pose(self) -> None:
        """Update the pose matrices of every bone for the current time."""
        animation = self.current_animation
        if animation is None:
            raise RuntimeError("No current animation set.")
        if self.skeleton.root_bone is None:
            raise RuntimeError("Skeleton has no root bone.")
        period = animation.duration_in_ticks / animation.ticks_per_second
        self.current_time = math.fmod(self._clock() - self.starting_time, period)
        self.current_time_in_ticks = self.current_time / animation.ticks_per_second
        self._calculate_hierarchy(self.skeleton.root_bone, identity())

    def _calculate_hierarchy(self, bone: Bone, parent_transformation: np.ndarray) -> None:
        local = np.asarray(bone.to_parent_space_matrix, dtype=float)
        bone_animation = self.current_animation.find_bone_animation(bone.name)
        if bone_animation is not None:
            t = self.current_time_in_ticks
            translation = translate(identity(), bone_animation.interpolated_translation(t))
            rotation = quat_to_mat4(bone_animation.interpolated_rotation(t))
            scaling = scale(identity(), bone_animation.interpolated_scaling(t))
            local = translation @ rotation @ scaling

        global_transformation = parent_transformation @ local
        self._pose[bone.idx] = (
            np.asarray(self.skeleton.global_inverse_transformation, dtype=float)
            @ global_transformation
            @ np.asarray(bone.offset, dtype=float)
        )
        for child in bone.children:
            self._calculate_hierarchy(child, global_transformation)

    def pose_transformations(self) -> np.ndarray:
        """Return a copy of the pose matrices, shape ``(MAX_BONES, 4, 4)``, indexed by bone index."""
        return self._pose.copy()