"""Conversion of imported scene animations into skeletal animations."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .animation import BoneAnimation, KeyFrame, SkeletalAnimation
from .scene import NodeAnimation, QuatKey, SceneAnimation, VectorKey


class AnimationLoadingError(Exception):
    """Raised when an animation cannot be turned into a skeletal animation."""


def _keyframes(keys: Iterable[VectorKey | QuatKey]) -> list[KeyFrame]:
    return [KeyFrame(key.time, key.value) for key in keys]


def _bone_animation(channel: NodeAnimation) -> BoneAnimation:
    return BoneAnimation(
        translations=_keyframes(channel.position_keys),
        rotations=_keyframes(channel.rotation_keys),
        scalings=_keyframes(channel.scaling_keys),
    )


class SkeletonAnimationLoader:
    """Loads one animation at a time; :meth:`make` hands it over and resets the loader."""

    def __init__(self) -> None:
        self._constructed: Optional[SkeletalAnimation] = None

    def load_animation(self, animation: SceneAnimation, bone_name_to_index: Mapping[str, int]) -> None:
        """Convert ``animation``; every channel must animate a bone of the skeleton."""
        if not animation.channels:
            raise AnimationLoadingError("Tried to load a non-skeletal animation as a skeletal one.")

        constructed = SkeletalAnimation(
            name=animation.name,
            duration_in_ticks=float(animation.duration),
            ticks_per_second=float(animation.ticks_per_second),
        )
        for channel in animation.channels:
            if channel.node_name not in bone_name_to_index:
                raise AnimationLoadingError(f"Animated node {channel.node_name!r} is not a bone of the skeleton.")
            bone_index = bone_name_to_index[channel.node_name]
            constructed.bone_animations_by_id.setdefault(bone_index, _bone_animation(channel))
            constructed.bone_animations_by_name.setdefault(channel.node_name, _bone_animation(channel))
        self._constructed = constructed

    def make(self) -> SkeletalAnimation:
        """Hand over the loaded animation."""
        if self._constructed is None:
            raise AnimationLoadingError(
                "Tried to create an empty animation. Possibly tried to return the same animation twice."
            )
        animation, self._constructed = self._constructed, None
        return animation