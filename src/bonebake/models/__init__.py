"""bonebake data models - pure Pydantic and dataclasses, no I/O."""

from bonebake.models.description import AnimationDescription, AnimatorDescription
from bonebake.models.enums import Channel, CurveKind, LoopType
from bonebake.models.frame import AnimationFrame
from bonebake.models.keyframe import (
    TICKS_PER_SECOND,
    Keyframe,
    KeyframeRecord,
    seconds_to_ticks,
)
from bonebake.models.skeleton import BoneBlueprint, SkeletonBlueprint, SkeletonResolver

__all__ = [
    "TICKS_PER_SECOND",
    "AnimationDescription",
    "AnimationFrame",
    "AnimatorDescription",
    "BoneBlueprint",
    "Channel",
    "CurveKind",
    "Keyframe",
    "KeyframeRecord",
    "LoopType",
    "SkeletonBlueprint",
    "SkeletonResolver",
    "seconds_to_ticks",
]
