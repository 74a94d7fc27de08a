"""Error taxonomy for animation baking."""

from __future__ import annotations


class BakeError(ValueError):
    """Base class for everything the baking pipeline reports."""


class MalformedInputShape(BakeError):
    """Raised when an animation description is not the expected structure."""


class UnrecognizedLoopType(BakeError):
    """Raised when the animation's loop type is not a known :class:`LoopType`."""


class MalformedKeyframe(BakeError):
    """Raised when a single keyframe record cannot be parsed."""


class MalformedAnimator(BakeError):
    """Raised when a per-bone animator entry cannot be parsed."""


class UnknownBone(BakeError):
    """Raised when the skeleton has no bone with the animator's name."""

    def __init__(self, bone_name: str, model_name: str) -> None:
        super().__init__(f"Failed to get bone {bone_name} from model {model_name}!")
        self.bone_name = bone_name
        self.model_name = model_name
