"""Animation blueprint: one animation description baked against a skeleton."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from bonebake.config import BakeSettings
from bonebake.errors import (
    MalformedAnimator,
    MalformedInputShape,
    UnknownBone,
    UnrecognizedLoopType,
)
from bonebake.models.description import AnimationDescription
from bonebake.models.enums import LoopType
from bonebake.models.keyframe import seconds_to_ticks
from bonebake.pipeline.baker import bake_frames
from bonebake.pipeline.tracks import build_track

if TYPE_CHECKING:
    from bonebake.models.frame import AnimationFrame
    from bonebake.models.keyframe import Keyframe
    from bonebake.models.skeleton import BoneBlueprint, SkeletonResolver

logger = logging.getLogger(__name__)


class AnimationBlueprint:
    """A fully baked animation: per-bone keyframe tracks and per-tick frames.

    Construction parses the description, builds a track for every animated
    bone and bakes it. Problems local to one bone or keyframe are logged and
    skipped; a malformed description or unknown loop type raises.

    Raises
    ------
    MalformedInputShape
        If *data* is not a mapping with ``name``, ``loop`` and ``length``.
    UnrecognizedLoopType
        If ``loop`` is not one of :class:`LoopType`.
    """

    def __init__(
        self,
        data: object,
        model_name: str,
        skeleton: SkeletonResolver,
        *,
        settings: BakeSettings | None = None,
    ) -> None:
        self._settings = settings or BakeSettings()
        self._skeleton = skeleton
        self._bone_keyframes: dict[BoneBlueprint, tuple[Keyframe, ...]] = {}
        self._animation_frames: dict[BoneBlueprint, tuple[AnimationFrame, ...]] = {}

        description = _parse_description(data, model_name)
        self._name = description.name
        self._loop_type = _parse_loop_type(description.loop, model_name, description.name)
        self._duration = seconds_to_ticks(description.length, self._settings.tick_rate)

        for animator in (description.animators or {}).values():
            self._add_track(animator, model_name)

        try:
            self._interpolate_keyframes()
        except IndexError:
            logger.exception(
                "Failed to interpolate animations for model %s! Animation name: %s",
                model_name,
                self._name,
            )

    # -- construction -------------------------------------------------------

    def _add_track(self, animator: object, model_name: str) -> None:
        try:
            result = build_track(
                animator,
                self._skeleton,
                model_name=model_name,
                animation_name=self._name,
                settings=self._settings,
            )
        except (MalformedAnimator, UnknownBone) as exc:
            logger.warning("%s", exc)
            return
        if result is None:
            return
        bone, keyframes = result
        self._bone_keyframes[bone] = tuple(keyframes)

    def _interpolate_keyframes(self) -> None:
        for bone, keyframes in self._bone_keyframes.items():
            frames = bake_frames(
                keyframes,
                self._duration,
                position_scale=self._settings.position_scale,
                legacy=self._settings.legacy_compat,
            )
            self._animation_frames[bone] = tuple(frames)

    # -- accessors ----------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def loop_type(self) -> LoopType:
        return self._loop_type

    @property
    def duration(self) -> int:
        """Length of the animation in ticks."""
        return self._duration

    @property
    def skeleton(self) -> SkeletonResolver:
        return self._skeleton

    @property
    def bone_keyframes(self) -> Mapping[BoneBlueprint, tuple[Keyframe, ...]]:
        return MappingProxyType(self._bone_keyframes)

    @property
    def animation_frames(self) -> Mapping[BoneBlueprint, tuple[AnimationFrame, ...]]:
        return MappingProxyType(self._animation_frames)

    def frames_for(self, bone: BoneBlueprint) -> tuple[AnimationFrame, ...] | None:
        """Baked frames of *bone*, or ``None`` if the bone is not animated."""
        return self._animation_frames.get(bone)

    def frame_at(self, bone: BoneBlueprint, tick: int) -> AnimationFrame | None:
        """The pose of *bone* at *tick*, or ``None`` if the bone is not animated.

        Raises ``IndexError`` when *tick* is outside ``[0, duration)``.
        """
        frames = self._animation_frames.get(bone)
        if frames is None:
            return None
        if not 0 <= tick < len(frames):
            msg = f"tick {tick} outside animation '{self._name}' (duration {self._duration})"
            raise IndexError(msg)
        return frames[tick]

    def __repr__(self) -> str:
        return (
            f"AnimationBlueprint(name={self._name!r}, loop_type={self._loop_type.value!r}, "
            f"duration={self._duration}, bones={len(self._animation_frames)})"
        )


def bake_animation(
    data: object,
    model_name: str,
    skeleton: SkeletonResolver,
    *,
    settings: BakeSettings | None = None,
) -> AnimationBlueprint | None:
    """Bake one animation description without raising.

    Returns ``None`` (after logging the reason) when the description is
    malformed or its loop type is unknown.
    """
    try:
        blueprint = AnimationBlueprint(data, model_name, skeleton, settings=settings)
    except (MalformedInputShape, UnrecognizedLoopType) as exc:
        logger.error("%s", exc)
        return None
    logger.debug("Baked %r for model %s", blueprint, model_name)
    return blueprint


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_description(data: object, model_name: str) -> AnimationDescription:
    try:
        return AnimationDescription.model_validate(data)
    except PydanticValidationError as exc:
        msg = (
            f"Failed to get animation data for model {model_name}! "
            f"Animation format is not as expected: {exc.error_count()} validation error(s)"
        )
        raise MalformedInputShape(msg) from None


def _parse_loop_type(value: str, model_name: str, animation_name: str) -> LoopType:
    try:
        return LoopType(value)
    except ValueError:
        msg = f"Unrecognized loop type '{value}' in model {model_name}, animation {animation_name}"
        raise UnrecognizedLoopType(msg) from None
