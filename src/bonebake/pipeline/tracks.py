"""Resolve a bone and build its tick-sorted keyframe track."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from bonebake.config import BakeSettings
from bonebake.errors import MalformedAnimator, MalformedKeyframe, UnknownBone
from bonebake.models.description import AnimatorDescription
from bonebake.models.keyframe import Keyframe

if TYPE_CHECKING:
    from bonebake.models.skeleton import BoneBlueprint, SkeletonResolver

logger = logging.getLogger(__name__)


def build_track(
    animator: object,
    skeleton: SkeletonResolver,
    *,
    model_name: str,
    animation_name: str,
    settings: BakeSettings | None = None,
) -> tuple[BoneBlueprint, list[Keyframe]] | None:
    """Build the keyframe track of the bone described by *animator*.

    Malformed keyframes are logged and dropped; the rest of the track is kept.
    The result is sorted by tick but not yet split by channel.

    Returns
    -------
    tuple[BoneBlueprint, list[Keyframe]] | None
        The resolved bone and its sorted keyframes, or ``None`` for the
        hitbox bone, which is never animated.

    Raises
    ------
    MalformedAnimator
        If *animator* is not a mapping with a bone ``name``.
    UnknownBone
        If *skeleton* has no bone with that name.
    """
    settings = settings or BakeSettings()
    try:
        description = AnimatorDescription.model_validate(animator)
    except PydanticValidationError as exc:
        msg = (
            f"Malformed animator in model {model_name}, animation {animation_name}: "
            f"{exc.error_count()} validation error(s)"
        )
        raise MalformedAnimator(msg) from None

    bone_name = description.name
    if bone_name.casefold() == settings.hitbox_bone.casefold():
        logger.debug("Skipping hitbox bone '%s' in %s/%s", bone_name, model_name, animation_name)
        return None

    bone = skeleton.lookup_bone(bone_name)
    if bone is None:
        raise UnknownBone(bone_name, model_name)

    keyframes: list[Keyframe] = []
    for record in description.keyframes:
        try:
            keyframe = Keyframe.from_record(
                record,
                tick_rate=settings.tick_rate,
                model_name=model_name,
                animation_name=animation_name,
            )
        except MalformedKeyframe as exc:
            logger.warning("Skipping keyframe of bone '%s': %s", bone_name, exc)
            continue
        keyframes.append(keyframe)

    keyframes.sort(key=lambda k: k.tick)
    return bone, keyframes
