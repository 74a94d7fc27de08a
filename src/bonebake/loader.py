"""Load Blockbench ``.bbmodel`` files and bake all of their animations."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from bonebake.blueprint import AnimationBlueprint, bake_animation
from bonebake.config import BakeSettings
from bonebake.models.skeleton import SkeletonBlueprint

logger = logging.getLogger(__name__)


class ModelLoadError(ValueError):
    """Raised when a model file cannot be loaded."""


@dataclass
class ModelAsset:
    """A model's skeleton together with its baked animations, keyed by name."""

    name: str
    skeleton: SkeletonBlueprint
    animations: dict[str, AnimationBlueprint] = field(default_factory=dict)


def load_model(path: Path, *, settings: BakeSettings | None = None) -> ModelAsset:
    """Load a ``.bbmodel`` file and bake every animation it contains.

    Parameters
    ----------
    path:
        Path to a Blockbench model file (JSON).
    settings:
        Baking parameters; defaults to :class:`BakeSettings`.

    Returns
    -------
    ModelAsset
        The skeleton built from the file's outliner and every animation that
        baked successfully. Animations that fail to bake are logged and left out.

    Raises
    ------
    ModelLoadError
        If the file cannot be read or is not a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        msg = f"model file not found: {path}"
        raise ModelLoadError(msg) from None
    except PermissionError:
        msg = f"permission denied reading model file: {path}"
        raise ModelLoadError(msg) from None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"model file contains invalid JSON: {exc}"
        raise ModelLoadError(msg) from None
    if not isinstance(data, dict):
        msg = f"model file has invalid structure: expected an object, got {type(data).__name__}"
        raise ModelLoadError(msg)

    name = data.get("name")
    if not isinstance(name, str) or not name:
        name = path.stem
    outliner = data.get("outliner")
    skeleton = SkeletonBlueprint.from_outliner(outliner if isinstance(outliner, list) else [])

    asset = ModelAsset(name=name, skeleton=skeleton)
    animations = data.get("animations")
    for animation_data in animations if isinstance(animations, list) else []:
        blueprint = bake_animation(animation_data, name, skeleton, settings=settings)
        if blueprint is None:
            continue
        if blueprint.name in asset.animations:
            logger.warning("Duplicate animation '%s' in model %s, keeping the last one",
                           blueprint.name, name)
        asset.animations[blueprint.name] = blueprint

    logger.info(
        "Loaded model '%s' (%d bones, %d animations)",
        name,
        len(skeleton),
        len(asset.animations),
    )
    return asset
