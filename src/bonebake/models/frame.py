"""Baked per-tick pose of a single bone."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnimationFrame:
    """One tick's resolved transform for one bone.

    Rotations are in degrees, positions in world units (authored units / 16).
    """

    x_rotation: float = 0.0
    y_rotation: float = 0.0
    z_rotation: float = 0.0
    x_position: float = 0.0
    y_position: float = 0.0
    z_position: float = 0.0
    scale: float = 1.0
