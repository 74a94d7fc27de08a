"""bonebake baking pipeline - curves, track building and frame baking."""

from bonebake.pipeline.baker import bake_frames, split_channels
from bonebake.pipeline.curves import cubic_bezier, evaluate, lerp, progress
from bonebake.pipeline.tracks import build_track

__all__ = [
    "bake_frames",
    "build_track",
    "cubic_bezier",
    "evaluate",
    "lerp",
    "progress",
    "split_channels",
]
