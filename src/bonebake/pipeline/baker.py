"""Bake a bone's sparse keyframe track into a dense per-tick frame array.

Each channel (rotation, position, scale) is baked independently from its own
keyframes. Between two keyframes the value follows the curve of the later
keyframe; before the first and after the last keyframe the nearest value is
held.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bonebake.models.enums import Channel
from bonebake.models.frame import AnimationFrame
from bonebake.models.keyframe import Keyframe
from bonebake.pipeline.curves import evaluate

Vector3 = tuple[float, float, float]
# One value per tick for a single channel.
Column = list[Vector3]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def split_channels(keyframes: Iterable[Keyframe]) -> dict[Channel, list[Keyframe]]:
    """Partition *keyframes* by channel, keeping their relative order."""
    tracks: dict[Channel, list[Keyframe]] = {channel: [] for channel in Channel}
    for keyframe in keyframes:
        tracks[keyframe.channel].append(keyframe)
    return tracks


def bake_frames(
    keyframes: Sequence[Keyframe],
    duration: int,
    *,
    position_scale: float = 16.0,
    legacy: bool = False,
) -> list[AnimationFrame]:
    """Bake tick-sorted *keyframes* into exactly *duration* frames.

    Channels without keyframes keep their defaults. Position values are
    divided by *position_scale* to convert authored units to world units.

    With *legacy* set, the historical output is reproduced: position and
    scale spans are not clamped to *duration* (so a keyframe past the end
    raises ``IndexError``), scale is never held, holds stop one tick short
    and the default scale is zero.
    """
    default_scale = 0.0 if legacy else 1.0
    columns: dict[Channel, Column] = {
        Channel.ROTATION: [(0.0, 0.0, 0.0)] * duration,
        Channel.POSITION: [(0.0, 0.0, 0.0)] * duration,
        Channel.SCALE: [(default_scale, 0.0, 0.0)] * duration,
    }

    for channel, track in split_channels(keyframes).items():
        if not track:
            continue
        unit = position_scale if channel is Channel.POSITION else 1.0
        if legacy:
            _bake_channel_legacy(columns[channel], track, channel, unit)
        else:
            _bake_channel(columns[channel], track, unit)

    return [
        # Uniform scale: only the x component is authored.
        AnimationFrame(*rotation, *position, scale[0])
        for rotation, position, scale in zip(
            columns[Channel.ROTATION], columns[Channel.POSITION], columns[Channel.SCALE]
        )
    ]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _scaled(keyframe: Keyframe, unit: float) -> Vector3:
    return (keyframe.x / unit, keyframe.y / unit, keyframe.z / unit)


def _fill_interval(
    column: Column,
    prev: Keyframe,
    curr: Keyframe,
    span: int,
    unit: float,
) -> None:
    """Write ticks ``[prev.tick, prev.tick + span)`` blending towards *curr*."""
    for j in range(span):
        t = j / span
        column[prev.tick + j] = (
            evaluate(curr.curve, prev.x, curr.x, t) / unit,
            evaluate(curr.curve, prev.y, curr.y, t) / unit,
            evaluate(curr.curve, prev.z, curr.z, t) / unit,
        )


def _hold(column: Column, ticks: range, keyframe: Keyframe, unit: float) -> None:
    value = _scaled(keyframe, unit)
    for tick in ticks:
        column[tick] = value


def _bake_channel(column: Column, track: list[Keyframe], unit: float) -> None:
    duration = len(column)
    prev = track[0]
    for curr in track[1:]:
        if prev.tick >= duration:
            # Remaining keyframes are past the end of the animation.
            break
        span = min(curr.tick, duration) - prev.tick
        _fill_interval(column, prev, curr, span, unit)
        prev = curr

    first, last = track[0], track[-1]
    if last.tick < duration:
        _hold(column, range(last.tick, duration), last, unit)
    if first.tick > 0:
        _hold(column, range(min(first.tick, duration - 1) + 1), first, unit)


def _bake_channel_legacy(
    column: Column,
    track: list[Keyframe],
    channel: Channel,
    unit: float,
) -> None:
    duration = len(column)
    prev = track[0]
    for curr in track[1:]:
        if channel is Channel.ROTATION:
            if prev.tick >= duration:
                return
            span = min(curr.tick, duration) - prev.tick
        else:
            span = curr.tick - prev.tick
        _fill_interval(column, prev, curr, span, unit)
        prev = curr

    if channel is Channel.SCALE:
        return
    first = track[0]
    # Ties at the final tick resolve to the first keyframe authored there.
    last = next(k for k in track if k.tick == track[-1].tick)
    if last.tick < duration - 1:
        _hold(column, range(last.tick, duration), last, unit)
    if first.tick > 0:
        _hold(column, range(min(first.tick, duration - 1)), first, unit)
