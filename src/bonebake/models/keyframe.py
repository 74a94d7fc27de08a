"""Keyframe models: the raw boundary record and the typed, immutable value."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from bonebake.errors import MalformedKeyframe
from bonebake.models.enums import Channel, CurveKind

logger = logging.getLogger(__name__)

TICKS_PER_SECOND = 20
MAX_TICK_RATE = 1000
# Longest animation or keyframe time accepted, in seconds.
MAX_SECONDS = 3600.0


def seconds_to_ticks(seconds: float, tick_rate: int = TICKS_PER_SECOND) -> int:
    """Convert a time in seconds to whole ticks, rounding half up."""
    return math.floor(seconds * tick_rate + 0.5)


class KeyframeRecord(BaseModel):
    """One keyframe as authored, validated but not yet converted to ticks."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    time: float = Field(ge=0, le=MAX_SECONDS)
    channel: Channel
    interpolation: CurveKind = CurveKind.LINEAR
    data_x: float = Field(alias="dataX")
    data_y: float = Field(alias="dataY")
    data_z: float = Field(alias="dataZ")

    @model_validator(mode="before")
    @classmethod
    def _flatten_data_points(cls, data: Any) -> Any:
        # Blockbench stores values as data_points: [{"x": "10", "y": "0", "z": "0"}]
        if not isinstance(data, Mapping) or "dataX" in data:
            return data
        points = data.get("data_points")
        if not isinstance(points, list) or not points or not isinstance(points[0], Mapping):
            return data
        point = points[0]
        return {**data, "dataX": point.get("x"), "dataY": point.get("y"), "dataZ": point.get("z")}

    @field_validator("channel", mode="before")
    @classmethod
    def _parse_channel(cls, value: Any) -> Channel:
        return Channel(value)

    @field_validator("interpolation", mode="before")
    @classmethod
    def _parse_interpolation(cls, value: Any) -> CurveKind:
        if value is None:
            return CurveKind.LINEAR
        try:
            return CurveKind(value)
        except ValueError:
            logger.debug("Unknown interpolation %r, using linear", value)
            return CurveKind.LINEAR


class Keyframe(BaseModel):
    """A single keyframe on one channel of one bone, positioned in ticks."""

    model_config = ConfigDict(frozen=True)

    tick: int = Field(ge=0)
    channel: Channel
    curve: CurveKind = CurveKind.LINEAR
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def values(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_record(
        cls,
        record: object,
        *,
        tick_rate: int = TICKS_PER_SECOND,
        model_name: str = "",
        animation_name: str = "",
    ) -> Keyframe:
        """Validate a raw keyframe record and convert it to a :class:`Keyframe`.

        Raises
        ------
        MalformedKeyframe
            If the record is not a mapping, has a time that is negative,
            non-numeric or longer than MAX_SECONDS, an unknown channel, or
            non-numeric data values.
        """
        try:
            parsed = KeyframeRecord.model_validate(record)
        except PydanticValidationError as exc:
            msg = (
                f"Malformed keyframe in model {model_name}, animation {animation_name}: "
                f"{exc.error_count()} validation error(s): {_summarize(exc)}"
            )
            raise MalformedKeyframe(msg) from None
        return cls(
            tick=seconds_to_ticks(parsed.time, tick_rate),
            channel=parsed.channel,
            curve=parsed.interpolation,
            x=parsed.data_x,
            y=parsed.data_y,
            z=parsed.data_z,
        )


def _summarize(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in exc.errors()
    )
