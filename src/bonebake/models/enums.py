"""Enumerations used throughout bonebake.

Members are matched case-insensitively, either by their wire value (as written
by Blockbench) or by their member name.
"""

from __future__ import annotations

from enum import StrEnum


class _CaseInsensitiveEnum(StrEnum):
    @classmethod
    def _missing_(cls, value: object) -> _CaseInsensitiveEnum | None:
        if not isinstance(value, str):
            return None
        key = value.strip()
        for member in cls:
            if member.value == key.lower() or member.name == key.upper():
                return member
        return None


class LoopType(_CaseInsensitiveEnum):
    ONCE = "once"
    LOOP = "loop"
    HOLD = "hold"


class Channel(_CaseInsensitiveEnum):
    ROTATION = "rotation"
    POSITION = "position"
    SCALE = "scale"


class CurveKind(_CaseInsensitiveEnum):
    LINEAR = "linear"
    SMOOTHED = "catmullrom"
    EASED = "bezier"
    STEP = "step"
