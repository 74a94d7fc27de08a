"""Boundary models for a raw animation description.

Only the global metadata is validated up front; animators and their keyframes
are validated one at a time so a single bad entry never rejects the rest.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bonebake.models.keyframe import MAX_SECONDS


class AnimatorDescription(BaseModel):
    """The keyframes authored for one bone."""

    model_config = ConfigDict(extra="ignore")

    name: str
    keyframes: list[Any] = Field(default_factory=list)

    @field_validator("keyframes", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class AnimationDescription(BaseModel):
    """Global metadata of one animation plus its raw per-bone animators."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    name: str
    loop: str
    length: float = Field(ge=0, le=MAX_SECONDS)  # seconds
    animators: dict[str, Any] | None = None
