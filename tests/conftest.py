"""Shared fixtures for bonebake tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from bonebake.models import SkeletonBlueprint


@pytest.fixture
def skeleton() -> SkeletonBlueprint:
    return SkeletonBlueprint.from_names(["body", "arm", "head", "hitbox"])


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    def _make(
        time: float,
        channel: str,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        interpolation: str = "linear",
    ) -> dict[str, Any]:
        return {
            "time": time,
            "channel": channel,
            "interpolation": interpolation,
            "dataX": x,
            "dataY": y,
            "dataZ": z,
        }

    return _make


@pytest.fixture
def wave_description(make_record: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    return {
        "name": "wave",
        "loop": "loop",
        "length": 1.0,
        "animators": {
            "uuid-arm": {
                "name": "arm",
                "keyframes": [
                    make_record(0.5, "rotation", x=90),
                    make_record(0.0, "rotation", x=0),
                ],
            },
            "uuid-body": {
                "name": "body",
                "keyframes": [make_record(0.25, "position", x=32, y=16)],
            },
            "uuid-hitbox": {
                "name": "HitBox",
                "keyframes": [make_record(0.0, "rotation", x=45)],
            },
        },
    }


def _point(x: str, y: str = "0", z: str = "0") -> list[dict[str, str]]:
    return [{"x": x, "y": y, "z": z}]


BBMODEL: dict[str, Any] = {
    "meta": {"format_version": "4.5", "model_format": "free"},
    "name": "study_girl",
    "outliner": [
        {
            "name": "body",
            "uuid": "u-body",
            "children": [
                "cube-0001",
                {"name": "head", "uuid": "u-head", "children": ["cube-0002"]},
            ],
        },
        {"name": "hitbox", "uuid": "u-hitbox", "children": []},
    ],
    "animations": [
        {
            "uuid": "a-idle",
            "name": "idle",
            "loop": "loop",
            "length": 1.0,
            "animators": {
                "u-head": {
                    "name": "head",
                    "type": "bone",
                    "keyframes": [
                        {"channel": "rotation", "data_points": _point("0"), "time": 0,
                         "interpolation": "linear"},
                        {"channel": "rotation", "data_points": _point("90"), "time": 0.5,
                         "interpolation": "linear"},
                    ],
                },
                "u-body": {
                    "name": "body",
                    "type": "bone",
                    "keyframes": [
                        {"channel": "position", "data_points": _point("32", "16"),
                         "time": 0.25, "interpolation": "catmullrom"},
                    ],
                },
            },
        },
        {
            "uuid": "a-wave",
            "name": "wave",
            "loop": "once",
            "length": 0.5,
            "animators": {
                "u-head": {
                    "name": "head",
                    "type": "bone",
                    "keyframes": [
                        {"channel": "scale", "data_points": _point("2", "2", "2"), "time": 0,
                         "interpolation": "step"},
                    ],
                },
            },
        },
    ],
}


@pytest.fixture
def bbmodel_data() -> dict[str, Any]:
    return json.loads(json.dumps(BBMODEL))


@pytest.fixture
def bbmodel_path(tmp_path: Path, bbmodel_data: dict[str, Any]) -> Path:
    path = tmp_path / "study_girl.bbmodel"
    path.write_text(json.dumps(bbmodel_data))
    return path
