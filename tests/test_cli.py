"""Tests for the CLI entry point."""

import json

from typer.testing import CliRunner

from bonebake import __version__
from bonebake.cli import app

runner = CliRunner()


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"bonebake {__version__}"


def test_inspect(bbmodel_path):
    result = runner.invoke(app, ["inspect", str(bbmodel_path)])
    assert result.exit_code == 0
    assert "Model 'study_girl': 3 bones" in result.output
    assert "idle: loop, 20 ticks, 2 bones" in result.output
    assert "wave: once, 10 ticks, 1 bones" in result.output


def test_inspect_missing_file(tmp_path):
    result = runner.invoke(app, ["inspect", str(tmp_path / "missing.bbmodel")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_frames_table(bbmodel_path):
    result = runner.invoke(app, ["frames", str(bbmodel_path), "idle", "head"])
    assert result.exit_code == 0
    table = json.loads(result.output)
    assert len(table) == 20
    assert table[5]["x_rotation"] == 45.0
    assert table[19]["x_rotation"] == 90.0


def test_frames_single_tick(bbmodel_path):
    result = runner.invoke(app, ["frames", str(bbmodel_path), "idle", "body", "--tick", "3"])
    assert result.exit_code == 0
    frame = json.loads(result.output)
    assert frame["x_position"] == 2.0
    assert frame["scale"] == 1.0


def test_frames_legacy(bbmodel_path):
    result = runner.invoke(
        app, ["frames", str(bbmodel_path), "idle", "body", "--tick", "3", "--legacy"]
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["scale"] == 0.0


def test_frames_unknown_animation(bbmodel_path):
    result = runner.invoke(app, ["frames", str(bbmodel_path), "dance", "head"])
    assert result.exit_code == 1
    assert "no animation 'dance'" in result.output


def test_frames_unanimated_bone(bbmodel_path):
    result = runner.invoke(app, ["frames", str(bbmodel_path), "wave", "body"])
    assert result.exit_code == 1
    assert "bone 'body' is not animated" in result.output


def test_frames_tick_out_of_range(bbmodel_path):
    result = runner.invoke(app, ["frames", str(bbmodel_path), "idle", "head", "--tick", "20"])
    assert result.exit_code == 1
    assert "outside animation" in result.output
