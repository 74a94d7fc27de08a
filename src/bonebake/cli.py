"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from bonebake.loader import ModelAsset

app = typer.Typer(
    name="bonebake",
    help="Bake keyframed skeletal animations into per-tick frame tables.",
    no_args_is_help=True,
)

LegacyOption = Annotated[
    bool,
    typer.Option("--legacy", help="Reproduce the historical baking output"),
]


def _load(path: Path, legacy: bool) -> ModelAsset:
    from bonebake.config import load_config
    from bonebake.loader import ModelLoadError, load_model

    settings = load_config().bake
    if legacy:
        settings = settings.model_copy(update={"legacy_compat": True})
    try:
        return load_model(path, settings=settings)
    except ModelLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


@app.command()
def inspect(
    path: Annotated[Path, typer.Argument(help="Path to a .bbmodel file")],
    legacy: LegacyOption = False,
) -> None:
    """List the baked animations of a model."""
    asset = _load(path, legacy)
    typer.echo(f"Model '{asset.name}': {len(asset.skeleton)} bones")
    if not asset.animations:
        typer.echo("No animations baked.")
        return
    for blueprint in asset.animations.values():
        typer.echo(
            f"  {blueprint.name}: {blueprint.loop_type.value}, "
            f"{blueprint.duration} ticks, {len(blueprint.animation_frames)} bones"
        )


@app.command()
def frames(
    path: Annotated[Path, typer.Argument(help="Path to a .bbmodel file")],
    animation: Annotated[str, typer.Argument(help="Animation name")],
    bone: Annotated[str, typer.Argument(help="Bone name")],
    tick: Annotated[
        int | None,
        typer.Option("--tick", "-t", help="Only print the frame at this tick"),
    ] = None,
    legacy: LegacyOption = False,
) -> None:
    """Print the baked frames of one bone as JSON."""
    import json
    from dataclasses import asdict

    asset = _load(path, legacy)
    blueprint = asset.animations.get(animation)
    if blueprint is None:
        typer.echo(f"Error: no animation '{animation}' in model '{asset.name}'", err=True)
        raise typer.Exit(1)
    bone_blueprint = asset.skeleton.lookup_bone(bone)
    baked = blueprint.frames_for(bone_blueprint) if bone_blueprint else None
    if bone_blueprint is None or baked is None:
        typer.echo(f"Error: bone '{bone}' is not animated by '{animation}'", err=True)
        raise typer.Exit(1)

    if tick is None:
        typer.echo(json.dumps([asdict(frame) for frame in baked], indent=2))
        return
    try:
        frame = blueprint.frame_at(bone_blueprint, tick)
    except IndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(json.dumps(asdict(frame), indent=2))


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log baking diagnostics")
    ] = False,
) -> None:
    """bonebake - skeletal animation baker."""
    if version:
        from bonebake import __version__

        typer.echo(f"bonebake {__version__}")
        raise typer.Exit()
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
