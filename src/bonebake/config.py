"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from bonebake.models.keyframe import MAX_TICK_RATE


def _default_config_dir() -> Path:
    return Path.home() / ".bonebake"


class BakeSettings(BaseSettings):
    """Parameters of the baking pipeline.

    Read from ``BONEBAKE_BAKE_*`` environment variables or the ``[bake]``
    table of ``config.toml``.
    """

    model_config = SettingsConfigDict(env_prefix="BONEBAKE_BAKE_")

    tick_rate: int = Field(default=20, gt=0, le=MAX_TICK_RATE)
    """Ticks per second used to convert keyframe times and lengths."""

    position_scale: float = Field(default=16.0, gt=0)
    """Authored position units per world unit (one block)."""

    hitbox_bone: str = "hitbox"
    """Name of the collision bone, matched case-insensitively and never baked."""

    legacy_compat: bool = False
    """Reproduce the historical output: unclamped position and scale spans,
    no scale hold and a zero default scale."""


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BONEBAKE_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    bake: BakeSettings = Field(default_factory=BakeSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Precedence: init kwargs, environment, config.toml, .env, secrets.
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        toml_path = _default_config_dir() / "config.toml"
        if toml_path.is_file():
            sources += (TomlConfigSettingsSource(settings_cls, toml_file=toml_path),)
        return (*sources, dotenv_settings, file_secret_settings)


def load_config() -> AppConfig:
    """Load application config from the environment and ``~/.bonebake/config.toml``."""
    return AppConfig()
