"""Pydantic configuration for oohtml."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError


class OohtmlConfig(BaseModel):
    """Environment-dependent settings threaded into builders and loaders."""

    base_url: str = Field(
        "",
        alias="baseUrl",
        description="Prefix applied to form actions set through Element.set_action.",
    )
    blocks_dir: Path = Field(
        Path("blocks"),
        alias="blocksDir",
        description="Directory containing block templates.",
    )
    block_suffix: str = Field(
        ".html",
        alias="blockSuffix",
        description="File suffix appended to block names.",
    )
    charset: str = Field("utf-8", description="Charset announced by meta_charset().")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_config(path: Path) -> OohtmlConfig:
    """Read and validate a YAML configuration file.

    Relative ``blocks_dir`` values are resolved against the file's directory.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of settings.")
    try:
        config = OohtmlConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc
    if not config.blocks_dir.is_absolute():
        config = config.model_copy(update={"blocks_dir": path.parent / config.blocks_dir})
    return config


__all__ = ["OohtmlConfig", "load_config"]
