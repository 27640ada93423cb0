"""Persisted plugin configuration: document model, migration, and snapshot store.

The document is stored as JSON with human-readable keys::

    {
      "Version": "1.1.0",
      "Rename Based On Grid": true,
      "Rename Based On Biome": true,
      "Rename Based On Landmark": true,
      "Rename Based On Player": false,
      "Bag Name Format": "{grid} - {biome} - {landmark}"
    }

Versions are compared as plain strings (ordinal order), so "1.10.0" sorts
before "1.2.0". Existing config files rely on that ordering.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import __version__

logger = logging.getLogger("bag_renamer.configuration")

VERSION_KEY = "Version"
LANDMARK_PLAYER_VERSION = "1.1.0"
BASELINE_VERSION = "1.0.0"


class ConfigurationError(RuntimeError):
    """Raised when the stored configuration document cannot be read."""


class RenamerConfig(BaseModel):
    """Immutable configuration snapshot read by the rename pipeline."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    version: str = Field(default=__version__, alias=VERSION_KEY)
    rename_by_grid: bool = Field(default=True, alias="Rename Based On Grid")
    rename_by_biome: bool = Field(default=True, alias="Rename Based On Biome")
    rename_by_landmark: bool = Field(default=True, alias="Rename Based On Landmark")
    rename_by_player: bool = Field(default=False, alias="Rename Based On Player")
    bag_name_format: str = Field(default="{grid} - {biome} - {landmark}", alias="Bag Name Format")

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def default_config(version: str = __version__) -> RenamerConfig:
    return RenamerConfig(version=version)


def version_is_older(stored: str | None, target: str) -> bool:
    """Ordinal comparison; a missing version is older than everything."""
    return (stored or "") < target


def migrate_document(document: dict[str, Any], current_version: str = __version__) -> dict[str, Any]:
    """Return an upgraded copy of ``document``.

    Fields introduced after the stored version are copied from the defaults;
    fields the stored version already had are left alone.
    """
    stored_version = document.get(VERSION_KEY)
    if not version_is_older(stored_version, current_version):
        return dict(document)

    defaults = default_config(current_version).to_document()

    if version_is_older(stored_version, BASELINE_VERSION):
        upgraded = dict(defaults)
    else:
        upgraded = dict(document)
        if version_is_older(stored_version, LANDMARK_PLAYER_VERSION):
            for key in ("Rename Based On Landmark", "Rename Based On Player"):
                upgraded.setdefault(key, defaults[key])

    upgraded[VERSION_KEY] = current_version
    logger.warning(
        "config_migrated",
        extra={"from_version": stored_version, "to_version": current_version},
    )
    return upgraded


def read_document(path: str | Path) -> dict[str, Any]:
    """Parse the stored document, rejecting anything that is not a versioned JSON object."""
    config_path = Path(path)
    try:
        document = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Unable to read configuration {config_path}: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigurationError(f"Configuration {config_path} must be a JSON object")
    if not isinstance(document.get(VERSION_KEY), (str, type(None))):
        raise ConfigurationError(f"Configuration {config_path} has a non-string Version")
    return document


def load_config(path: str | Path, current_version: str = __version__) -> RenamerConfig:
    """Read, migrate and re-save the document at ``path``; writes defaults when absent."""
    config_path = Path(path)
    if not config_path.exists():
        logger.info("config_default_created", extra={"path": str(config_path)})
        config = default_config(current_version)
        save_config(config, config_path)
        return config

    document = migrate_document(read_document(config_path), current_version)
    try:
        config = RenamerConfig.model_validate(document)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration {config_path}: {exc}") from exc

    save_config(config, config_path)
    return config


def save_config(config: RenamerConfig, path: str | Path) -> None:
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.to_document(), indent=2) + "\n", encoding="utf-8")


class ConfigStore:
    """Holds the current snapshot; reloads swap the whole object."""

    def __init__(self, config: RenamerConfig | None = None, *, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._config = config

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def current(self) -> RenamerConfig | None:
        return self._config

    def reload(self) -> RenamerConfig:
        if self._path is None:
            raise ConfigurationError("ConfigStore has no backing file to reload from")
        config = load_config(self._path)
        self._config = config
        logger.info("config_reloaded", extra={"path": str(self._path), "version": config.version})
        return config

    def replace(self, config: RenamerConfig) -> None:
        self._config = config

    def clear(self) -> None:
        self._config = None
