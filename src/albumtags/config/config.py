"""Configuration management for albumtags."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from albumtags.config.paths import default_config_path
from albumtags.platform.logging import logger

MANIFEST_NAME_DEFAULT = "tags"
ARTWORK_BASENAME_DEFAULT = "Folder"


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field flagged for ``str`` to ``Path`` conversion."""
    return field(default=default, metadata={"path": True})


@dataclass(frozen=True, slots=True)
class FlowSettings:
    """Fixed locations handed explicitly to every flow."""

    target_dir: Path
    manifest_name: str = MANIFEST_NAME_DEFAULT
    artwork_basename: str = ARTWORK_BASENAME_DEFAULT

    @property
    def manifest_path(self) -> Path:
        """Location of the manifest inside the target directory."""
        return self.target_dir / self.manifest_name


@dataclass
class Config:
    """Application configuration."""

    # Folder holding the album's audio files
    target_dir: Path | None = _path_field(Path("."))

    # Manifest file name inside target_dir
    manifest_name: str = MANIFEST_NAME_DEFAULT

    # Base name of the exported cover side-file
    artwork_basename: str = ARTWORK_BASENAME_DEFAULT

    # Optional rotating log file
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def to_settings(
        self,
        *,
        target_dir: Path | None = None,
        manifest_name: str | None = None,
    ) -> FlowSettings:
        """Freeze the configuration into flow settings, applying overrides."""
        return FlowSettings(
            target_dir=target_dir or self.target_dir or Path("."),
            manifest_name=manifest_name or self.manifest_name,
            artwork_basename=self.artwork_basename,
        )

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from a TOML file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when the file is absent.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_file = config_file or default_config_path()
        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        config_dict: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            config_dict[key] = value

        logger.info("Configuration loaded from %s", config_file)
        return cls(**config_dict)


__all__ = ["Config", "FlowSettings", "MANIFEST_NAME_DEFAULT", "ARTWORK_BASENAME_DEFAULT"]
