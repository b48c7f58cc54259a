"""Configuration management for keypath."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from keypath.config.file_ops import write_text_file
from keypath.config.paths import resolve_config_path
from keypath.platform.logging import logger


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or holds bad values."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration in {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Key prefix prepended by the ``build`` command
    prefix: str | None = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, path: Path | str | None = None) -> Path:
        """Save configuration to ``path`` (or the resolved default location).

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = resolve_config_path(path)
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# keypath configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/keypath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Key prefix for the build command (optional)")
        lines.append("# Components follow the same rules as any other key component")
        lines.append('# Example: prefix = "tenants/acme"')
        if config["prefix"] is not None:
            lines.append(f"prefix = {self._format_toml_value(config['prefix'])}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return json.dumps(str(value), ensure_ascii=False)
        return str(value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: Path) -> Config:
        """Build a config from parsed TOML, checking value types.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

        values: dict[str, Any] = {}
        for key in ("log_file", "prefix"):
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigError(source, f"'{key}' must be a string, not {type(value).__name__}")
            values[key] = value if value.strip() else None
        return cls(**values)

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Config:
        """Load configuration from file.

        Args:
            path: Explicit config file. Defaults to ``KEYPATH_CONFIG`` or the
                repository default.
            env: Environment mapping used for the override lookup.

        Returns:
            Config: Loaded configuration, or defaults if the file is missing.

        Raises:
            ConfigError: If the file is unreadable or not valid TOML.
        """
        config_file = resolve_config_path(path, env)

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(config_file, str(e)) from e

        logger.debug("Configuration loaded from %s", config_file)
        return cls.from_mapping(config_dict, config_file)


__all__ = ["Config", "ConfigError"]
