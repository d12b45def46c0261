"""Configuration loading for vimtheme."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .mappings import MappingError, MappingTables, build_tables


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed."""


_DEFAULT_CONFIG_ENV = "VIMTHEME_CONFIG"
DEFAULT_VIM_COMMAND = "vim"


@dataclass(frozen=True)
class AppConfig:
    """In-memory representation of vimtheme configuration."""

    path: Path
    vim_command: str = DEFAULT_VIM_COMMAND
    output_dir: Optional[Path] = None
    colorscheme_dirs: tuple[Path, ...] = ()
    group_faces: Mapping[str, Any] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)
    replace_mappings: bool = False

    @property
    def exists(self) -> bool:
        """Return ``True`` if the configuration file exists on disk."""

        return self.path.exists()

    def tables(self) -> MappingTables:
        """Return the lookup tables with configured entries applied."""

        try:
            return build_tables(
                self.group_faces,
                self.attributes,
                replace=self.replace_mappings,
            )
        except MappingError as exc:
            raise ConfigError(f"{exc} (file: {self.path}).") from exc


def default_config_path() -> Path:
    """Return the default config path, honoring ``VIMTHEME_CONFIG``."""

    env_value = os.environ.get(_DEFAULT_CONFIG_ENV)
    if env_value:
        return Path(env_value).expanduser()
    return Path.home() / ".config" / "vimtheme" / "config.yaml"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from ``path`` or the default location."""

    config_path = (path or default_config_path()).expanduser()

    if not config_path.exists():
        return AppConfig(path=config_path)

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw: Any = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        message = f"Failed to parse YAML config {config_path}: {exc}"
        raise ConfigError(message) from exc
    except OSError as exc:
        message = f"Failed to read config {config_path}: {exc}"
        raise ConfigError(message) from exc

    if not isinstance(raw, dict):
        expected = type(raw).__name__
        message = (
            f"Expected a mapping at the top level of {config_path}, "
            f"got {expected}."
        )
        raise ConfigError(message)

    vim_command = raw.get("vim_command", DEFAULT_VIM_COMMAND)
    if not isinstance(vim_command, str) or not vim_command.strip():
        message = "Config key 'vim_command' must be a non-empty string"
        raise ConfigError(f"{message} (file: {config_path}).")

    replace_mappings = raw.get("replace_mappings", False)
    if not isinstance(replace_mappings, bool):
        message = "Config key 'replace_mappings' must be a boolean"
        raise ConfigError(f"{message} (file: {config_path}).")

    config = AppConfig(
        path=config_path,
        vim_command=vim_command.strip(),
        output_dir=_coerce_path(raw.get("output_dir")),
        colorscheme_dirs=_coerce_path_list(raw.get("colorscheme_dirs")),
        group_faces=_coerce_mapping(raw, "group_faces", config_path),
        attributes=_coerce_mapping(raw, "attributes", config_path),
        replace_mappings=replace_mappings,
    )
    config.tables()
    return config


def _coerce_path(value: Any) -> Optional[Path]:
    if value is None:
        return None
    if isinstance(value, str):
        return Path(value).expanduser()
    typename = type(value).__name__
    raise ConfigError(
        f"Expected a string path in configuration, got {typename}."
    )


def _coerce_path_list(value: Any) -> tuple[Path, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        typename = type(value).__name__
        raise ConfigError(
            f"Expected a list of paths in configuration, got {typename}."
        )
    paths = (_coerce_path(item) for item in value)
    return tuple(path for path in paths if path is not None)


def _coerce_mapping(
    raw: Mapping[str, Any],
    key: str,
    config_path: Path,
) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        message = f"Config key '{key}' must be a mapping"
        raise ConfigError(f"{message} (file: {config_path}).")
    return value
