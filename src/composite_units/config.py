"""Runtime settings for the composite_units command line and logging.

This module exposes :func:`get_settings` returning the resolved
:class:`Settings`. Values come from ``COMPOSITE_UNITS_*`` environment
variables, which override an optional TOML/YAML document referenced by
``COMPOSITE_UNITS_CONFIG_FILE`` (or passed explicitly).
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .parsers.units import QuantityKind

__all__ = ["Settings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_path: Optional[Path] = None
    log_level: int = logging.INFO
    default_kind: QuantityKind = QuantityKind.LENGTH

    def as_dict(self) -> Dict[str, Optional[str]]:
        """Expose the settings as plain strings (useful for logging)."""

        return {
            "log_path": str(self.log_path) if self.log_path is not None else None,
            "log_level": logging.getLevelName(self.log_level).lower(),
            "default_kind": self.default_kind.value,
        }


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Any) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _parse_level(value: Any) -> int:
    if isinstance(value, int):
        return value
    level = _LEVELS.get(str(value).strip().lower())
    if level is None:
        raise ValueError(f"Unknown log level {value!r}; expected one of: {', '.join(_LEVELS)}")
    return level


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = config_file.expanduser().resolve()
        config_data = _load_config_file(config_file)
        config_dir = config_file.parent

    logging_section = _coalesce_mapping(config_data.get("logging"))
    parser_section = _coalesce_mapping(config_data.get("parser"))

    env = os.environ

    raw_path = env.get("COMPOSITE_UNITS_LOG_PATH") or logging_section.get("path")
    log_path: Optional[Path] = None
    if raw_path:
        log_path = Path(raw_path).expanduser()
        if not log_path.is_absolute() and config_dir is not None:
            log_path = config_dir / log_path

    raw_level = env.get("COMPOSITE_UNITS_LOG_LEVEL") or logging_section.get("level") or "info"
    raw_kind = env.get("COMPOSITE_UNITS_DEFAULT_KIND") or parser_section.get("default_kind") or "length"

    return Settings(
        log_path=log_path,
        log_level=_parse_level(raw_level),
        default_kind=QuantityKind.coerce(raw_kind),
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached settings are discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file))

    env_path = os.getenv("COMPOSITE_UNITS_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached settings (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
