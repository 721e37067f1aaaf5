"""Configuration loading for the tree explorer CLI.

A configuration file seeds the tree and lists the values to search for.  YAML
(``.yaml``/``.yml``) and JSON (``.json``) documents are accepted::

    values: [50, 30, 70, 20, 40, 60, 80]
    search_targets: [40, 65]
    log_level: INFO

Command line flags take precedence over the file; see ``tree_explorer.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_KNOWN_KEYS = frozenset({"values", "search_targets", "log_level"})


class ConfigError(ValueError):
    """Raised when a configuration document is malformed."""


@dataclass(frozen=True)
class ExplorerConfig:
    """Settings consumed by the tree explorer."""

    values: Tuple[int, ...] = ()
    search_targets: Tuple[int, ...] = ()
    log_level: str = "WARNING"

    def merged(
        self,
        *,
        values: Optional[Iterable[int]] = None,
        search_targets: Optional[Iterable[int]] = None,
        log_level: Optional[str] = None,
    ) -> "ExplorerConfig":
        """Return a copy where every provided override replaces the stored value."""

        return replace(
            self,
            values=tuple(values) if values is not None else self.values,
            search_targets=(
                tuple(search_targets) if search_targets is not None else self.search_targets
            ),
            log_level=log_level if log_level is not None else self.log_level,
        )


def _parse_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Invalid configuration file {path}: {exc}") from exc
    raise ConfigError(f"Unsupported configuration format: {path.suffix or '<none>'}")


def _int_tuple(payload: Mapping[str, Any], key: str) -> Tuple[int, ...]:
    items = payload.get(key, [])
    if items is None:
        return ()
    if not isinstance(items, list):
        raise ConfigError(f"'{key}' must be a list of integers")
    for item in items:
        if not isinstance(item, int) or isinstance(item, bool):
            raise ConfigError(f"'{key}' must contain integers, got {item!r}")
    return tuple(items)


def load_config(path: Path | str) -> ExplorerConfig:
    """Load an :class:`ExplorerConfig` from a YAML or JSON file."""

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    payload = _parse_document(config_path)
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError("Configuration root must be a mapping")

    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    log_level = payload.get("log_level", "WARNING")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        raise ConfigError(f"'log_level' must be one of {', '.join(LOG_LEVELS)}")

    config = ExplorerConfig(
        values=_int_tuple(payload, "values"),
        search_targets=_int_tuple(payload, "search_targets"),
        log_level=log_level.upper(),
    )
    logger.debug("Loaded configuration from %s: %s", config_path, config)
    return config


__all__ = ["ConfigError", "ExplorerConfig", "LOG_LEVELS", "load_config"]
