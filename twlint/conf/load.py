"""
Loading of twlint.yaml.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .typed import ConfigCoerceError, build_typed
from ..errors import ConfigError
from ..types import TwlintConfig

DEFAULT_CFG_FILE = "twlint.yaml"

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> Dict[str, Any]:
    """Read a YAML file that must hold a mapping (empty file -> {})."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def find_config(start: Path) -> Optional[Path]:
    """Look for twlint.yaml in start and its parents."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / DEFAULT_CFG_FILE
        if candidate.is_file():
            return candidate
    return None


def config_from_dict(raw: Dict[str, Any], *, source: str = "<dict>") -> TwlintConfig:
    try:
        cfg = build_typed(TwlintConfig, raw)
    except ConfigCoerceError as e:
        raise ConfigError(f"{source}: {e}") from e

    if cfg.multiline.enabled and cfg.whitespace.enabled and not cfg.whitespace.allow_multiline:
        # the whitespace fix joins what the multiline fix splits
        logger.warning("%s: whitespace.allow_multiline is false while multiline is enabled", source)
    return cfg


def load_config(path: Optional[Path] = None, *, root: Optional[Path] = None) -> TwlintConfig:
    """
    Load configuration.

    • An explicit path must exist.
    • Otherwise twlint.yaml is searched from root (cwd by default) upwards.
    • No file at all means defaults.
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        cfg_path: Optional[Path] = path
    else:
        cfg_path = find_config(root or Path.cwd())

    if cfg_path is None:
        logger.debug("no %s found, using defaults", DEFAULT_CFG_FILE)
        return TwlintConfig()

    logger.debug("loading config from %s", cfg_path)
    return config_from_dict(_read_yaml_map(cfg_path), source=str(cfg_path))


__all__ = ["load_config", "config_from_dict", "find_config", "DEFAULT_CFG_FILE"]
