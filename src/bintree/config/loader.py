"""Configuration loading: TOML files, merging and environment overrides.

Sources, lowest precedence first:
1. DEFAULT_CONFIG
2. bintree.toml, or the [tool.bintree] table of pyproject.toml
3. BINTREE_<KEY> environment variables
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError

from bintree.config.defaults import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    ENV_PREFIX,
    PYPROJECT_FILENAME,
)
from bintree.traversal import RECURSIVE, TRAVERSAL_STRATEGIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeConfig:
    """Settings that affect how a Tree validates keys and walks nodes.

    Attributes:
        traversal: Fold strategy used by the analyses.
        strict_keys: Enforce the unsigned 32-bit key range.
    """

    traversal: str = RECURSIVE
    strict_keys: bool = True

    def __post_init__(self) -> None:
        if self.traversal not in TRAVERSAL_STRATEGIES:
            raise ValueError(
                f"Unknown traversal strategy: {self.traversal!r} "
                f"(expected one of {', '.join(TRAVERSAL_STRATEGIES)})"
            )
        if not isinstance(self.strict_keys, bool):
            raise ValueError(f"strict_keys must be a boolean, got {self.strict_keys!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TreeConfig:
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search upward from start_dir for a bintree configuration file.

    A directory matches if it holds bintree.toml, or a pyproject.toml with
    a [tool.bintree] table. bintree.toml wins when both are present. A
    pyproject.toml that is not valid TOML belongs to some other project
    and is skipped.

    Args:
        start_dir: Directory to start from (default: current directory).

    Returns:
        Path to the config file, or None if none was found.
    """
    current = (start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if not pyproject.is_file():
            continue
        try:
            section = _pyproject_section(pyproject)
        except ParseError as e:
            logger.warning("Skipping unparsable %s: %s", pyproject, e)
            continue
        if section is not None:
            return pyproject
    return None


def _pyproject_section(path: Path) -> dict[str, Any] | None:
    """Return the [tool.bintree] table of a pyproject.toml, if any."""
    data = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section = tool.get("bintree")
    return section if isinstance(section, dict) else None


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse a config file into a plain dict."""
    if path.name == PYPROJECT_FILENAME:
        return _pyproject_section(path) or {}
    return tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed Python value.

    JSON arrays and objects are decoded, "true"/"false" become booleans
    (case-insensitive). Anything else, including malformed JSON, is
    returned unchanged.
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply BINTREE_<KEY> environment variables on top of config."""
    result = dict(config)
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        key = name[len(ENV_PREFIX):].lower()
        result[key] = _try_parse_env_value(raw)
        logger.debug("Config override from %s", name)
    return result


def load_config(path: Path | str | None = None, start_dir: Path | None = None) -> TreeConfig:
    """Load the effective configuration.

    Args:
        path: Explicit config file. If None, search upward from start_dir.
        start_dir: Directory to start the search from (default: cwd).

    Returns:
        The resulting TreeConfig.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ValueError: If a setting has an invalid value.
    """
    config = dict(DEFAULT_CONFIG)

    if path is not None:
        config_path: Path | None = Path(path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file '{config_path}' not found")
    else:
        config_path = find_config_file(start_dir)

    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        config = merge_configs(config, _read_config_file(config_path))

    config = _apply_env_overrides(config)
    return TreeConfig.from_dict(config)
