#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/cli/config.py
"""Configuration file discovery and loading for md2nexus CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML, or JSON, and turning the loaded tables into the
parser and renderer options classes.

A configuration file holds up to three tables::

    [markdown]
    parse_math = false

    [mdast]
    strict_mode = false

    [nexus]
    heading_size = 4
    monospace_font = "Consolas"

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2nexus.exceptions import ValidationError
from md2nexus.options import MarkdownParserOptions, MdastJsonParserOptions, NexusRendererOptions
from md2nexus.options.base import CloneFrozenMixin

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MD2NEXUS_CONFIG"
DEDICATED_CONFIG_FILENAMES = [".md2nexus.toml", ".md2nexus.yaml", ".md2nexus.yml", ".md2nexus.json"]
CONFIG_FILENAMES = DEDICATED_CONFIG_FILENAMES + ["pyproject.toml"]

CONFIG_SECTIONS: Dict[str, type[CloneFrozenMixin]] = {
    "markdown": MarkdownParserOptions,
    "mdast": MdastJsonParserOptions,
    "nexus": NexusRendererOptions,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.md2nexus] section from a pyproject.toml file.

    Returns an empty dict when the file has no such section.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("md2nexus")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.md2nexus] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root. In
    each directory the dedicated config files are checked first, then a
    pyproject.toml that has a [tool.md2nexus] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Ignoring unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The parent directory walk from ``start_dir`` (or the cwd) comes first,
    then the dedicated config files in the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported extension

    Examples
    --------
    >>> config = load_config_file(".md2nexus.toml")
    >>> config.get("nexus", {}).get("heading_size")
    4

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml, or .json")

    logger.debug("Loaded configuration from %s", config_path)
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML file loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2NEXUS_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.info("Using configuration file %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def section_values(config: Dict[str, Any], section: str) -> Dict[str, Any]:
    """Return the known option values from one config table.

    Unknown keys are logged and dropped.

    Raises
    ------
    argparse.ArgumentTypeError
        If the section is present but is not a table

    """
    table = config.get(section, {})
    if not isinstance(table, dict):
        raise argparse.ArgumentTypeError(f"Config section [{section}] must be a table, got {type(table).__name__}")

    known = CONFIG_SECTIONS[section].field_names()
    values = {}
    for key, value in table.items():
        if key in known:
            values[key] = value
        else:
            logger.warning("Ignoring unknown option '%s' in config section [%s]", key, section)
    return values


def options_from_config(
    config: Dict[str, Any], **overrides: Dict[str, Any]
) -> tuple[MarkdownParserOptions, MdastJsonParserOptions, NexusRendererOptions]:
    """Build the options objects from a loaded config.

    Parameters
    ----------
    config : dict
        Loaded configuration
    **overrides : dict
        Per-section values that take precedence over the file, keyed by
        section name (``markdown``, ``mdast``, ``nexus``). Typically these
        come from command-line flags.

    Returns
    -------
    tuple
        ``(MarkdownParserOptions, MdastJsonParserOptions, NexusRendererOptions)``

    Raises
    ------
    ValidationError
        If an option value is out of range

    """
    for key in config:
        if key not in CONFIG_SECTIONS:
            logger.warning("Ignoring unknown config section [%s]", key)

    built = []
    for section, options_class in CONFIG_SECTIONS.items():
        values = section_values(config, section)
        values.update(overrides.get(section, {}))
        try:
            built.append(options_class(**values))
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"Invalid [{section}] options: {e}", parameter_name=section, parameter_value=values, original_error=e
            ) from e

    markdown_options, mdast_options, nexus_options = built
    return markdown_options, mdast_options, nexus_options
