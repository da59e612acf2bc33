#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the mdedit CLI.

A configuration file holds two optional tables, ``markdown`` for the
serializer and ``html`` for the HTML adapter::

    [markdown]
    italic_marker = "*"
    bullet_marker = "+"

    [html]
    unknown_tags = "unwrap"

The same tables may live under ``[tool.mdedit]`` in ``pyproject.toml``.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdedit.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES, PYPROJECT_SECTION

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdedit]`` table of a pyproject.toml, or ``{}``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is not valid TOML or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file from ``start_dir`` up to the root.

    In each directory the dedicated files are checked first, in the order of
    ``CONFIG_FILENAMES``, then ``pyproject.toml`` if it has a
    ``[tool.mdedit]`` section. Unreadable pyproject files are skipped.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Skipping %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent directories, then home.

    Returns
    -------
    Path or None
        Path to the discovered file

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, cannot be parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".mdedit.toml")
    >>> config["markdown"]["italic_marker"]
    '*'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config: Any = _load_pyproject_section(config_path)
    else:
        try:
            if ext == ".toml":
                with open(config_path, "rb") as f:
                    config = tomllib.load(f)
            elif ext in (".yaml", ".yml"):
                with open(config_path, "r", encoding="utf-8") as f:
                    config = yaml.safe_load(f)
            elif ext == ".json":
                with open(config_path, "r", encoding="utf-8") as f:
                    config = json.load(f)
            else:
                raise argparse.ArgumentTypeError(
                    f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml"
                )
        except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            kind = ext.lstrip(".").upper()
            raise argparse.ArgumentTypeError(f"Invalid {kind} in config file {config_path}: {e}") from e
        except OSError as e:
            raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    # an empty YAML document loads as None
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    logger.debug("Loaded configuration from %s", config_path)
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration mappings; nested tables are merged recursively.

    Examples
    --------
    >>> merge_configs({"markdown": {"indent": "  "}}, {"markdown": {"bullet_marker": "*"}})
    {'markdown': {'indent': '  ', 'bullet_marker': '*'}}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    discover: bool = True,
) -> Dict[str, Any]:
    """Load the configuration that applies to this run.

    Priority order (highest first): the explicit ``--config`` path, the path
    in ``MDEDIT_CONFIG``, then an auto-discovered file. Only the first source
    found is read.

    Parameters
    ----------
    explicit_path : str, optional
        Path given on the command line
    env_var_path : str, optional
        Path from the environment; read from ``MDEDIT_CONFIG`` when omitted
    discover : bool, default True
        Search parent directories and home when no path was given

    Returns
    -------
    dict
        Configuration mapping, empty when no file applies

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path is None:
        env_var_path = os.environ.get(CONFIG_ENV_VAR)
    if env_var_path:
        return load_config_file(env_var_path)

    if discover:
        found = discover_config_file()
        if found:
            return load_config_file(found)
    return {}
