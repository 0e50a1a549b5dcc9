"""
Configuration loader — reads chromegen.yml into a GeneratorConfig.

Resolution order for every setting (highest first):
    explicit override (CLI)  >  CHROMEGEN_* env var  >  chromegen.yml  >  default

A missing config file is not an error: the defaults describe the
standard workspace layout. An unreadable or malformed file is.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from chromegen.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "chromegen.yml"

# Settings that may be overridden from the environment
_ENV_OVERRIDES = {
    "api_url": "CHROMEGEN_API_URL",
    "output_path": "CHROMEGEN_OUTPUT_PATH",
}


class ConfigError(Exception):
    """Raised when generator configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for chromegen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to chromegen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Read and parse a config file into a mapping.

    Raises:
        ConfigError: If the file is missing, unreadable, or not a YAML mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def parse_config(data: dict[str, Any]) -> GeneratorConfig:
    """Validate the generator settings of a parsed config file.

    Settings may sit under a ``chrome:`` key or at the top level.
    """
    section = data.get("chrome", data)
    if not isinstance(section, dict):
        raise ConfigError(f"'chrome' must be a mapping, got {type(section).__name__}")

    fields = {k: v for k, v in section.items() if k in GeneratorConfig.model_fields}
    try:
        return GeneratorConfig.model_validate(fields)
    except Exception as e:
        raise ConfigError(f"Invalid chrome configuration: {e}") from e


def apply_overrides(config: GeneratorConfig, **overrides: str | None) -> GeneratorConfig:
    """Return a copy of *config* with env and explicit overrides applied.

    Empty values never override.
    """
    update: dict[str, str] = {}
    for key, env_var in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            update[key] = value
    for key, value in overrides.items():
        if key not in GeneratorConfig.model_fields:
            raise ConfigError(f"Unknown setting: {key}")
        if value:
            update[key] = value

    if update:
        logger.debug("Config overrides: %s", ", ".join(sorted(update)))
    return config.model_copy(update=update)


def load_config(
    path: Path | None = None,
    start_dir: Path | None = None,
    **overrides: str | None,
) -> GeneratorConfig:
    """Load generator settings.

    Args:
        path: Explicit path to chromegen.yml. If None, searches upward
            from *start_dir*.
        start_dir: Where the search begins (default: cwd).
        **overrides: Explicit setting values (e.g. ``api_url``).

    Returns:
        Validated GeneratorConfig.

    Raises:
        ConfigError: If an existing file is invalid.
    """
    if path is None:
        path = find_config_file(start_dir)

    if path is None:
        logger.info("No %s found, using defaults", CONFIG_FILE)
        config = GeneratorConfig()
    else:
        config = parse_config(read_config_data(path))

    config = apply_overrides(config, **overrides)
    logger.info("Loaded config for '%s' (output: %s)", config.name, config.output_path)
    return config
