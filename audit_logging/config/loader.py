"""TOML configuration discovery and layering.

Settings are layered from ``default.toml`` and an optional
``{environment}.toml`` in the config directory. Either file may be
absent; model defaults fill whatever the files leave out.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from audit_logging.observability.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR_ENV = "AUDIT_LOGGING_CONFIG_DIR"
ENVIRONMENT_ENV = "AUDIT_LOGGING_ENV"
DEFAULT_ENVIRONMENT = "development"
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the configuration directory.

    ``AUDIT_LOGGING_CONFIG_DIR`` wins when set and must exist. Otherwise
    the nearest ``config/`` directory at or above the working directory
    is used, falling back to ``./config``.

    Raises:
        FileNotFoundError: If the directory named by the environment is missing
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    start = Path.cwd()
    for candidate in [start, *start.parents][:SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    """Return the deployment environment name (``AUDIT_LOGGING_ENV``)."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; tables merge recursively."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Return the existing config files for ``environment`` in merge order."""
    candidates = [config_dir / "default.toml", config_dir / f"{environment}.toml"]
    return [path for path in candidates if path.is_file()]


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Load and merge the TOML layers for the current environment.

    A missing directory or missing files yield an empty mapping, leaving
    every value at its model default.
    """
    config_dir = config_dir or get_config_dir()
    environment = environment or get_environment()

    config: dict[str, Any] = {}
    layers = config_layers(config_dir, environment)
    for path in layers:
        config = deep_merge(config, load_toml(path))

    if not layers:
        logger.debug("audit_config_defaults_only", config_dir=str(config_dir))
    return config
