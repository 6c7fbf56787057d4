"""Loading the GitHub credentials from the configuration file.

The file lives in the OS-standard application config directory (for
example ``~/.config/ghdash/config.toml`` on Linux) unless another path is
given. It is a TOML document with two keys::

    user = "octocat"
    token = "ghp_..."
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from ghdash.errors import ConfigError
from ghdash.models import GhConfig

logger = logging.getLogger(__name__)

APP_NAME = "ghdash"
CONFIG_FILE = "config.toml"

# Non-empty values override whatever the file holds.
ENV_USER = "GHDASH_USER"
ENV_TOKEN = "GHDASH_TOKEN"

_TEMPLATE = 'user = ""\ntoken = ""\n'


def config_path(app_name: str = APP_NAME) -> Path:
    """Default location of the configuration file for ``app_name``."""
    return Path(typer.get_app_dir(app_name)) / CONFIG_FILE


def _write_template(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_TEMPLATE, encoding="utf-8")
    except OSError as e:
        logger.warning("Could not create configuration file %s: %s", path, e)
        return
    logger.info("Created empty configuration file %s", path)


def _apply_env(cfg: GhConfig) -> GhConfig:
    updates = {}
    if os.environ.get(ENV_USER):
        updates["user"] = os.environ[ENV_USER]
    if os.environ.get(ENV_TOKEN):
        updates["token"] = os.environ[ENV_TOKEN]
    if updates:
        logger.debug("Overriding configuration from environment: %s", sorted(updates))
        return cfg.model_copy(update=updates)
    return cfg


def load_config(
    app_name: str = APP_NAME, path: Optional[Path] = None
) -> GhConfig:
    """Load the configuration, creating an empty one if none exists yet.

    Raises :class:`ConfigError` when the file exists but cannot be read,
    is not valid TOML, or holds values of the wrong type.
    """
    path = Path(path).expanduser() if path else config_path(app_name)
    logger.debug("Loading configuration from %s", path)

    if not path.exists():
        _write_template(path)
        return _apply_env(GhConfig())

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, f"not valid TOML ({e})") from e
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e

    try:
        cfg = GhConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(path, f"unexpected values ({e.error_count()} errors)") from e
    return _apply_env(cfg)
