"""CLI configuration overrides for runtime tunables.

Precedence, lowest to highest: Constants defaults, YAML config file,
$PKGSTAGE_URL, --server.
"""

from __future__ import annotations

import logging
import os

import yaml

from constants import Constants, _load_yaml_config

logger = logging.getLogger(__name__)


def load_config(path=None) -> None:
    """Load the YAML config file onto Constants; a broken file is reported, not fatal."""
    try:
        applied = _load_yaml_config(path)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
        logger.warning("Ignoring config file: %s", exc)
        return
    if applied:
        logger.debug("Loaded config overrides: %s", sorted(applied))


def apply_server_overrides(args) -> None:
    """Apply environment and CLI overrides for the controller URL."""
    env_url = os.environ.get(Constants.ENV_SERVER_URL)
    if env_url and env_url.strip():
        Constants.SERVER_URL = env_url.strip()
    cli_url = getattr(args, "SERVER_URL", None)
    if cli_url:
        Constants.SERVER_URL = cli_url
