"""Constants used in the project."""

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2


class ArchiveType(Enum):
    """How an archive's bytes are carried.

    Args:
        Enum (string): Archive types understood by the controller.
    """

    LITERAL = "literal"
    URL = "url"


class GlobMatch(Enum):
    """Comparison policy for include globs when looking for an existing spec.

    Args:
        Enum (string): Supported match modes.
    """

    EXACT = "exact"
    SET = "set"
    SUBSET = "subset"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SERVER_URL = "http://127.0.0.1:8888"
    ENV_SERVER_URL = "PKGSTAGE_URL"
    ENV_CONFIG = "PKGSTAGE_CONFIG"
    ENV_LOG_LEVEL = "PKGSTAGE_LOG_LEVEL"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    ARCHIVE_URL_PREFIX = "archive://"
    ARCHIVE_LITERAL_SIZE_LIMIT = 256 * 1024
    ARCHIVE_SUFFIX = ".zip"
    STORAGE_ARCHIVE_PATH = "/proxy/storage/v1/archive"
    FUNCTIONS_PATH = "/v2/functions"
    DEFAULT_NAMESPACE = "default"

    SPEC_DIR = "specs"
    SPEC_KIND_ARCHIVE_UPLOAD = "ArchiveUploadSpec"
    SPEC_GLOB_MATCH = GlobMatch.SET.value
    SPEC_FILE_EXTENSIONS = (".yaml", ".yml")

    NAME_MAX_LEN = 63
    NAME_SUFFIX_LEN = 4
    NAME_RANDOM_LEN = 8
    TEMP_DIR_PREFIX = "pkgstage-"


# Keys accepted in the YAML config file, mapped onto Constants attributes.
_CONFIG_KEYS = {
    "server_url": ("SERVER_URL", str),
    "request_timeout": ("REQUEST_TIMEOUT", int),
    "spec_dir": ("SPEC_DIR", str),
    "spec_glob_match": ("SPEC_GLOB_MATCH", str),
    "archive_literal_size_limit": ("ARCHIVE_LITERAL_SIZE_LIMIT", int),
}


def _default_config_path():
    return os.path.join(os.path.expanduser("~"), ".config", "pkgstage", "pkgstage.yml")


def _load_yaml_config(path=None):
    """Overlay Constants with values from a YAML config file.

    Args:
        path (str, optional): Explicit config path. Defaults to $PKGSTAGE_CONFIG,
            then ~/.config/pkgstage/pkgstage.yml.

    Returns:
        dict: The applied settings (empty when no config file is present).
    """
    import yaml  # pylint: disable=import-outside-toplevel

    cfg_path = path or os.environ.get(Constants.ENV_CONFIG) or _default_config_path()
    if not os.path.isfile(cfg_path):
        return {}

    with open(cfg_path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", cfg_path)
        return {}

    applied = {}
    for key, value in data.items():
        target = _CONFIG_KEYS.get(key)
        if target is None:
            logger.warning("Unknown config key %r in %s", key, cfg_path)
            continue
        attr, cast = target
        applied[attr] = cast(value)

    if "SPEC_GLOB_MATCH" in applied:
        # Raises ValueError for anything other than exact, set or subset.
        applied["SPEC_GLOB_MATCH"] = GlobMatch(applied["SPEC_GLOB_MATCH"].lower()).value

    for attr, value in applied.items():
        setattr(Constants, attr, value)
    return applied
