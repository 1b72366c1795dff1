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
    INVALID_INPUT = 2


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    NODE_ENVIRONMENT = "node"
    LEGACY_UGLIFY_TARGET = "uglify"
    REGENERATOR_PLUGIN = "transform-regenerator"
    BUILT_IN_NAME_PATTERN = r"^(es\d+|web)\."
    PLUGIN_PACKAGE_PREFIX = "babel-plugin-"
    DEFAULT_MODULE_TYPE = "commonjs"

    DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "catalog", "data")
    PLUGINS_FILE = "plugins.json"
    BUILT_INS_FILE = "built-ins.json"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "ENVGATE_LOG_LEVEL"
    DEBUG_LOGGER = "envgate.debug"
    CONFIG_SECTION = "preset"
    DEFAULT_CONFIG_FILES = ["envgate.yml", "envgate.yaml", ".envgate.yml"]


def _load_yaml_config(search_dir=None):
    """Load the first default YAML config found in ``search_dir`` (cwd by default).

    Returns:
        dict: Parsed configuration, or an empty dict when no file exists.
    """
    import yaml  # pylint: disable=import-outside-toplevel

    base = search_dir or os.getcwd()
    for name in Constants.DEFAULT_CONFIG_FILES:
        path = os.path.join(base, name)
        if not os.path.isfile(path):
            continue
        logger.debug("Loading default config from %s", path)
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        return data if isinstance(data, dict) else {}
    return {}
