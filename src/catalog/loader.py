"""Static compatibility catalogs.

The plugin and built-in catalogs map an item name to its support table
(environment -> first version with native support). They are loaded from the
bundled JSON data files, cached for the life of the process and exposed as
read-only mappings.
"""

import json
import logging
import os
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from constants import Constants

logger = logging.getLogger(__name__)

# Module format -> transformation identifier.
MODULE_TRANSFORMATIONS: Mapping[str, str] = MappingProxyType({
    "amd": "transform-es2015-modules-amd",
    "commonjs": "transform-es2015-modules-commonjs",
    "systemjs": "transform-es2015-modules-systemjs",
    "umd": "transform-es2015-modules-umd",
})

# Global polyfills every non-server platform gets unless excluded.
DEFAULT_WEB_INCLUDES = frozenset([
    "web.timers",
    "web.immediate",
    "web.dom.iterable",
])


def _read_catalog(path: str) -> Mapping[str, Mapping[str, str]]:
    """Read a catalog JSON file, preserving its key order."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Catalog {path} must contain a JSON object")
    logger.debug("Loaded %d catalog entries from %s", len(data), path)
    return MappingProxyType({name: MappingProxyType(dict(table)) for name, table in data.items()})


@lru_cache(maxsize=None)
def load_catalog(path: str) -> Mapping[str, Mapping[str, str]]:
    """Load and cache the catalog stored at ``path``."""
    return _read_catalog(path)


def load_plugin_list(path: Optional[str] = None) -> Mapping[str, Mapping[str, str]]:
    """Return the transformation catalog (bundled data unless ``path`` is given)."""
    return load_catalog(path or os.path.join(Constants.DATA_DIR, Constants.PLUGINS_FILE))


def load_built_ins_list(path: Optional[str] = None) -> Mapping[str, Mapping[str, str]]:
    """Return the polyfill catalog (bundled data unless ``path`` is given)."""
    return load_catalog(path or os.path.join(Constants.DATA_DIR, Constants.BUILT_INS_FILE))
