"""Compatibility catalogs and the transform registry.

- loader.py: bundled plugin/built-in support tables, module transforms and
  default web includes
- registry.py: static identifier -> transform unit lookup
"""

from .loader import (  # noqa: F401
    DEFAULT_WEB_INCLUDES,
    MODULE_TRANSFORMATIONS,
    load_built_ins_list,
    load_catalog,
    load_plugin_list,
)

__all__ = [
    "DEFAULT_WEB_INCLUDES",
    "MODULE_TRANSFORMATIONS",
    "load_built_ins_list",
    "load_catalog",
    "load_plugin_list",
]
