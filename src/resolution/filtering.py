"""Catalog filtering and platform default selection."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional

from catalog.loader import DEFAULT_WEB_INCLUDES
from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants

from .models import Catalog
from .requirements import is_plugin_required

logger = logging.getLogger(__name__)


def get_platform_specific_default_for(targets: Mapping[str, str]) -> Optional[FrozenSet[str]]:
    """Return the default web polyfills unless every target is the server runtime.

    No targets at all means "any platform", which also gets the defaults.
    """
    is_any_target = not targets
    is_web_target = any(name != Constants.NODE_ENVIRONMENT for name in targets)
    return DEFAULT_WEB_INCLUDES if is_any_target or is_web_target else None


def get_built_in_targets(targets: Mapping[str, str]) -> Dict[str, str]:
    """Return a copy of ``targets`` without the legacy uglify pseudo-target."""
    return {env: version for env, version in targets.items() if env != Constants.LEGACY_UGLIFY_TARGET}


def filter_items(
    catalog: Catalog,
    includes: Iterable[str],
    excludes: Iterable[str],
    targets: Mapping[str, str],
    default_items: Optional[Iterable[str]] = None,
) -> List[str]:
    """Select the catalog items needed for ``targets``.

    Order matters for override semantics:

    1. catalog entries that are not excluded and are required by the targets;
    2. default items that are not excluded (no version check);
    3. every explicit include, even when excluded or unknown to the catalog.

    Returns:
        list: Ordered, duplicate-free item names.
    """
    excludes = set(excludes)
    result: Dict[str, None] = {}

    for item, support in catalog.items():
        if item not in excludes and is_plugin_required(targets, support):
            result[item] = None

    if default_items:
        for item in sorted(default_items):
            if item not in excludes:
                result[item] = None

    for item in sorted(includes):
        result[item] = None

    if is_debug_enabled(logger):
        logger.debug(
            "Filtered catalog",
            extra=extra_context(
                event="filter_items",
                component="resolution",
                action="filter",
                outcome="success",
                catalog_size=len(catalog),
                selected=len(result),
            ),
        )
    return list(result)
