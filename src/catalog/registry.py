"""Static registry of transform units.

Every identifier the preset can emit is registered up front, so resolving a
name is a dictionary lookup that fails with ``UnknownIdentifier`` instead of a
late load error.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Mapping, Optional

from constants import Constants
from resolution.models import TransformUnit, UnitKind
from versioning.errors import UnknownIdentifier

from .loader import MODULE_TRANSFORMATIONS, load_plugin_list

logger = logging.getLogger(__name__)

BUILT_INS_ENTRY_ID = "use-built-ins-entry"
BUILT_INS_USAGE_ID = "use-built-ins-usage"


class TransformRegistry:
    """Identifier -> TransformUnit mapping."""

    def __init__(self, units: Optional[Iterable[TransformUnit]] = None):
        self._units: Dict[str, TransformUnit] = {}
        for unit in units or ():
            self.register(unit)

    def register(self, unit: TransformUnit) -> TransformUnit:
        """Register ``unit``; re-registering the same identifier replaces it."""
        if unit.identifier in self._units:
            logger.debug("Replacing registered unit %s", unit.identifier)
        self._units[unit.identifier] = unit
        return unit

    def register_plugin(self, name: str, kind: UnitKind = UnitKind.PLUGIN) -> TransformUnit:
        """Register a unit whose package follows the plugin naming convention."""
        return self.register(TransformUnit(name, f"{Constants.PLUGIN_PACKAGE_PREFIX}{name}", kind))

    def get(self, identifier: str) -> TransformUnit:
        """Return the unit registered under ``identifier``.

        Raises:
            UnknownIdentifier: If nothing is registered under that name.
        """
        try:
            return self._units[identifier]
        except KeyError:
            raise UnknownIdentifier(identifier) from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)


def build_default_registry(plugin_list: Optional[Mapping[str, object]] = None) -> TransformRegistry:
    """Build the registry for a plugin catalog, the module transforms and the built-ins injectors."""
    registry = TransformRegistry()
    for name in plugin_list if plugin_list is not None else load_plugin_list():
        registry.register_plugin(name)
    for name in MODULE_TRANSFORMATIONS.values():
        registry.register_plugin(name, UnitKind.MODULE)
    registry.register(TransformUnit(BUILT_INS_ENTRY_ID, "envgate.built-ins.entry", UnitKind.BUILT_INS_ENTRY))
    registry.register(TransformUnit(BUILT_INS_USAGE_ID, "envgate.built-ins.usage", UnitKind.BUILT_INS_USAGE))
    return registry
