"""Data models for preset resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union


class UseBuiltIns(Enum):
    """Polyfill injection mode."""
    OFF = "off"
    ENTRY = "entry"
    USAGE = "usage"


class UnitKind(Enum):
    """What a registered transform unit does."""
    PLUGIN = "plugin"
    MODULE = "module"
    BUILT_INS_ENTRY = "built-ins-entry"
    BUILT_INS_USAGE = "built-ins-usage"


@dataclass(frozen=True)
class TransformUnit:
    """A concrete, registered transform or injection step."""
    identifier: str
    package: str
    kind: UnitKind = UnitKind.PLUGIN


@dataclass
class Classified:
    """User item names split into plugin and built-in subsets."""
    all: Sequence[str]
    plugins: Set[str] = field(default_factory=set)
    built_ins: Set[str] = field(default_factory=set)


@dataclass
class PresetOptions:
    """Validated preset options (see resolution.options.normalize_options)."""
    debug: bool = False
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    loose: bool = False
    module_type: Union[str, bool] = "commonjs"
    targets: Optional[Mapping[str, Any]] = None
    use_built_ins: UseBuiltIns = UseBuiltIns.OFF
    use_syntax: bool = True


@dataclass
class PresetResult:
    """Resolution outcome: ordered transform list plus the decisions behind it."""
    plugins: List[Tuple[TransformUnit, Dict[str, Any]]]
    targets: Dict[str, str]
    transformations: List[str]
    polyfills: Optional[List[str]] = None
    regenerator: bool = False

    def identifiers(self) -> List[str]:
        """Return the identifiers of the emitted units, in order."""
        return [unit.identifier for unit, _ in self.plugins]


# Type aliases shared by the resolution modules.
SupportTable = Mapping[str, Union[str, int]]
Catalog = Mapping[str, SupportTable]
