"""Validation and normalization of user-supplied preset options."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from catalog.loader import DEFAULT_WEB_INCLUDES, MODULE_TRANSFORMATIONS
from constants import Constants
from versioning.errors import InvalidOptions

from .models import PresetOptions, UseBuiltIns

logger = logging.getLogger(__name__)

# Original camelCase spellings are accepted alongside snake_case.
_ALIASES = {
    "moduleType": "module_type",
    "modules": "module_type",
    "useBuiltIns": "use_built_ins",
    "useSyntax": "use_syntax",
}
_KNOWN_KEYS = {
    "debug", "include", "exclude", "loose", "module_type", "targets", "use_built_ins", "use_syntax",
}


def _canonical_keys(opts: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in opts.items():
        name = _ALIASES.get(key, key)
        if name not in _KNOWN_KEYS:
            raise InvalidOptions(f"Invalid Option: '{key}' is not a valid top-level option.")
        out[name] = value
    return out


def _validate_bool(name: str, value: Any, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidOptions(f"Invalid Option: '{name}' must be a boolean, got {value!r}.")
    return value


def _validate_names(
    name: str,
    value: Any,
    valid_names: Iterable[str],
) -> List[str]:
    """Return ``value`` as a list of known item names."""
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise InvalidOptions(f"Invalid Option: '{name}' must be a list of names, got {value!r}.")
    names = list(value)
    valid = set(valid_names)
    unknown = [item for item in names if not isinstance(item, str) or item not in valid]
    if unknown:
        raise InvalidOptions(
            f"Invalid Option: The plugins/built-ins '{', '.join(map(str, unknown))}' passed to "
            f"the '{name}' option are not valid."
        )
    return names


def _validate_module_type(value: Any) -> Any:
    if value is None:
        return Constants.DEFAULT_MODULE_TYPE
    if value is False or (isinstance(value, str) and value.lower() == "false"):
        return False
    if isinstance(value, str) and value in MODULE_TRANSFORMATIONS:
        return value
    raise InvalidOptions(
        f"Invalid Option: The 'modules' option must be one of {sorted(MODULE_TRANSFORMATIONS)} "
        f"or false, got {value!r}."
    )


def _validate_use_built_ins(value: Any) -> UseBuiltIns:
    if value is None or value is False:
        return UseBuiltIns.OFF
    if value is True:
        logger.warning("`useBuiltIns: true` is deprecated; use `useBuiltIns: \"entry\"` instead.")
        return UseBuiltIns.ENTRY
    if isinstance(value, UseBuiltIns):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in ("off", "false"):
            return UseBuiltIns.OFF
        for mode in UseBuiltIns:
            if mode.value == lowered:
                return mode
    raise InvalidOptions(
        f"Invalid Option: The 'useBuiltIns' option must be false, \"entry\" or \"usage\", got {value!r}."
    )


def _warn_duplicates(include: List[str], exclude: List[str]) -> None:
    duplicates = sorted(set(include) & set(exclude))
    if duplicates:
        logger.warning(
            "The plugins/built-ins '%s' were found in both the 'include' and 'exclude' options; "
            "they will be included.",
            ", ".join(duplicates),
        )


def normalize_options(
    opts: Optional[Mapping[str, Any]] = None,
    plugin_list: Optional[Mapping[str, Any]] = None,
    built_ins_list: Optional[Mapping[str, Any]] = None,
) -> PresetOptions:
    """Validate raw options and return a PresetOptions.

    The caller's mapping is not modified.

    Raises:
        InvalidOptions: On unknown keys, unknown item names or bad values.
    """
    if opts is None:
        opts = {}
    if not isinstance(opts, Mapping):
        raise InvalidOptions(f"Preset options must be a mapping, got {type(opts).__name__}.")
    values = _canonical_keys(opts)

    valid_names = (
        set(plugin_list or ()) | set(built_ins_list or ())
        | set(MODULE_TRANSFORMATIONS.values()) | set(DEFAULT_WEB_INCLUDES)
    )
    include = _validate_names("include", values.get("include"), valid_names)
    exclude = _validate_names("exclude", values.get("exclude"), valid_names)
    _warn_duplicates(include, exclude)

    targets = values.get("targets")
    if targets is not None and not isinstance(targets, Mapping):
        raise InvalidOptions(f"Invalid Option: 'targets' must be a mapping, got {targets!r}.")

    return PresetOptions(
        debug=_validate_bool("debug", values.get("debug"), False),
        include=include,
        exclude=exclude,
        loose=_validate_bool("loose", values.get("loose"), False),
        module_type=_validate_module_type(values.get("module_type")),
        targets=dict(targets) if targets is not None else None,
        use_built_ins=_validate_use_built_ins(values.get("use_built_ins")),
        use_syntax=_validate_bool("use_syntax", values.get("use_syntax"), True),
    )
