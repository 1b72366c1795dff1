"""Configuration loading and CLI overrides for preset options.

Precedence, highest first: CLI flags, the file given with --config (or the
first default ``envgate.yml`` found in the working directory), built-in
defaults applied later by ``normalize_options``.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants, _load_yaml_config
from versioning.errors import InvalidOptions

logger = logging.getLogger(__name__)


def _preset_section(data: Any) -> Dict[str, Any]:
    """Return the ``preset`` section when present, else the whole mapping."""
    if not isinstance(data, dict):
        return {}
    section = data.get(Constants.CONFIG_SECTION, data)
    return dict(section) if isinstance(section, dict) else {}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load preset options from a YAML or JSON file.

    Args:
        config_path: Explicit path; when omitted the default YAML locations
            in the working directory are tried.

    Returns:
        dict: Raw preset options (possibly empty).

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        InvalidOptions: If the file cannot be parsed.
    """
    if not config_path:
        return _preset_section(_load_yaml_config())

    if not os.path.isfile(config_path):
        raise FileNotFoundError(config_path)

    with open(config_path, "r", encoding="utf-8") as fh:
        try:
            if config_path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise InvalidOptions(f"Failed to parse config {config_path}: {exc}") from exc
    logger.debug("Loaded config from %s", config_path)
    return _preset_section(data)


def parse_target_pairs(pairs: List[str]) -> Dict[str, str]:
    """Parse ``ENV=VERSION`` tokens into a raw targets mapping."""
    targets: Dict[str, str] = {}
    for pair in pairs or []:
        env, sep, version = pair.partition("=")
        if not sep or not env.strip() or not version.strip():
            raise InvalidOptions(f"Invalid target '{pair}': expected ENV=VERSION")
        targets[env.strip()] = version.strip()
    return targets


def merge_cli_overrides(config: Dict[str, Any], args) -> Dict[str, Any]:
    """Apply CLI flags on top of file-based options; the input mapping is not modified."""
    merged = dict(config)

    cli_targets = parse_target_pairs(getattr(args, "TARGETS", []))
    if cli_targets:
        targets = dict(merged.get("targets") or {})
        targets.update(cli_targets)
        merged["targets"] = targets

    for key, attr in (("include", "INCLUDE"), ("exclude", "EXCLUDE")):
        values = getattr(args, attr, None)
        if values:
            merged[key] = list(merged.get(key) or []) + [v for v in values if v not in (merged.get(key) or [])]

    if getattr(args, "LOOSE", None) is not None:
        merged["loose"] = args.LOOSE
    if getattr(args, "DEBUG", None) is not None:
        merged["debug"] = args.DEBUG
    if getattr(args, "USE_SYNTAX", None) is not None:
        merged["use_syntax"] = args.USE_SYNTAX
    if getattr(args, "MODULE_TYPE", None):
        merged["module_type"] = False if args.MODULE_TYPE == "false" else args.MODULE_TYPE
    if getattr(args, "USE_BUILT_INS", None):
        merged["use_built_ins"] = args.USE_BUILT_INS

    _drop_aliases(merged)
    return merged


def _drop_aliases(merged: Dict[str, Any]) -> None:
    # A CLI value stored under the snake_case key wins over a camelCase file key.
    for alias, key in (("moduleType", "module_type"), ("modules", "module_type"),
                       ("useBuiltIns", "use_built_ins"), ("useSyntax", "use_syntax")):
        if alias in merged and key in merged:
            del merged[alias]
