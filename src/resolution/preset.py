"""Preset resolution: turn targets and options into an ordered transform list.

Runs the filter engine against the plugin catalog and, when polyfill
injection is enabled, against the built-ins catalog, then maps every selected
name to a registered TransformUnit.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from catalog.loader import MODULE_TRANSFORMATIONS, load_built_ins_list, load_plugin_list
from catalog.registry import BUILT_INS_ENTRY_ID, BUILT_INS_USAGE_ID, TransformRegistry, build_default_registry
from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning.semver_utils import lt, prettify_targets, prettify_version, semverify
from versioning.targets import get_targets

from .classifier import transform_includes_and_excludes
from .filtering import filter_items, get_built_in_targets, get_platform_specific_default_for
from .models import Catalog, PresetOptions, PresetResult, TransformUnit, UseBuiltIns
from .options import normalize_options

logger = logging.getLogger(__name__)
debug_logger = logging.getLogger(Constants.DEBUG_LOGGER)


def log_plugin(plugin: str, targets: Mapping[str, str], catalog: Catalog) -> str:
    """Log one selected item with the targets that lack native support for it."""
    env_list = catalog.get(plugin) or {}
    filtered = {
        env: prettify_version(version)
        for env, version in targets.items()
        if not env_list.get(env) or lt(version, semverify(env_list[env]))
    }
    line = f"  {plugin} {json.dumps(filtered, separators=(',', ':'))}"
    debug_logger.info(line)
    return line


def _strip_uglify_target(raw_targets: Optional[Mapping[str, Any]]) -> Tuple[Optional[Dict[str, Any]], bool]:
    """Return a copy of the raw targets without a truthy uglify entry, and whether one was present."""
    if not raw_targets or not raw_targets.get(Constants.LEGACY_UGLIFY_TARGET):
        return (dict(raw_targets) if raw_targets is not None else None), False

    logger.warning(
        "The uglify target has been deprecated. Set the top level option `useSyntax: false` instead."
    )
    stripped = {k: v for k, v in raw_targets.items() if k != Constants.LEGACY_UGLIFY_TARGET}
    return stripped, True


class PresetResolver:
    """Resolution context holding the catalogs, the registry and the debug-banner flag.

    The banner flag is per resolver and flipped under a lock, so a shared
    resolver prints the banner once even with concurrent callers.
    """

    def __init__(
        self,
        plugin_list: Optional[Catalog] = None,
        built_ins_list: Optional[Catalog] = None,
        registry: Optional[TransformRegistry] = None,
    ):
        self.plugin_list = plugin_list if plugin_list is not None else load_plugin_list()
        self.built_ins_list = built_ins_list if built_ins_list is not None else load_built_ins_list()
        self.registry = registry or build_default_registry(self.plugin_list)
        self._has_been_logged = False
        self._log_lock = threading.Lock()

    @property
    def has_been_logged(self) -> bool:
        return self._has_been_logged

    def _claim_debug_banner(self) -> bool:
        """Atomically check-and-set the banner flag; True only for the first caller."""
        with self._log_lock:
            if self._has_been_logged:
                return False
            self._has_been_logged = True
            return True

    def _log_banner(
        self,
        options: PresetOptions,
        targets: Mapping[str, str],
        transformations: List[str],
        transform_targets: Mapping[str, str],
        has_uglify_target: bool,
    ) -> None:
        debug_logger.info("envgate: `DEBUG` option")
        debug_logger.info("\nUsing targets:")
        debug_logger.info(json.dumps(prettify_targets(targets), indent=2))
        debug_logger.info("\nModules transform: %s", options.module_type)
        debug_logger.info("")
        debug_logger.info("Plugins")
        debug_logger.info("=========")
        debug_logger.info("")

        if not transformations:
            debug_logger.info("Based on your targets none were added.")
            return
        if not options.use_syntax:
            debug_logger.info("Added all plugins (useSyntax: false):")
        elif has_uglify_target:
            debug_logger.info("Added all plugins (target: uglify):")
        else:
            debug_logger.info("Added the following plugins based on your targets:")
        for transform in transformations:
            log_plugin(transform, transform_targets, self.plugin_list)

    def build_preset(self, opts: Union[PresetOptions, Mapping[str, Any], None] = None) -> PresetResult:
        """Resolve ``opts`` into the ordered list of units to run.

        Raises:
            InvalidOptions: If the options fail validation.
            InvalidTargetVersion: If a target version is not valid semver.
            InvalidCandidateVersion: If a catalog version cannot be normalized.
            UnknownIdentifier: If a selected name has no registered unit.
        """
        if isinstance(opts, PresetOptions):
            options = opts
        else:
            options = normalize_options(opts, self.plugin_list, self.built_ins_list)

        # TODO: remove the uglify target once the deprecation window closes
        raw_targets, has_uglify_target = _strip_uglify_target(options.targets)

        targets = get_targets(raw_targets)
        include = transform_includes_and_excludes(options.include)
        exclude = transform_includes_and_excludes(options.exclude)

        transform_targets = {} if not options.use_syntax or has_uglify_target else targets

        transformations = filter_items(
            self.plugin_list,
            include.plugins,
            exclude.plugins,
            transform_targets,
        )

        polyfills: Optional[List[str]] = None
        polyfill_targets: Dict[str, str] = {}
        if options.use_built_ins is not UseBuiltIns.OFF:
            polyfill_targets = get_built_in_targets(targets)
            polyfills = filter_items(
                self.built_ins_list,
                include.built_ins,
                exclude.built_ins,
                polyfill_targets,
                get_platform_specific_default_for(polyfill_targets),
            )

        if options.debug and self._claim_debug_banner():
            self._log_banner(options, targets, transformations, transform_targets, has_uglify_target)

        plugins: List[Tuple[TransformUnit, Dict[str, Any]]] = []

        if options.module_type is not False and options.module_type in MODULE_TRANSFORMATIONS:
            unit = self.registry.get(MODULE_TRANSFORMATIONS[options.module_type])
            plugins.append((unit, {"loose": options.loose}))

        for plugin_name in transformations:
            plugins.append((self.registry.get(plugin_name), {"loose": options.loose}))

        regenerator = Constants.REGENERATOR_PLUGIN in transformations

        if options.debug:
            debug_logger.info("")
            debug_logger.info("Polyfills")
            debug_logger.info("=========")
            debug_logger.info("")

        if options.use_built_ins is UseBuiltIns.USAGE:
            plugins.append((
                self.registry.get(BUILT_INS_USAGE_ID),
                {"debug": options.debug, "polyfills": polyfills, "regenerator": regenerator},
            ))
        elif options.use_built_ins is UseBuiltIns.ENTRY:
            plugins.append((
                self.registry.get(BUILT_INS_ENTRY_ID),
                {
                    "debug": options.debug,
                    "polyfills": polyfills,
                    "regenerator": regenerator,
                    "on_debug": self._entry_debug_callback(polyfill_targets),
                },
            ))
        elif options.debug:
            debug_logger.info("None were added, since the `useBuiltIns` option was not set.")

        if is_debug_enabled(logger):
            logger.debug(
                "Preset resolved",
                extra=extra_context(
                    event="build_preset",
                    component="resolution",
                    action="resolve",
                    outcome="success",
                    plugin_count=len(transformations),
                    polyfill_count=len(polyfills) if polyfills is not None else None,
                ),
            )

        return PresetResult(
            plugins=plugins,
            targets=targets,
            transformations=transformations,
            polyfills=polyfills,
            regenerator=regenerator,
        )

    def _entry_debug_callback(self, polyfill_targets: Mapping[str, str]) -> Callable[[str], str]:
        def on_debug(polyfill: str) -> str:
            return log_plugin(polyfill, polyfill_targets, self.built_ins_list)
        return on_debug


_default_resolver: Optional[PresetResolver] = None
_default_lock = threading.Lock()


def get_default_resolver() -> PresetResolver:
    """Return the process-wide resolver built on the bundled catalogs."""
    global _default_resolver  # pylint: disable=global-statement
    with _default_lock:
        if _default_resolver is None:
            _default_resolver = PresetResolver()
        return _default_resolver


def build_preset(opts: Union[PresetOptions, Mapping[str, Any], None] = None) -> PresetResult:
    """Resolve ``opts`` with the process-wide resolver."""
    return get_default_resolver().build_preset(opts)
