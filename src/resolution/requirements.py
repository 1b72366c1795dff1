"""Decide whether a transformation or polyfill is needed for a set of targets."""

from typing import Mapping

from versioning.errors import InvalidTargetVersion
from versioning.semver_utils import gt, is_valid, semverify

from .models import SupportTable


def is_plugin_required(supported_environments: Mapping[str, str], plugin: SupportTable) -> bool:
    """Determine if a transformation is required.

    Assumes ``supported_environments`` has already been normalized by
    ``versioning.targets.get_targets``.

    Args:
        supported_environments: Environment -> lowest supported version.
        plugin: Environment -> lowest version implementing the feature.

    Returns:
        bool: True if any target environment lacks native support.

    Raises:
        InvalidTargetVersion: If a target version is not valid semver.
        InvalidCandidateVersion: If a support version cannot be normalized.
    """
    if not supported_environments:
        return True

    required = False
    for environment, lowest_targeted in supported_environments.items():
        lowest_implemented = plugin.get(environment)
        # Feature is not implemented in that environment
        if not lowest_implemented:
            required = True
            continue

        if not is_valid(lowest_targeted):
            raise InvalidTargetVersion(environment, lowest_targeted)

        if gt(semverify(lowest_implemented), lowest_targeted):
            required = True
    return required
