"""Normalization of explicit ``{environment: version}`` target mappings."""

import logging
from typing import Any, Dict, Mapping, Optional

from constants import Constants

from .errors import InvalidCandidateVersion, InvalidOptions, InvalidTargetVersion
from .semver_utils import semverify

logger = logging.getLogger(__name__)


def get_targets(raw: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Build a TargetMap from user-supplied targets.

    Versions may be full semver strings or bare major versions (``55`` or
    ``"55"``). A truthy legacy uglify key is carried through untouched so the
    caller can detect and strip it; a falsy one is dropped.

    Raises:
        InvalidOptions: If ``raw`` is not a mapping.
        InvalidTargetVersion: If a version cannot be normalized.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidOptions(f"targets must be a mapping of environment to version, got {type(raw).__name__}")

    targets: Dict[str, Any] = {}
    for environment, version in raw.items():
        if environment == Constants.LEGACY_UGLIFY_TARGET:
            if version:
                targets[environment] = version
            continue
        try:
            targets[environment] = semverify(version)
        except InvalidCandidateVersion as exc:
            raise InvalidTargetVersion(environment, version) from exc
    logger.debug("Normalized targets: %s", targets)
    return targets
