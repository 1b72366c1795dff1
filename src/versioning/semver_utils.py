"""Semantic version helpers built on ``semantic_version``.

Comparison (``is_valid``, ``gt``, ``lt``) delegates to the library; the
normalizer (``semverify``) widens a bare major version into a full
``major.minor.patch`` string, and the prettifiers render versions for display.
"""

from typing import Any, Dict, Mapping

import semantic_version

from .errors import InvalidCandidateVersion


def is_valid(version: Any) -> bool:
    """Return True if ``version`` is a syntactically valid semver string."""
    if not isinstance(version, str):
        return False
    try:
        semantic_version.Version(version)
    except ValueError:
        return False
    return True


def gt(left: str, right: str) -> bool:
    """Return True if ``left`` is strictly greater than ``right``."""
    return semantic_version.Version(left) > semantic_version.Version(right)


def lt(left: str, right: str) -> bool:
    """Return True if ``left`` is strictly lower than ``right``."""
    return semantic_version.Version(left) < semantic_version.Version(right)


def semverify(version: Any) -> str:
    """Normalize a possibly partial version into ``major.minor.patch``.

    Args:
        version: A valid semver string, or a non-negative integer (or string of ASCII
            digits) taken as the major version.

    Returns:
        str: Full semver string.

    Raises:
        InvalidCandidateVersion: For any other shape.
    """
    if isinstance(version, str):
        stripped = version.strip()
        if is_valid(stripped):
            return stripped
        if stripped.isascii() and stripped.isdigit():
            return f"{int(stripped)}.0.0"
    elif isinstance(version, int) and not isinstance(version, bool) and version >= 0:
        return f"{version}.0.0"
    raise InvalidCandidateVersion(version)


def prettify_version(version: Any) -> Any:
    """Render a semver string without trailing zero parts ("10.1.0" -> "10.1")."""
    if not isinstance(version, str):
        return version
    parsed = semantic_version.Version(version)
    parts = [parsed.major]
    if parsed.minor or parsed.patch:
        parts.append(parsed.minor)
    if parsed.patch:
        parts.append(parsed.patch)
    return ".".join(str(p) for p in parts)


def prettify_targets(targets: Mapping[str, Any]) -> Dict[str, Any]:
    """Prettify every present target version for display."""
    return {env: prettify_version(version) for env, version in targets.items()}
