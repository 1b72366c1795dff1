"""Split user include/exclude names into plugin and built-in subsets."""

import re
from typing import Iterable

from constants import Constants

from .models import Classified

_BUILT_IN_RE = re.compile(Constants.BUILT_IN_NAME_PATTERN)


def is_built_in_name(name: str) -> bool:
    """Return True for polyfill-class names such as "es6.promise" or "web.timers"."""
    return bool(_BUILT_IN_RE.match(name))


def transform_includes_and_excludes(names: Iterable[str]) -> Classified:
    """Partition ``names`` by naming convention.

    ``all`` keeps the original collection; every name lands in exactly one of
    ``plugins`` or ``built_ins``.
    """
    names = list(names)
    result = Classified(all=names)
    for name in names:
        if is_built_in_name(name):
            result.built_ins.add(name)
        else:
            result.plugins.add(name)
    return result
