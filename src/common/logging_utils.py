"""Centralized logging helpers.

Provides a single ``configure_logging`` entry point used by the CLI, a helper
to build structured ``extra`` payloads, and a cheap level check so callers can
skip building DEBUG payloads when they would be discarded.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

_CONTEXT_KEYS = ("event", "component", "action", "target", "outcome")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once.

    The level comes from ``level`` or the ENVGATE_LOG_LEVEL environment
    variable, falling back to INFO. Calling again only updates the level.
    """
    level_name = (level or os.environ.get(Constants.LOG_LEVEL_ENV) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    Known keys are always present (``None`` when not supplied) so formatters
    can reference them; ``None`` values of other keys are dropped.
    """
    ctx: Dict[str, Any] = {key: kwargs.pop(key, None) for key in _CONTEXT_KEYS}
    ctx.update({k: v for k, v in kwargs.items() if v is not None})
    return ctx


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)
