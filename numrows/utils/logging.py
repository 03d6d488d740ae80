"""Root logger setup for the table app, with environment overrides.

``NUMROWS_LOG_LEVEL`` names an explicit level (``"debug"``, ``"WARNING"`` or a
number). When it is unset, a truthy ``NUMROWS_DEBUG`` forces DEBUG. Either one
wins over the ``debug_logging`` setting.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "NUMROWS_LOG_LEVEL"
DEBUG_ENV = "NUMROWS_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = {"1", "true", "yes", "on"}


def _parse_level(text: Optional[str]) -> Optional[int]:
    """Return the numeric level for ``text`` or None when it names no level."""
    token = (text or "").strip()
    if not token:
        return None
    if token.isdigit():
        # isdigit() also accepts characters such as "²" that int() rejects.
        try:
            return int(token)
        except ValueError:
            return None
    level = logging.getLevelName(token.upper())
    return level if isinstance(level, int) else None


def _env_level() -> Optional[int]:
    env = os.environ
    explicit = env.get(LOG_LEVEL_ENV)
    if explicit and explicit.strip():
        return _parse_level(explicit)
    if (env.get(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Install the compact root handler once and return the effective level.

    An unparseable ``default_level`` falls back to INFO; an unparseable
    ``NUMROWS_LOG_LEVEL`` is ignored.
    """
    if isinstance(default_level, str):
        fallback = _parse_level(default_level)
        if fallback is None:
            fallback = logging.INFO
    else:
        fallback = int(default_level)

    override = _env_level()
    effective = fallback if override is None else override

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_preferences(debug_enabled: bool) -> int:
    override = _env_level()
    if override is not None:
        level = override
    else:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug() -> bool:
    """True when the environment pins the root logger at DEBUG or lower."""
    override = _env_level()
    return override is not None and override <= logging.DEBUG
