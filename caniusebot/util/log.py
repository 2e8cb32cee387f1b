"""Debug logging helpers."""

from __future__ import annotations

import logging
import os

DEBUG_ENV_VAR = "CANIUSEBOT_DEBUG"


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip() == "1"


def debug_log(logger: logging.Logger, message: str, *args: object) -> None:
    """Emit a debug record through ``logger`` in debug mode only."""
    if debug_enabled():
        logger.debug(message, *args)
