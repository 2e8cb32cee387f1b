"""Constants used across caniusebot."""

from __future__ import annotations

from typing import Final

FEATURE_URL_TEMPLATE: Final[str] = "http://caniuse.com/#feat={key}"
DEFAULT_DATA_URL: Final[str] = "https://raw.githubusercontent.com/Fyrd/caniuse/main/data.json"

SUPERSCRIPT_DIGITS: Final[str] = "⁰¹²³⁴⁵⁶⁷⁸⁹"
PREFIX_MARK: Final[str] = "ᵖ"

ICONS: Final[dict[str, str]] = {
    "y": "✔",
    "n": "✘",
    "a": "◒",
    "i": "ⓘ",
}

# prefixed-off, unknown and disabled all display as "not supported"
CODE_COLLAPSE: Final[dict[str, str]] = {
    "p": "n",
    "u": "n",
    "d": "n",
}

RUN_SEPARATOR: Final[str] = "   "

COMMAND_NAME: Final[str] = "caniuse"
PARSE_MODE: Final[str] = "Markdown"

DEFAULT_MIN_QUERY_LENGTH: Final[int] = 3
DEFAULT_INLINE_RESULT_LIMIT: Final[int] = 50
PRODUCTION_CACHE_SECONDS: Final[int] = 3600
DEVELOPMENT_CACHE_SECONDS: Final[int] = 20

DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0
