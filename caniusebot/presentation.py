"""Chat payloads for inline autocomplete and the /caniuse command.

These are plain dicts in the Bot API shape. Sending them is left to whichever
transport hosts the bot.
"""

from __future__ import annotations

from collections.abc import Iterable
import re
from typing import Any

from .config import Settings
from .constants import COMMAND_NAME, PARSE_MODE
from .model import FeatureIndex, IndexedFeature
from .search import search_features
from .util.text import normalize

_COMMAND_RE = re.compile(rf"^/{COMMAND_NAME}(?:@\w+)?\s+(?P<query>.+)$", re.DOTALL)


def inline_article(feature: IndexedFeature) -> dict[str, Any]:
    return {
        "id": feature.key,
        "type": "article",
        "title": feature.title,
        "url": feature.url,
        "parse_mode": PARSE_MODE,
        "message_text": feature.text,
        "description": feature.usage,
        "disable_web_page_preview": True,
    }


def inline_results(features: Iterable[IndexedFeature], limit: int) -> list[dict[str, Any]]:
    """Map up to ``limit`` features to inline article results."""
    output: list[dict[str, Any]] = []
    for feature in features:
        if len(output) >= limit:
            break
        output.append(inline_article(feature))
    return output


def answer_inline_query(
    raw_query: object, index: FeatureIndex, settings: Settings | None = None
) -> dict[str, Any] | None:
    """Build an inline answer, or None when the query is too short to search."""
    settings = settings or Settings()
    query = normalize(raw_query)
    if len(query) < settings.min_query_length:
        return None
    matches = search_features(query, index)
    return {
        "results": inline_results(matches, settings.inline_result_limit),
        "cache_time": settings.inline_cache_time,
    }


def parse_command(text: object) -> str | None:
    """Return the argument of a ``/caniuse <query>`` message."""
    if not isinstance(text, str):
        return None
    match = _COMMAND_RE.match(text.strip())
    if match is None:
        return None
    return match.group("query").strip() or None


def message_payload(feature: IndexedFeature) -> dict[str, Any]:
    return {
        "text": feature.text,
        "parse_mode": PARSE_MODE,
        "disable_web_page_preview": True,
    }


def lookup_message(raw_query: object, index: FeatureIndex) -> dict[str, Any] | None:
    """Message payload for the best match of ``raw_query``, if any."""
    query = normalize(raw_query)
    if not query:
        return None
    matches = search_features(query, index)
    if not matches:
        return None
    return message_payload(matches[0])
