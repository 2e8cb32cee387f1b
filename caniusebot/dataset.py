"""Build a read-only Dataset from the caniuse data.json structure."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import cast

from .constants import DEFAULT_TIMEOUT_SECONDS
from .exceptions import DatasetError
from .http import fetch_json
from .model import BrowserAgent, Dataset, RawFeature
from .util.log import debug_log

LOGGER = logging.getLogger(__name__)


def _str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _parse_agent(key: str, data: dict[str, object]) -> BrowserAgent:
    raw_versions = data.get("versions")
    versions: tuple[str, ...] = ()
    if isinstance(raw_versions, list):
        # data.json pads the version list with nulls
        versions = tuple(item for item in raw_versions if isinstance(item, str) and item)
    return BrowserAgent(
        key=key,
        browser=_str(data.get("browser")) or key,
        type=_str(data.get("type")),
        versions=versions,
    )


def _parse_stats(value: object) -> dict[str, MappingProxyType[str, str]]:
    if not isinstance(value, dict):
        return {}
    stats: dict[str, MappingProxyType[str, str]] = {}
    for browser_id, per_version in value.items():
        if not isinstance(browser_id, str) or not isinstance(per_version, dict):
            continue
        stats[browser_id] = MappingProxyType(
            {
                str(version): code
                for version, code in per_version.items()
                if isinstance(code, str) and code
            }
        )
    return stats


def _parse_notes_by_num(value: object) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {
        str(number).strip(): note.strip()
        for number, note in value.items()
        if isinstance(note, str) and note.strip() and str(number).strip()
    }


def _parse_feature(key: str, data: dict[str, object]) -> RawFeature:
    return RawFeature(
        key=key,
        title=_str(data.get("title")),
        status=_str(data.get("status")),
        description=_str(data.get("description")),
        keywords=_str(data.get("keywords")),
        usage_perc_y=_number(data.get("usage_perc_y")),
        usage_perc_a=_number(data.get("usage_perc_a")),
        notes=_str(data.get("notes")),
        notes_by_num=MappingProxyType(_parse_notes_by_num(data.get("notes_by_num"))),
        stats=MappingProxyType(_parse_stats(data.get("stats"))),
    )


def _section(payload: dict[str, object], name: str, source: str) -> dict[str, object]:
    section = payload.get(name)
    if not isinstance(section, dict):
        raise DatasetError(source, f"missing '{name}' object")
    return cast(dict[str, object], section)


def parse_dataset(payload: object, source: str = "<memory>") -> Dataset:
    """Convert decoded data.json content into a Dataset.

    Only the top-level layout is strict. Individual agents or features that are
    not objects are skipped, and bad fields inside them degrade to empty values.
    """
    if not isinstance(payload, dict):
        raise DatasetError(source, "top-level value is not an object")
    payload = cast(dict[str, object], payload)

    agents: dict[str, BrowserAgent] = {}
    for key, data in _section(payload, "agents", source).items():
        if not isinstance(data, dict):
            debug_log(LOGGER, "skipping malformed agent %r", key)
            continue
        agents[key] = _parse_agent(key, cast(dict[str, object], data))

    statuses = {
        code: label
        for code, label in _section(payload, "statuses", source).items()
        if isinstance(label, str)
    }

    features: dict[str, RawFeature] = {}
    for key, data in _section(payload, "data", source).items():
        if not isinstance(data, dict):
            debug_log(LOGGER, "skipping malformed feature %r", key)
            continue
        features[key] = _parse_feature(key, cast(dict[str, object], data))

    debug_log(
        LOGGER,
        "parsed dataset from %s: %d features, %d agents",
        source,
        len(features),
        len(agents),
    )
    return Dataset(
        features=MappingProxyType(features),
        agents=MappingProxyType(agents),
        statuses=MappingProxyType(statuses),
    )


def load_dataset(path: Path | str) -> Dataset:
    """Read and parse a local data.json file."""
    source = str(path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(source, exc.strerror or exc.__class__.__name__) from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(source, f"invalid JSON ({exc.msg})") from exc
    return parse_dataset(payload, source)


def fetch_dataset(url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Dataset:
    """Download and parse data.json from ``url``."""
    return parse_dataset(fetch_json(url, timeout=timeout), url)
