"""One-time indexing of the dataset into pre-rendered, searchable features."""

from __future__ import annotations

import logging
import threading

from .config import Settings
from .constants import FEATURE_URL_TEMPLATE
from .dataset import fetch_dataset, load_dataset
from .model import Dataset, FeatureIndex, IndexedFeature, RawFeature
from .render import render_feature_text, render_footnotes, render_support_row, render_usage
from .util.log import debug_log
from .util.text import normalize

LOGGER = logging.getLogger(__name__)

_SHARED_INDEX: FeatureIndex | None = None
_SHARED_LOCK = threading.Lock()


def feature_url(key: str) -> str:
    return FEATURE_URL_TEMPLATE.format(key=key)


def index_feature(feature: RawFeature, dataset: Dataset) -> IndexedFeature:
    """Derive the search fields and display text of a single feature."""
    url = feature_url(feature.key)
    status_label = dataset.statuses.get(feature.status, feature.status)
    footnotes = render_footnotes(feature.notes_by_num)

    desktop: list[str] = []
    mobile: list[str] = []
    for agent_id, agent in dataset.agents.items():
        row = render_support_row(feature.stats.get(agent_id), agent)
        if not row:
            continue
        if agent.type == "desktop":
            desktop.append(row)
        elif agent.type == "mobile":
            mobile.append(row)

    return IndexedFeature(
        raw=feature,
        key=feature.key,
        url=url,
        n_title=normalize(feature.title),
        n_description=normalize(feature.description),
        n_keywords=normalize(feature.keywords),
        usage=render_usage(feature.usage_perc_y, feature.usage_perc_a),
        footnotes=footnotes,
        status_label=status_label,
        desktop_support=tuple(desktop),
        mobile_support=tuple(mobile),
        text=render_feature_text(
            title=feature.title,
            url=url,
            status_label=status_label,
            description=feature.description,
            desktop_support=desktop,
            mobile_support=mobile,
            footnotes=footnotes,
            notes=feature.notes,
        ),
    )


def build_index(dataset: Dataset) -> FeatureIndex:
    """Index every feature of ``dataset``; the result is never mutated."""
    features = tuple(index_feature(feature, dataset) for feature in dataset.features.values())
    debug_log(LOGGER, "indexed %d features", len(features))
    return FeatureIndex(features)


def get_shared_index(settings: Settings | None = None) -> FeatureIndex:
    """Return the process-wide index, building it on first use.

    The dataset comes from ``settings.data_path`` when set, otherwise it is
    downloaded from ``settings.data_url``. Concurrent first callers block until
    the single build finishes.
    """
    global _SHARED_INDEX
    index = _SHARED_INDEX
    if index is not None:
        return index
    with _SHARED_LOCK:
        if _SHARED_INDEX is None:
            settings = settings or Settings.from_env()
            if settings.data_path is not None:
                dataset = load_dataset(settings.data_path)
            else:
                dataset = fetch_dataset(settings.data_url, timeout=settings.timeout)
            _SHARED_INDEX = build_index(dataset)
        return _SHARED_INDEX
