"""Substring search over indexed features."""

from __future__ import annotations

from collections.abc import Iterable

from .model import IndexedFeature


def search_features(query: str, features: Iterable[IndexedFeature]) -> list[IndexedFeature]:
    """Return features whose title, description or keywords contain ``query``.

    ``query`` must already be normalized. Title matches come first, then
    description matches, then keyword matches; each group is ordered by where
    the query first occurs in the matched field. A feature lands in the first
    group it matches only.
    """
    if not isinstance(query, str):
        query = ""

    in_title: list[tuple[int, IndexedFeature]] = []
    in_description: list[tuple[int, IndexedFeature]] = []
    in_keywords: list[tuple[int, IndexedFeature]] = []

    for feature in features:
        position = feature.n_title.find(query)
        if position > -1:
            in_title.append((position, feature))
            continue
        position = feature.n_description.find(query)
        if position > -1:
            in_description.append((position, feature))
            continue
        position = feature.n_keywords.find(query)
        if position > -1:
            in_keywords.append((position, feature))

    output: list[IndexedFeature] = []
    for bucket in (in_title, in_description, in_keywords):
        bucket.sort(key=lambda item: item[0])
        output.extend(feature for _position, feature in bucket)
    return output
