"""Data models for the compatibility dataset and its search index."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class BrowserAgent:
    key: str
    browser: str
    type: str
    versions: tuple[str, ...]


@dataclass(frozen=True)
class RawFeature:
    key: str
    title: str
    status: str
    description: str = ""
    keywords: str = ""
    usage_perc_y: float = 0.0
    usage_perc_a: float = 0.0
    notes: str = ""
    notes_by_num: Mapping[str, str] = field(default_factory=dict)
    stats: Mapping[str, Mapping[str, str]] = field(default_factory=dict)


@dataclass(frozen=True)
class Dataset:
    features: Mapping[str, RawFeature]
    agents: Mapping[str, BrowserAgent]
    statuses: Mapping[str, str]


@dataclass(frozen=True)
class IndexedFeature:
    """A feature with its search fields and chat text rendered up front."""

    raw: RawFeature
    key: str
    url: str
    n_title: str
    n_description: str
    n_keywords: str
    usage: str
    footnotes: str
    status_label: str
    desktop_support: tuple[str, ...]
    mobile_support: tuple[str, ...]
    text: str

    @property
    def title(self) -> str:
        return self.raw.title


class FeatureIndex:
    """Read-only collection of indexed features, in dataset order."""

    __slots__ = ("_by_key", "_features")

    def __init__(self, features: tuple[IndexedFeature, ...]) -> None:
        self._features = features
        self._by_key = MappingProxyType({feature.key: feature for feature in features})

    def __iter__(self) -> Iterator[IndexedFeature]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    @property
    def features(self) -> tuple[IndexedFeature, ...]:
        return self._features

    @property
    def by_key(self) -> Mapping[str, IndexedFeature]:
        return self._by_key

    def get(self, key: str) -> IndexedFeature | None:
        return self._by_key.get(key)
