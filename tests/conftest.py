"""Shared fixtures for tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from caniusebot.dataset import parse_dataset
from caniusebot.index import build_index
from caniusebot.model import Dataset, FeatureIndex

SAMPLE_DATA: dict[str, Any] = {
    "agents": {
        "chrome": {
            "browser": "Chrome",
            "type": "desktop",
            "versions": [None, "4", "5", "6", "7"],
        },
        "firefox": {
            "browser": "Firefox",
            "type": "desktop",
            "versions": ["2", "3", "3.5"],
        },
        "ios_saf": {
            "browser": "Safari on iOS",
            "type": "mobile",
            "versions": ["3.2", "4.0-4.1", None],
        },
        "android": {
            "browser": "Android Browser",
            "type": "mobile",
            "versions": ["2.1", "4.4"],
        },
    },
    "statuses": {
        "rec": "W3C Recommendation",
        "cr": "W3C Candidate Recommendation",
        "wd": "W3C Working Draft",
    },
    "data": {
        "flexbox": {
            "title": "CSS Flexible Box Layout Module",
            "description": "Method of positioning elements in horizontal or vertical stacks. ",
            "keywords": "flex,flexbox,flex-direction",
            "status": "cr",
            "usage_perc_y": 97.123,
            "usage_perc_a": 1.0,
            "notes": "Most partial support refers to an older version of the specification.",
            "notes_by_num": {
                "1": "Only supports the old flexbox spec.",
                "2": "Requires the -webkit- prefix.",
            },
            "stats": {
                "chrome": {"4": "a x #1", "5": "a x #1", "6": "y x #2", "7": "y"},
                "firefox": {"2": "p", "3": "u", "3.5": "y"},
                "ios_saf": {"3.2": "a x #1", "4.0-4.1": "y"},
                "android": {},
            },
        },
        "css-grid": {
            "title": "CSS Grid Layout (level 1)",
            "description": "Method of using a grid concept to lay out content.",
            "keywords": "grid-template,display:grid",
            "status": "cr",
            "usage_perc_y": 96.5,
            "usage_perc_a": 0.4,
            "notes": "",
            "notes_by_num": {},
            "stats": {
                "chrome": {"4": "n", "5": "n", "6": "d", "7": "y"},
                "firefox": {"2": "n", "3": "n", "3.5": "n"},
                "ios_saf": {"3.2": "n", "4.0-4.1": "y"},
                "android": {"2.1": "n", "4.4": "n"},
            },
        },
        "flexbox-gap": {
            "title": "gap property for Flexbox",
            "description": "`gap` for flexbox containers to create gaps between items.",
            "keywords": "",
            "status": "wd",
            "usage_perc_y": 93.4,
            "usage_perc_a": 0,
            "stats": {
                "chrome": {"4": "n", "5": "n", "6": "n", "7": "y"},
            },
        },
    },
}


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def sample_dataset(sample_payload: dict[str, Any]) -> Dataset:
    return parse_dataset(sample_payload, "sample")


@pytest.fixture
def sample_index(sample_dataset: Dataset) -> FeatureIndex:
    return build_index(sample_dataset)
