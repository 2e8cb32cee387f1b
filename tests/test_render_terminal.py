from __future__ import annotations

from rich.console import Console

from caniusebot.model import FeatureIndex
from caniusebot.render_terminal import render_feature, render_inline_list


def _export(renderable: object, width: int = 100) -> str:
    console = Console(record=True, width=width)
    console.print(renderable)
    return console.export_text()


def test_render_feature_panel(sample_index: FeatureIndex) -> None:
    feature = sample_index.get("flexbox")
    assert feature is not None
    rendered = _export(render_feature(feature), width=140)
    assert "/flexbox" in rendered
    assert "*Chrome*  ◒ᵖ 4+¹   ✔ᵖ 6²   ✔ 7" in rendered
    assert "Usage: ✔ 97.12% ◒ 1.00%" in rendered


def test_render_inline_list_ellipsizes_titles(sample_index: FeatureIndex) -> None:
    rendered = _export(render_inline_list(sample_index.features, "[flex]", width=40), width=40)
    assert "Results for '[flex]'" in rendered
    assert "CSS Flexible…" in rendered
    assert "3 result(s)" in rendered
