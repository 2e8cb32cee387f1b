"""Rich renderers for the terminal client."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .model import IndexedFeature
from .util.text import ellipsize


def render_feature(feature: IndexedFeature) -> Panel:
    """Render a feature's chat message as a Rich panel."""
    lines: list[Text] = [Text(feature.text)]
    lines.append(Text(""))
    lines.append(Text(f"Usage: {feature.usage}", style="dim"))
    return Panel(Group(*lines), border_style="blue", title=Text(f"/{feature.key}"))


def render_inline_list(features: Sequence[IndexedFeature], query: str, width: int = 80) -> Panel:
    """Render matches the way an inline autocomplete list shows them."""
    rows: list[Text] = []
    for feature in features:
        usage_width = len(feature.usage) + 4
        label = ellipsize(feature.title, max(width - usage_width - 6, 10))
        row = Text(f"* {label}", style="bold white")
        row.append(f"  {feature.usage}", style="dim")
        rows.append(row)
    footer = Text(f"{len(features)} result(s)", style="dim")
    title = Text(f"Results for {query!r}")
    return Panel(Group(*rows, Text(""), footer), title=title, border_style="cyan")
