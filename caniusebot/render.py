"""Chat text rendering for support rows, usage and feature messages."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .constants import CODE_COLLAPSE, ICONS, PREFIX_MARK, RUN_SEPARATOR
from .model import BrowserAgent
from .util.text import footnote_refs, superscript

_COLLAPSE_TABLE = str.maketrans(CODE_COLLAPSE)


@dataclass
class _Run:
    support: str
    version: str
    plus: bool = False


def collapse_code(code: str) -> str:
    """Fold p/u/d variants into n, keeping flags and footnote refs."""
    return code.translate(_COLLAPSE_TABLE)


def _collect_runs(stat: Mapping[str, str], versions: Sequence[str]) -> list[_Run]:
    runs: list[_Run] = []
    for version in versions:
        code = stat.get(version)
        if not code or not isinstance(code, str):
            continue
        support = collapse_code(code)
        if runs and runs[-1].support == support:
            runs[-1].plus = True
        else:
            runs.append(_Run(support=support, version=version))
    return runs


def _format_run(run: _Run) -> str:
    piece = ICONS.get(run.support[0], "")
    if "x" in run.support:
        piece += PREFIX_MARK
    piece += f" {run.version}"
    if run.plus:
        piece += "+"
    piece += "".join(superscript(ref) for ref in footnote_refs(run.support))
    return piece


def render_support_row(stat: Mapping[str, str] | None, agent: BrowserAgent) -> str:
    """Render one browser's support history, or '' when it has no data."""
    runs = _collect_runs(stat or {}, agent.versions)
    if not runs:
        return ""
    return f"*{agent.browser}*  " + RUN_SEPARATOR.join(_format_run(run) for run in runs)


def render_usage(usage_y: object, usage_a: object) -> str:
    def _percent(value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.0
        return float(value)

    return f"{ICONS['y']} {_percent(usage_y):.2f}% {ICONS['a']} {_percent(usage_a):.2f}%"


def render_footnotes(notes_by_num: Mapping[str, str]) -> str:
    """Render numbered notes one per line, ordered by number."""

    def _note_sort_key(item: tuple[str, str]) -> tuple[int, str]:
        key = item[0]
        if key.isdigit():
            return (0, f"{int(key):08d}")
        return (1, key)

    lines = [
        f"{superscript(number)} {note}"
        for number, note in sorted(notes_by_num.items(), key=_note_sort_key)
        if note
    ]
    return "\n".join(lines)


def render_feature_text(
    *,
    title: str,
    url: str,
    status_label: str,
    description: str,
    desktop_support: Sequence[str],
    mobile_support: Sequence[str],
    footnotes: str,
    notes: str,
) -> str:
    """Assemble the Markdown message sent for a feature."""
    text = f"[{title}]({url}) [[{status_label}]]"
    if description:
        text += f"\n{description.strip()}"
    text += "\n\n" + "\n".join(desktop_support)
    text += "\n\n" + "\n".join(mobile_support)
    if footnotes:
        text += f"\n\n{footnotes}"
    if notes:
        text += f"\n\n{ICONS['i']} {notes}"
    return text
