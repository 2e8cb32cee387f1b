"""Console script for caniusebot."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__ as _version
from .config import Settings
from .exceptions import CaniuseBotError
from .index import get_shared_index
from .presentation import answer_inline_query, lookup_message
from .render_terminal import render_feature, render_inline_list
from .search import search_features
from .util.log import debug_enabled
from .util.text import normalize


def _configure_logging() -> None:
    if debug_enabled():
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("query", nargs=-1, required=True, type=click.STRING)
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="CANIUSEBOT_DATA",
    help="Local caniuse data.json to index instead of downloading it.",
)
@click.option("--url", "data_url", type=click.STRING, help="URL to download data.json from.")
@click.option("--inline", is_flag=True, help="List matches like inline autocomplete.")
@click.option("--limit", type=click.IntRange(min=1), help="Maximum results for --inline.")
@click.option("--json", "as_json", is_flag=True, help="Print the chat API payload as JSON.")
@click.version_option(_version, "-v", "--version")
def main(
    query: tuple[str, ...],
    data_path: Path | None,
    data_url: str | None,
    inline: bool,
    limit: int | None,
    as_json: bool,
) -> None:
    """
    Look up browser support for web platform features.

    \b
    Example usages:
      caniusebot flexbox
      caniusebot --inline css grid
      caniusebot --data data.json --json flex gap
    """
    _configure_logging()
    raw_query = " ".join(query)

    try:
        settings = Settings.from_env()
        overrides: dict[str, object] = {}
        if data_path is not None:
            overrides["data_path"] = data_path
        if data_url:
            overrides["data_url"] = data_url
        if limit is not None:
            overrides["inline_result_limit"] = limit
        settings = dataclasses.replace(settings, **overrides)
        index = get_shared_index(settings)
    except CaniuseBotError as exc:
        raise click.ClickException(str(exc)) from exc

    query = normalize(raw_query)
    if len(query) < settings.min_query_length:
        raise click.ClickException(
            f"Query must be at least {settings.min_query_length} characters "
            "after dropping spaces, hyphens and dots."
        )
    matches = search_features(query, index)
    if not matches:
        raise click.ClickException(f"No matches found for {raw_query!r}.")

    if as_json:
        payload = (
            answer_inline_query(raw_query, index, settings)
            if inline
            else lookup_message(raw_query, index)
        )
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    console = Console()
    if inline:
        shown = matches[: settings.inline_result_limit]
        console.print(render_inline_list(shown, raw_query, width=console.width))
    else:
        console.print(render_feature(matches[0]))
