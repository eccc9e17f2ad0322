"""Command line front end.

``docsearch build-index`` turns an introspection response into
search-index.json; ``docsearch search`` feeds each query through a
SearchSession, the same path a search box takes on every keystroke.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

import click

from docsearch import __version__
from docsearch.config import Settings
from docsearch.errors import DocSearchError, IndexFetchError
from docsearch.fetcher import IndexFetcher, build_http_client
from docsearch.index_builder import build_index_file
from docsearch.index_store import IndexStore
from docsearch.logging_config import configure_logging
from docsearch.models.index import IndexEntry
from docsearch.ranker import Ranker
from docsearch.render import entry_label, entry_links
from docsearch.session import DisplayMode, SearchSession


class TerminalView:
    """ResultView that prints each result as a label and its target page."""

    def __init__(self) -> None:
        self.mode = DisplayMode.MAIN

    def set_mode(self, mode: DisplayMode) -> None:
        self.mode = mode

    def clear(self) -> None:
        pass

    def show(self, results: Sequence[IndexEntry]) -> None:
        if not results:
            click.echo("  (no results)")
        for entry in results:
            target = entry_links(entry)[-1].href
            click.echo(f"  {entry_label(entry):<40} {entry.kind:<12} {target}")

    def show_error(self, error: IndexFetchError) -> None:
        click.echo(f"Search unavailable: {error.message}", err=True)


@click.group()
@click.version_option(__version__, prog_name="docsearch")
@click.pass_context
def main(ctx: click.Context) -> None:
    """Fuzzy search over generated documentation."""
    settings = Settings()
    configure_logging(settings.logging)
    ctx.obj = settings


@main.command("build-index")
@click.argument("schema", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("search-index.json"),
    show_default=True,
    help="Where to write the index.",
)
def build_index_command(schema: Path, output: Path) -> None:
    """Build a search index from a GraphQL introspection response."""
    try:
        count = build_index_file(schema, output)
    except DocSearchError as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Wrote {count} entries to {output}")


@main.command("search")
@click.argument("queries", nargs=-1, required=True)
@click.option("--index", "source", help="Index URL or path (defaults to configured source).")
@click.option("--limit", type=click.IntRange(min=1), help="Maximum results per query.")
@click.pass_obj
def search_command(
    settings: Settings, queries: tuple[str, ...], source: str | None, limit: int | None
) -> None:
    """Rank the index against each QUERY."""
    try:
        asyncio.run(
            _run_searches(
                settings,
                queries,
                source or settings.index.source,
                limit or settings.search.max_results,
            )
        )
    except IndexFetchError as exc:
        # TerminalView.show_error already reported it.
        raise click.exceptions.Exit(1) from exc


async def _run_searches(
    settings: Settings, queries: Sequence[str], source: str, limit: int
) -> None:
    async with build_http_client(settings.index) as client:
        store = IndexStore.from_source(IndexFetcher(client), source)
        session = SearchSession(store, Ranker(limit=limit), TerminalView())
        for query in queries:
            click.echo(f"{query.strip() or '(blank)'}:")
            await session.on_input(query)
