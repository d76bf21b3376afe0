"""Best Stories CLI application using Typer.

This module provides command-line access to the same best stories query
the API serves, plus a shortcut to run the API server.
"""

import asyncio
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from beststories.application.queries import GetBestStoriesQuery
from beststories.domain.shared import DomainException
from beststories.domain.stories import Story
from beststories.infrastructure.cache import TTLCache
from beststories.presentation.api.app import create_story_source
from beststories_config import configure_logging, get_settings

app = typer.Typer(
    name="beststories",
    help="Best Stories - ranked Hacker News best stories",
    no_args_is_help=True,
)
console = Console()


async def _fetch_top(count: int) -> list[Story]:
    settings = get_settings()
    story_source = create_story_source(settings)
    try:
        query = GetBestStoriesQuery.from_settings(
            settings=settings,
            story_source=story_source,
            cache=TTLCache(),
            semaphore=asyncio.Semaphore(settings.fetch_concurrency),
        )
        return await query.execute(count)
    finally:
        await story_source.close()


def _render(stories: list[Story]) -> Table:
    table = Table(title="Hacker News best stories")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("By", style="green")
    table.add_column("Comments", justify="right")
    table.add_column("Posted", style="dim")

    for rank, story in enumerate(stories, start=1):
        table.add_row(
            str(rank),
            str(story.score),
            story.title,
            story.posted_by,
            str(story.comment_count),
            story.time.strftime("%Y-%m-%d %H:%M"),
        )
    return table


@app.command("top")
def top(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Number of stories to show (default: settings)",
    ),
) -> None:
    """Fetch the best stories once and print the highest scoring ones."""
    configure_logging()
    if count is None:
        count = get_settings().default_count
    try:
        stories = asyncio.run(_fetch_top(count))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} [dim]({e.code.value})[/dim]")
        raise typer.Exit(code=1) from e

    if not stories:
        console.print("[yellow]No stories found.[/yellow]")
        return
    console.print(_render(stories))


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: settings)"),
    port: Optional[int] = typer.Option(None, help="Port (default: settings)"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "beststories.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
