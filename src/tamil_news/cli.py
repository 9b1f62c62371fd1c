"""CLI interface for Tamil News using Typer."""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from . import __version__
from .core.controller import LoadState
from .core.models import EnrichedArticle
from .main import TamilNewsApp


app = typer.Typer(
    name="tamil-news",
    help="Tamil news headlines from Google News",
    add_completion=False,
)

HEADER = "📢 தமிழ் செய்திகள்"


def _render_article(position: int, article: EnrichedArticle) -> str:
    """Format one article as a list entry."""
    return (
        f"{position}. [{article.publisher}] {article.title}\n"
        f"   {article.pub_date} | {article.link}"
    )


@app.command()
def run(
    limit: Annotated[Optional[int], typer.Option("--limit", "-n", min=1, help="Show at most N articles")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print articles as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show detailed output")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Fetch the news feed and list the articles."""
    try:
        app_instance = TamilNewsApp(config_file)
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        state = app_instance.load(verbose=verbose)
        articles = app_instance.articles
        if limit:
            articles = articles[:limit]

        if as_json:
            typer.echo(json.dumps([a.to_dict() for a in articles], ensure_ascii=False, indent=2))
        elif not articles:
            typer.echo("No news available.")
        else:
            typer.echo(HEADER)
            typer.echo("")
            for position, article in enumerate(articles, start=1):
                typer.echo(_render_article(position, article))
    finally:
        app_instance.close()

    raise typer.Exit(1 if state is LoadState.FAILED else 0)


@app.command(name="open")
def open_article(
    position: Annotated[int, typer.Argument(min=1, help="Position of the article in the list (from 1)")],
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show the link without opening it")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Open an article in the default browser."""
    try:
        app_instance = TamilNewsApp(config_file)
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        if app_instance.load() is LoadState.FAILED:
            typer.echo("✗ Error: could not load the news feed", err=True)
            raise typer.Exit(1)

        opened = app_instance.open_article(position, dry_run=dry_run)
    finally:
        app_instance.close()

    if not opened:
        typer.echo(f"✗ Could not open article {position}", err=True)
        raise typer.Exit(1)

    article = app_instance.articles[position - 1]
    typer.echo(f"✓ {article.link}")


@app.command()
def config(
    show: Annotated[bool, typer.Option("--show", help="Show current config")] = False,
    example: Annotated[bool, typer.Option("--example", help="Generate example config")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Manage Tamil News configuration."""
    if example:
        from .config import create_example_config
        typer.echo(create_example_config())
    elif show:
        try:
            from .config import dump_config, load_config
            typer.echo(dump_config(load_config(config_file)))
        except Exception as e:
            typer.echo(f"✗ Error loading config: {e}", err=True)
            raise typer.Exit(1)
    else:
        typer.echo("Use --show to view config or --example to generate example")


@app.command()
def info(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Show version and configuration information."""
    typer.echo(f"Tamil News v{__version__}")

    try:
        app_instance = TamilNewsApp(config_file)
        info_data = app_instance.get_info()
        app_instance.close()
    except Exception as e:
        typer.echo(f"Warning: Could not load application info: {e}")
        return

    typer.echo(f"  Config file: {info_data.get('config_file', 'N/A')}")
    typer.echo(f"  Log level: {info_data.get('log_level', 'N/A')}")
    typer.echo(f"  Feed URL: {info_data.get('feed_url', 'N/A')}")
    typer.echo(f"  Known publishers: {info_data.get('known_publishers', 0)}")


if __name__ == "__main__":
    app()
