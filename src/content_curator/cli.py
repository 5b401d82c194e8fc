"""CLI commands for Content Curator using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from content_curator.config import get_settings
from content_curator.core import (
    build_home_page,
    build_section_page,
    classify,
    determine_primary_category,
    select_carousel_items,
    select_home_columns,
    select_related,
)
from content_curator.models import CarouselItem, CategoryColumn, CategoryLabel, Post
from content_curator.services.content_store import create_content_store
from content_curator.utils.logging import setup_logging


app = typer.Typer(
    name="content-curator",
    help="Select which editorial posts each page surface shows",
    no_args_is_help=True,
)

console = Console()

def _posts_option():
    return typer.Option(None, "--posts", "-p", help="Posts JSON file")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure logging and check settings before any command."""
    settings = get_settings()
    setup_logging(level=logging.DEBUG if verbose else settings.log_level.upper())
    try:
        settings.validate_limits()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _load_posts(posts_file: Optional[Path]) -> list[Post]:
    """Load posts from the given file or the configured one."""
    path = posts_file or get_settings().posts_file
    try:
        return create_content_store(path).load_posts()
    except (FileNotFoundError, ValueError) as e:
        console.print("[red]Could not load posts[/red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(1)


def _find_post(posts: list[Post], slug: str) -> Post:
    for post in posts:
        if post.slug == slug:
            return post
    console.print(f"[red]Post '{slug}' not found[/red]")
    raise typer.Exit(1)


def _labels_text(post: Post) -> str:
    labels = sorted(label.value for label in classify(post))
    return ", ".join(labels) if labels else "[dim]-[/dim]"


# --- Display helpers ---


def _display_carousel(items: list[CarouselItem]) -> None:
    if not items:
        console.print("[yellow]No posts with images; showcase hidden[/yellow]")
        return

    table = Table(title="Showcase")
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="green")
    table.add_column("Image")
    table.add_column("Slug", style="cyan")
    for i, item in enumerate(items, 1):
        table.add_row(str(i), item.title, item.image, item.slug)
    console.print(table)


def _display_column(column: CategoryColumn) -> None:
    if column.is_empty:
        console.print(f"[dim]{column.title}: no posts, column hidden[/dim]")
        return

    style = column.color or "bold"
    table = Table(title=f"[{style}]{column.title}[/]")
    table.add_column("Date", style="dim")
    table.add_column("Title", style="green")
    table.add_column("First tag")
    for post in column.posts:
        table.add_row(
            post.date.strftime("%Y-%m-%d"),
            post.title,
            post.tags[0] if post.tags else "",
        )
    console.print(table)
    if column.has_more:
        console.print(
            f"  [dim]View more {column.title} ({column.total_matches} posts) "
            f"→ /tags/{column.label.slug}[/dim]"
        )


def _display_post_list(title: str, posts: list[Post]) -> None:
    table = Table(title=title)
    table.add_column("Date", style="dim")
    table.add_column("Title", style="green")
    table.add_column("Slug", style="cyan")
    table.add_column("Labels")
    for post in posts:
        table.add_row(post.date.strftime("%Y-%m-%d"), post.title, post.slug, _labels_text(post))
    console.print(table)


# --- Commands ---


@app.command()
def carousel(
    posts_file: Optional[Path] = _posts_option(),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum slides"),
):
    """Show the posts selected for the rotating showcase."""
    settings = get_settings()
    posts = _load_posts(posts_file)
    _display_carousel(select_carousel_items(posts, limit=limit or settings.carousel_limit))


@app.command()
def columns(
    posts_file: Optional[Path] = _posts_option(),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Posts per column"),
):
    """Show the Hollywood, World and Exclusive columns."""
    settings = get_settings()
    posts = _load_posts(posts_file)
    for column in select_home_columns(posts, column_size=size or settings.column_size):
        _display_column(column)


@app.command()
def related(
    slug: str = typer.Argument(..., help="Slug of the post being viewed"),
    posts_file: Optional[Path] = _posts_option(),
):
    """Show the related posts panel for a post."""
    settings = get_settings()
    posts = _load_posts(posts_file)
    current = _find_post(posts, slug)

    result = select_related(
        current,
        posts,
        limit=settings.related_limit,
        fallback_limit=settings.related_fallback_limit,
    )

    console.print(f"[bold]Category:[/bold] {result.category.value}")
    if result.is_empty:
        console.print("[yellow]No other posts; panel hidden[/yellow]")
        return
    if result.used_fallback:
        console.print(f"[yellow]No other {result.category.value} posts, showing recent posts[/yellow]")
    _display_post_list("You may have missed", result.posts)


@app.command("classify")
def classify_command(
    slug: Optional[str] = typer.Argument(None, help="Only classify this post"),
    posts_file: Optional[Path] = _posts_option(),
):
    """Show the labels and primary category of each post."""
    posts = _load_posts(posts_file)
    if slug:
        posts = [_find_post(posts, slug)]

    table = Table(title="Post Labels")
    table.add_column("Slug", style="cyan")
    table.add_column("Tags")
    table.add_column("Labels", style="green")
    table.add_column("Primary", style="yellow")
    for post in posts:
        table.add_row(
            post.slug,
            ", ".join(post.tags),
            _labels_text(post),
            determine_primary_category(post.tags).value,
        )
    console.print(table)


def _display_page(page, latest_limit: int) -> None:
    _display_carousel(page.carousel)
    for column in page.columns:
        _display_column(column)
    if not page.latest:
        console.print("No posts found.")
        return
    _display_post_list("Latest", page.latest)
    if page.has_more_latest:
        console.print(f"  [dim]Showing {latest_limit} most recent. All Posts → /blog[/dim]")


@app.command()
def home(posts_file: Optional[Path] = _posts_option()):
    """Show everything the home page renders."""
    settings = get_settings()
    posts = _load_posts(posts_file)
    page = build_home_page(
        posts,
        carousel_limit=settings.carousel_limit,
        column_size=settings.column_size,
        latest_limit=settings.latest_limit,
    )
    _display_page(page, settings.latest_limit)


@app.command()
def section(
    name: str = typer.Argument(..., help="Section name: celebverse or gossips"),
    posts_file: Optional[Path] = _posts_option(),
):
    """Show a section page built from that section's posts."""
    settings = get_settings()
    try:
        label = CategoryLabel.from_name(name)
        posts = _load_posts(posts_file)
        page = build_section_page(
            posts,
            label,
            carousel_limit=settings.carousel_limit,
            column_size=settings.column_size,
            latest_limit=settings.latest_limit,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{label.value}[/bold]")
    _display_page(page, settings.latest_limit)


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
