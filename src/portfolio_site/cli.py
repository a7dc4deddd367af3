"""CLI commands for the portfolio site using Typer."""

import asyncio
import logging
import webbrowser
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from portfolio_site.config import get_settings
from portfolio_site.core.catalog import ContentCatalog
from portfolio_site.core.contact import submit_contact
from portfolio_site.core.filters import FilterController
from portfolio_site.core.theme import JsonFileStorage, ThemeManager
from portfolio_site.core.toc import extract_table_of_contents, toc_indent
from portfolio_site.models.filter_state import ALL_CATEGORIES
from portfolio_site.models.page import ContactForm, Theme
from portfolio_site.output.json_writer import create_json_writer
from portfolio_site.services.content_loader import (
    ContentError,
    load_blog_catalog,
    load_project_catalog,
    load_resume,
)
from portfolio_site.utils.logging import setup_logging


app = typer.Typer(
    name="portfolio-site",
    help="Browse and export portfolio and blog content",
    no_args_is_help=True,
)

console = Console()


class Listing(str, Enum):
    """Which listing page to act on."""
    projects = "projects"
    blog = "blog"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Portfolio site content tools."""
    settings = get_settings()
    setup_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=settings.logs_dir / "portfolio-site.log" if verbose else None,
    )


def _load_catalog(listing: Listing) -> ContentCatalog:
    settings = get_settings()
    try:
        if listing == Listing.blog:
            return load_blog_catalog(settings.blog_dir, settings.excerpt_length)
        return load_project_catalog(settings.projects_file)
    except ContentError as exc:
        console.print("[red]Could not load content.[/red]")
        console.print(f"[dim]{exc}[/dim]")
        raise typer.Exit(1)


def _apply_filters(
    controller: FilterController,
    category: Optional[str],
    tech: Optional[str],
    search: Optional[str],
) -> None:
    if category is not None:
        controller.set_category(category)
    # --tech selects; only the interactive toggle clears on a repeat
    if tech is not None and tech != controller.state.technology_label:
        controller.set_technology(tech)
    if search is not None:
        controller.set_search_term(search)


def _display_active_filters(controller: FilterController) -> None:
    if controller.has_active_filters:
        chips = ", ".join(f"{kind}: {value}" for kind, value in controller.active_filters())
        console.print(f"[dim]Active filters: {chips}[/dim]")


# --- Projects Command ---


@app.command()
def projects(
    category: Optional[str] = typer.Option(None, "--category", "-c", help='Category, or "all"'),
    tech: Optional[str] = typer.Option(None, "--tech", "-t", help="Technology label"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search term"),
):
    """List projects of the portfolio gallery."""
    settings = get_settings()
    catalog = _load_catalog(Listing.projects)
    controller = FilterController(catalog, initial_category=settings.projects_default_category)
    _apply_filters(controller, category, tech, search)

    counts = catalog.category_counts()
    buttons = "  ".join(
        f"[bold]{label}[/bold] ({count})" if label == controller.state.category else f"{label} ({count})"
        for label, count in counts.items()
    )
    console.print(buttons)
    _display_active_filters(controller)

    if not controller.visible:
        console.print("[yellow]No projects found[/yellow]")
        return

    table = Table(title=controller.summary("project"))
    table.add_column("Title", style="cyan")
    table.add_column("Categories")
    table.add_column("Technologies")
    for item in controller.visible:
        table.add_row(item.title, ", ".join(item.categories), ", ".join(item.technologies))
    console.print(table)


# --- Blog Command ---


@app.command()
def blog(
    tag: Optional[str] = typer.Option(None, "--tag", help='Tag, or "all"'),
    tech: Optional[str] = typer.Option(None, "--tech", "-t", help="Technology label"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search term"),
    query: str = typer.Option("", "--query", "-q", help="Listing query string, e.g. 'tag=go&tech=Docker'"),
):
    """List blog posts."""
    settings = get_settings()
    catalog = _load_catalog(Listing.blog)
    controller = FilterController.from_query(
        catalog, query, initial_category=settings.blog_default_category
    )
    _apply_filters(controller, tag, tech, search)
    _display_active_filters(controller)

    if not controller.visible:
        console.print("\n[yellow]No articles found[/yellow]")
        console.print("[dim]Try adjusting your search criteria or filters[/dim]")
        return

    table = Table(title=controller.summary("article"))
    table.add_column("Date", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Slug")
    table.add_column("Tags")
    for post in controller.visible:
        table.add_row(post.formatted_date, post.title, post.slug, ", ".join(post.tags))
    console.print(table)


# --- Facets Command ---


@app.command()
def facets(
    listing: Listing = typer.Argument(Listing.projects, help="Listing page"),
):
    """Show the filter buttons available on a listing page."""
    catalog = _load_catalog(listing)

    label = "Tags" if listing == Listing.blog else "Categories"
    console.print(f"\n[bold]{label}:[/bold]")
    for name, count in catalog.category_counts().items():
        console.print(f"  - {name} ({count})")

    console.print("\n[bold]Technologies:[/bold]")
    for name in catalog.distinct_technologies():
        console.print(f"  - {name}")


# --- Post Commands ---


@app.command()
def post(slug: str = typer.Argument(..., help="Post slug")):
    """Show a blog post's metadata."""
    settings = get_settings()
    catalog = _load_catalog(Listing.blog)
    try:
        item = catalog.get_post(slug)
    except KeyError:
        console.print(f"[red]No post with slug '{slug}'[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]{escape(item.title)}[/bold]")
    console.print(
        f"[dim]{item.formatted_date} • {item.reading_time(settings.words_per_minute)} min read[/dim]"
    )
    console.print(escape(item.display_excerpt))
    if item.tags:
        console.print(f"Tags: {', '.join(item.tags)}")
    if item.technologies:
        console.print(f"Technologies mentioned: {', '.join(item.technologies)}")


@app.command()
def toc(slug: str = typer.Argument(..., help="Post slug")):
    """Print a blog post's table of contents."""
    catalog = _load_catalog(Listing.blog)
    try:
        item = catalog.get_post(slug)
    except KeyError:
        console.print(f"[red]No post with slug '{slug}'[/red]")
        raise typer.Exit(1)

    entries = extract_table_of_contents(item.body_html)
    if not entries:
        console.print("[yellow]No table of contents for this post[/yellow]")
        return

    console.print("\n[bold]Table of Contents[/bold]")
    for entry in entries:
        console.print(f"{'  ' * toc_indent(entry.level)}- {escape(entry.text)} [dim]#{entry.id}[/dim]")


# --- Resume Command ---


@app.command()
def resume(
    top: Optional[int] = typer.Option(None, "--top", help="Only show the N highest-rated skills"),
):
    """Show skills and career timelines."""
    settings = get_settings()
    try:
        data = load_resume(settings.resume_file)
    except ContentError as exc:
        console.print("[red]Could not load resume.[/red]")
        console.print(f"[dim]{exc}[/dim]")
        raise typer.Exit(1)

    if data.name:
        console.print(f"\n[bold]{data.name}[/bold] [dim]{data.headline}[/dim]")

    if data.skills:
        table = Table(title="Skills")
        table.add_column("Technology", style="cyan")
        table.add_column("Rating", justify="right")
        for skill in data.top_skills(top) if top else data.skills:
            table.add_row(skill.tech, f"{skill.rating} %")
        console.print(table)

    for title, entries in (("Experience", data.experience), ("Education", data.education)):
        if entries:
            console.print(f"\n[bold]{title}:[/bold]")
            for entry in entries:
                console.print(f"  {entry.year}  {escape(entry.title)}")

    if data.certificates:
        console.print("\n[bold]Certificates:[/bold]")
        for cert in data.certificates:
            console.print(f"  {cert.year}  {escape(cert.title)} [dim]({cert.provider})[/dim]")


# --- Theme Command ---


@app.command()
def theme(
    toggle: bool = typer.Option(False, "--toggle", help="Switch between light and dark"),
    set_to: Optional[Theme] = typer.Option(None, "--set", help="Set the theme explicitly"),
    prefers_dark: bool = typer.Option(False, "--prefers-dark", help="System prefers dark scheme"),
):
    """Show or change the stored colour theme."""
    settings = get_settings()
    manager = ThemeManager(JsonFileStorage(settings.preferences_file), prefers_dark=prefers_dark)

    if set_to is not None:
        manager.set_theme(set_to)
    elif toggle:
        manager.toggle()

    console.print(f"Theme: [bold]{manager.theme.value}[/bold]")


# --- Contact Command ---


@app.command()
def contact(
    name: str = typer.Option(..., "--name", "-n", help="Your name"),
    email: str = typer.Option(..., "--email", "-e", help="Your email address"),
    message: str = typer.Option(..., "--message", "-m", help="Message body"),
    subject: str = typer.Option("", "--subject", help="Email subject"),
    open_client: bool = typer.Option(True, "--open/--no-open", help="Open the mail client"),
):
    """Compose a pre-filled email to the site owner."""
    settings = get_settings()
    form = ContactForm(name=name, email=email, message=message, subject=subject)

    result = submit_contact(
        form,
        settings.contact_recipient,
        opener=webbrowser.open if open_client else (lambda url: None),
        default_subject=settings.contact_subject,
    )

    if not result.ok:
        console.print(f"[red]{result.message}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]{result.message}[/green]")
    console.print(f"[dim]{result.draft.mailto_url}[/dim]")


# --- Export Command ---


@app.command()
def export():
    """Export the blog listing, posts and projects as JSON."""
    settings = get_settings()
    settings.ensure_directories()
    blog_catalog = _load_catalog(Listing.blog)
    project_catalog = _load_catalog(Listing.projects)
    writer = create_json_writer(settings.export_dir)

    async def run():
        paths = await writer.write_blog(blog_catalog, settings.words_per_minute)
        controller = FilterController(
            project_catalog, initial_category=settings.projects_default_category
        )
        paths.append(await writer.write_listing(project_catalog, controller.state, filename="projects.json"))
        paths.append(
            await writer.write_listing(
                project_catalog,
                controller.state.with_category(ALL_CATEGORIES),
                filename="projects-all.json",
            )
        )
        return paths

    paths = asyncio.run(run())
    console.print(f"[green]Exported {len(paths)} files to {settings.export_dir}[/green]")


if __name__ == "__main__":
    app()
