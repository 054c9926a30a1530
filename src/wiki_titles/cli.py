"""CLI for wiki-titles.

Commands:
    resolve <catalog>          - Resolve and show the page title of every entity
    lookup <catalog> <title>   - Find which entity owns a page title
    duplicates <catalog>       - List display names shared by several entities
    rules                      - Show the disambiguation rule table
"""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wiki_titles.catalog import CatalogError, load_catalog
from wiki_titles.config import load_title_overrides, settings
from wiki_titles.logging_config import configure_logging
from wiki_titles.models.entities import Entity
from wiki_titles.models.enums import EntityKind
from wiki_titles.naming.errors import TitleRegistryError
from wiki_titles.naming.registry import TitleRegistry
from wiki_titles.naming.rules import DEFAULT_RULES

app = typer.Typer(
    name="wiki-titles",
    help="wiki-titles: unique wiki page titles for game entities",
    no_args_is_help=True,
)
console = Console()

KIND_STYLES = {
    EntityKind.ITEM: "cyan",
    EntityKind.MONSTER: "red",
    EntityKind.TREASURE_POOL: "yellow",
    EntityKind.BIOME: "green",
    EntityKind.SAPLING_PART: "magenta",
}

CatalogArg = Annotated[Path, typer.Argument(help="JSON or JSONL entity catalog")]
OverridesOpt = Annotated[
    Path | None, typer.Option("--overrides", "-o", help="JSON file with title overrides")
]
KindOpt = Annotated[
    EntityKind | None, typer.Option("--kind", "-k", help="Only show entities of this kind")
]


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show resolver log messages")
    ] = False,
):
    """Configure logging for every command."""
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
    )


def build_registry(catalog: Path, overrides_path: Path | None) -> tuple[TitleRegistry, list[Entity]]:
    """Load a catalog and register all of its entities in a fresh registry."""
    try:
        entities = load_catalog(catalog)
        overrides = load_title_overrides(overrides_path)
    except (CatalogError, OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    registry = TitleRegistry(overrides)
    registry.add_all(entities)
    try:
        registry.resolve()
    except TitleRegistryError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    return registry, entities


def _kind_cell(kind: EntityKind) -> str:
    style = KIND_STYLES.get(kind, "white")
    return f"[{style}]{kind.value}[/{style}]"


@app.command()
def resolve(
    catalog: CatalogArg,
    overrides: OverridesOpt = None,
    kind: KindOpt = None,
    no_lazy: Annotated[
        bool, typer.Option("--no-lazy", help="Don't number unresolved collisions")
    ] = False,
):
    """Resolve page titles for every entity of a catalog.

    Entities are listed in catalog order, which is also the order in which
    unresolved collisions receive their "(2)", "(3)" suffixes.
    """
    registry, entities = build_registry(catalog, overrides)

    table = Table(title="Page Titles")
    table.add_column("Kind")
    table.add_column("Identifier", style="dim")
    table.add_column("Title")

    for entity in entities:
        title = registry.get_title_for(entity, allow_lazy_allocation=not no_lazy)
        if kind is not None and entity.kind is not kind:
            continue
        table.add_row(_kind_cell(entity.kind), entity.identifier, title or "[red]-[/red]")

    console.print(table)

    report = registry.report
    console.print(Panel(
        f"[bold]Entities:[/bold] {report.entities_registered}\n"
        f"[bold]Disputed titles:[/bold] {report.disputed_titles}\n"
        f"[bold]Renamed:[/bold] {len(report.renames)}\n"
        f"[bold]Passes:[/bold] {report.passes}\n"
        f"[bold]Unresolved:[/bold] {len(report.unresolved_titles)}",
        title="Resolution Summary",
    ))

    if report.unresolved_titles:
        console.print("[yellow]Numbered lazily:[/yellow] " + ", ".join(report.unresolved_titles))


@app.command()
def lookup(
    catalog: CatalogArg,
    title: Annotated[str, typer.Argument(help="Exact page title")],
    overrides: OverridesOpt = None,
    kind: KindOpt = None,
):
    """Find the entity that owns a page title."""
    registry, _entities = build_registry(catalog, overrides)

    entity = registry.get_object_by_title(title, kind)
    if entity is None:
        console.print(f"[yellow]No entity owns '{title}'[/yellow]")
        raise typer.Exit(1)

    console.print(Panel(
        f"[bold]Kind:[/bold] {_kind_cell(entity.kind)}\n"
        f"[bold]Identifier:[/bold] {entity.identifier}\n"
        f"[bold]Display name:[/bold] {entity.display_name}",
        title=title,
    ))


@app.command()
def duplicates(
    catalog: CatalogArg,
    kind: KindOpt = None,
):
    """List display names shared by more than one entity."""
    try:
        entities = load_catalog(catalog)
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    by_name: dict[str, list[Entity]] = defaultdict(list)
    for entity in entities:
        if kind is None or entity.kind is kind:
            by_name[entity.display_name].append(entity)

    shared = {name: group for name, group in by_name.items() if len(group) > 1}
    if not shared:
        console.print("[green]No shared display names.[/green]")
        return

    table = Table(title="Shared Display Names")
    table.add_column("Display Name", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Identifiers")
    for name in sorted(shared):
        group = shared[name]
        table.add_row(name, str(len(group)), ", ".join(e.identifier for e in group))

    console.print(table)


@app.command()
def rules():
    """Show the disambiguation rules in the order they are tried."""
    table = Table(title="Disambiguation Rules")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for index, rule in enumerate(DEFAULT_RULES, start=1):
        table.add_row(str(index), rule.name, rule.description)
    console.print(table)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
