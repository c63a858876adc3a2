"""Command-line interface for Entity Search."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from entity_search import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """Entity Search - Turn an entity graph into a full-text search index."""
    from pydantic import ValidationError

    from entity_search.config import get_settings

    try:
        settings = get_settings()
    except ValidationError as exc:
        console.print(f"[red]Invalid settings:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@main.command()
@click.option("--content-dir", "-c", type=click.Path(exists=True, path_type=Path), help="Entity JSON directory")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Index output file")
@click.option("--max-hops", type=click.IntRange(min=1), help="Relationship hops followed for related names")
def build(content_dir: Path | None, output: Path | None, max_hops: int | None) -> None:
    """Build the search index from entity records."""
    from entity_search.config import get_settings
    from entity_search.index import build_index

    settings = get_settings()
    content_dir = content_dir or settings.content_dir
    output = output or settings.index_path

    console.print("[bold]Building search index[/bold]")
    console.print(f"[dim]Source: {content_dir}[/dim]\n")

    try:
        with console.status("Loading entities and assembling documents..."):
            stats = build_index(
                content_dir,
                output,
                max_hops=max_hops or settings.max_hops,
                boost=settings.boost,
                fuzzy=settings.fuzzy,
                prefix=settings.prefix,
            )
    except ValueError as exc:
        console.print(f"[red]Build failed:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    table = Table(title="Build Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Entities loaded", f"{stats.total_entities:,}")
    table.add_row("Duplicate ids shadowed", f"{len(stats.duplicate_ids):,}")
    table.add_row("Documents indexed", f"{stats.documents_indexed:,}")
    table.add_row("Entities with inherited facets", f"{stats.entities_with_inherited_facets:,}")
    table.add_row("Related names resolved", f"{stats.total_related_names:,}")

    console.print(table)

    console.print("\n[bold]Entities by type:[/bold]")
    for etype, count in sorted(stats.entities_by_type.items()):
        console.print(f"  {etype}: {count:,}")

    if stats.duplicate_ids:
        console.print(f"\n[yellow]Duplicate ids (later record kept):[/yellow] {', '.join(stats.duplicate_ids[:10])}")

    size_mb = stats.output_bytes / 1024 / 1024
    console.print(f"\n[green]✓[/green] Index written to {stats.output_path} ({size_mb:.2f} MB)")


@main.command()
@click.argument("query", default="")
@click.option("--index", "index_path", type=click.Path(exists=True, path_type=Path), help="Index file")
@click.option("--tag", "-t", help="Only entities with this tag (categories match their children)")
@click.option("--type", "entity_type", help="Only entities of this type")
@click.option("--fuzzy", type=click.FloatRange(0, 1), help="Fuzzy match distance as a fraction of term length")
@click.option("--no-prefix", is_flag=True, help="Disable prefix matching")
@click.option("--limit", "-l", type=int, default=20, show_default=True, help="Maximum results")
def search(
    query: str,
    index_path: Path | None,
    tag: str | None,
    entity_type: str | None,
    fuzzy: float | None,
    no_prefix: bool,
    limit: int,
) -> None:
    """Search the built index."""
    from entity_search.config import get_settings
    from entity_search.index import SearchIndex

    index_path = index_path or get_settings().index_path
    if not index_path.exists():
        console.print(f"[red]No index at {index_path}[/red] - run 'entity-search build' first")
        raise SystemExit(1)

    try:
        index = SearchIndex.load(index_path)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1)

    results = index.search(
        query,
        fuzzy=fuzzy,
        prefix=False if no_prefix else None,
        tag=tag,
        type=entity_type,
        limit=limit,
    )

    if not results:
        console.print("[yellow]No results[/yellow]")
        return

    table = Table(title=f"Results for {query!r}" if query else "Results")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Matched", style="dim")

    for result in results:
        matched = ", ".join(f"{term} ({'/'.join(fields)})" for term, fields in result.match.items())
        table.add_row(result.name, result.type, f"{result.score:.2f}", matched)

    console.print(table)


@main.command()
@click.argument("entity_id")
@click.option("--content-dir", "-c", type=click.Path(exists=True, path_type=Path), help="Entity JSON directory")
@click.option("--max-hops", type=click.IntRange(min=1), help="Relationship hops followed for related names")
def show(entity_id: str, content_dir: Path | None, max_hops: int | None) -> None:
    """Show how an entity resolves: related names and merged facets."""
    from entity_search.config import get_settings
    from entity_search.graph import EntityStore
    from entity_search.index import build_assembler, load_entities

    settings = get_settings()
    try:
        store = EntityStore(load_entities(content_dir or settings.content_dir))
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1)

    entity = store.get(entity_id)
    if entity is None:
        console.print(f"[red]Unknown entity:[/red] {entity_id}")
        raise SystemExit(1)

    assembler = build_assembler(store, max_hops=max_hops or settings.max_hops)

    console.print(f"[bold]{entity.name}[/bold] [dim]({entity.type}, {entity.id})[/dim]")
    if entity.description:
        console.print(f"  {entity.description}")

    related = assembler.resolver.related_entities(entity)
    console.print(f"\n[bold]Related ({len(related)}):[/bold]")
    for item in related:
        console.print(f"  [dim]hop {item.hop}[/dim] {item.entity.name} [dim]({item.via})[/dim]")

    providers = assembler.facet_engine.providers(entity)
    if providers:
        console.print(f"\n[bold]Inherits facets from:[/bold] {', '.join(p.name for p in providers)}")

    facets = assembler.facet_engine.merged_facets(entity)
    console.print("\n[bold]Facets:[/bold]")
    if not facets:
        console.print("  [dim]none[/dim]")
    for key, value in facets.items():
        shown = ", ".join(value) if isinstance(value, list) else str(value)
        own = "" if entity.facets.get(key) is not None else " [dim](inherited)[/dim]"
        console.print(f"  {key}: {shown}{own}")


# ============================================================================
# Tag Commands
# ============================================================================

@main.group()
def tags() -> None:
    """Tag taxonomy commands."""
    pass


@tags.command(name="list")
def tags_list() -> None:
    """List tag categories."""
    from entity_search.taxonomy import TAG_TAXONOMY

    table = Table(title="Tag Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Label")
    table.add_column("Tags", justify="right", style="green")

    for category in TAG_TAXONOMY:
        table.add_row(category.id, category.label, str(len(category.children)))

    console.print(table)


@tags.command(name="expand")
@click.argument("tag")
def tags_expand(tag: str) -> None:
    """Show every tag a search for TAG matches."""
    from entity_search.taxonomy import expand_tag, is_category

    expanded = expand_tag(tag)
    kind = "category" if is_category(tag) else "tag"
    console.print(f"[bold]{tag}[/bold] [dim]({kind}, {len(expanded)} tags)[/dim]")
    for t in sorted(expanded):
        console.print(f"  {t}")


@tags.command(name="parent")
@click.argument("tag")
def tags_parent(tag: str) -> None:
    """Show the category TAG belongs to."""
    from entity_search.taxonomy import get_category, get_tag_parent, tag_to_label

    parent = get_tag_parent(tag)
    if parent is None:
        console.print(f"[yellow]{tag} is not in any category[/yellow]")
        return

    category = get_category(parent)
    console.print(f"{tag_to_label(tag)} -> {category.label} [dim]({parent})[/dim]")
