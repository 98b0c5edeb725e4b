"""3GPP Guidance CLI."""

import json

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

console = Console()

LEVELS = ["beginner", "intermediate", "expert"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Write debug logs to stderr")
def main(verbose: bool):
    """3GPP Guidance - research guidance for 3GPP specifications."""
    if verbose:
        from .utils.logging import configure_logging
        configure_logging("DEBUG")


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"tgpp-guidance v{__version__}")


@main.command()
@click.argument("text")
@click.option("--level", "-l", type=click.Choice(LEVELS), default=None, help="Expertise level (inferred when omitted)")
@click.option("--domain", "-d", default=None, help="Technical domain, e.g. charging")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def ask(text: str, level: str, domain: str, as_json: bool):
    """Get research guidance for a question."""
    from .guidance import create_engine
    from .guidance.types import ExpertiseLevel, UserQuery

    engine = create_engine()
    query = UserQuery(
        text=text,
        user_level=ExpertiseLevel.from_string(level) if level else None,
        domain=domain,
    )
    analysis, response = engine.guide(query)

    if as_json:
        click.echo(json.dumps({"analysis": analysis.to_dict(), "guidance": response.to_dict()}, indent=2))
        return

    console.print("\n[bold]Query Analysis:[/bold]")
    console.print(f"  Intent: [cyan]{analysis.intent.value}[/cyan]")
    console.print(f"  Domain: [cyan]{analysis.domain}[/cyan]")
    console.print(f"  Level: {analysis.user_level.value}")
    console.print(f"  Complexity: {analysis.complexity:.2f}")
    if analysis.concepts:
        console.print(f"  Concepts: {', '.join(analysis.concepts)}")
    console.print()

    console.print(f"[bold]{response.summary}[/bold]", highlight=False)
    console.print()

    if not response.sections:
        console.print("[yellow]No specific guidance sections for this question[/yellow]")

    for section in response.sections:
        console.print(Markdown(section.content))
        console.print()

    console.print("[bold]Next Steps:[/bold]")
    for step in response.next_steps:
        console.print(f"  - {step}", markup=False)

    console.print("\n[bold]Related Topics:[/bold]")
    for topic in response.related_topics:
        console.print(f"  - {topic}", markup=False)


@main.command()
@click.argument("spec_id")
def spec(spec_id: str):
    """Show a specification from the knowledge graph."""
    from .knowledge import get_knowledge_graph
    from .utils.validators import ValidationError, normalize_spec_id

    try:
        spec_id = normalize_spec_id(spec_id)
    except ValidationError as e:
        console.print(f"[red]Invalid specification ID: {e}[/red]")
        return

    entity = get_knowledge_graph().get_specification(spec_id)
    if entity is None:
        console.print(f"[yellow]Specification not found: {spec_id}[/yellow]")
        return

    console.print(f"\n[bold]{entity.id}[/bold]: {entity.title}")
    console.print(f"  Series: {entity.series}")
    console.print(f"  Release: {entity.release}")
    console.print(f"  Working group: {entity.working_group}")
    console.print(f"  Purpose: [dim]{entity.purpose}[/dim]")
    console.print(f"  Key topics: {', '.join(entity.key_topics)}")

    if entity.implementation_notes:
        console.print("\n[bold]Implementation Notes:[/bold]")
        for note in entity.implementation_notes:
            console.print(f"  - {note}", markup=False)

    if entity.evolution_notes:
        console.print(f"\n[bold]Evolution:[/bold] {entity.evolution_notes}")


@main.command()
@click.argument("spec_id")
def related(spec_id: str):
    """List specifications related to a specification."""
    from .knowledge import get_knowledge_graph
    from .utils.validators import ValidationError, normalize_spec_id

    try:
        spec_id = normalize_spec_id(spec_id)
    except ValidationError as e:
        console.print(f"[red]Invalid specification ID: {e}[/red]")
        return

    knowledge = get_knowledge_graph()
    edges = [
        edge for edge in knowledge.relationships_for(spec_id)
        if knowledge.get_specification(edge.target) is not None
    ]

    if not edges:
        console.print(f"[yellow]No related specifications for {spec_id}[/yellow]")
        return

    console.print(f"\n[bold]Related to {spec_id}:[/bold]\n")

    table = Table()
    table.add_column("ID", style="cyan")
    table.add_column("Relationship")
    table.add_column("Strength")
    table.add_column("Title")

    for edge in sorted(edges, key=lambda e: e.strength, reverse=True):
        strength_style = "green" if edge.strength >= 0.8 else "yellow" if edge.strength >= 0.6 else "dim"
        table.add_row(
            edge.target,
            edge.type.value,
            f"[{strength_style}]{edge.strength:.2f}[/{strength_style}]",
            knowledge.get_specification(edge.target).title,
        )

    console.print(table)


@main.command()
@click.argument("query")
@click.option("--series", "-s", multiple=True, help="Series to keep, e.g. 32 (repeatable)")
@click.option("--release", "-r", multiple=True, help="Release to keep, e.g. Rel-17 (repeatable)")
@click.option("--working-group", "-w", default=None, help="Working group to keep, e.g. SA5")
@click.option("--limit", "-n", default=5, help="Maximum results")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def search(query: str, series: tuple, release: tuple, working_group: str, limit: int, as_json: bool):
    """Search the specification catalog."""
    from pydantic import ValidationError as SchemaValidationError

    from .catalog import CatalogError, MetadataCatalogClient
    from .knowledge import get_knowledge_graph
    from .schemas import SearchSpecificationsInput
    from .tools.specification_tools import search_catalog

    try:
        validated = SearchSpecificationsInput(
            query=query,
            max_results=limit,
            series_filter=list(series),
            release_filter=list(release),
            working_group=working_group,
        )
    except SchemaValidationError as e:
        console.print(f"Invalid search: {e}", style="red", markup=False, highlight=False)
        return

    try:
        result = search_catalog(
            MetadataCatalogClient(),
            get_knowledge_graph(),
            validated.query,
            max_results=validated.max_results,
            series=validated.series_filter,
            releases=validated.release_filter,
            working_group=validated.working_group,
        )
    except CatalogError as e:
        console.print(f"Catalog search failed: {e}", style="red", markup=False)
        return

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    if not result["results"]:
        console.print(f"[yellow]No specifications match '{validated.query}'[/yellow]")
        return

    table = Table(title=f"Catalog matches for '{validated.query}' ({result['total_found']} found)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Release")
    table.add_column("WG")
    table.add_column("Curated")
    table.add_column("Title")

    for entry in result["results"]:
        table.add_row(
            entry["id"],
            entry["release"],
            entry["working_group"],
            "[green]yes[/green]" if entry["in_knowledge_graph"] else "[dim]no[/dim]",
            entry["title"],
        )

    console.print(table)

    if result["related_specifications"]:
        console.print("\n[bold]Also related:[/bold]")
        for spec in result["related_specifications"]:
            console.print(f"  - {spec['id']}: {spec['title']} (via {spec['related_to']})", markup=False)


@main.command()
def patterns():
    """List research methodology patterns."""
    from .knowledge import get_knowledge_graph

    console.print("\n[bold]Research Patterns:[/bold]\n")
    for pattern in get_knowledge_graph().patterns.values():
        console.print(f"  [cyan]{pattern.name}[/cyan]")
        console.print(f"    {pattern.description}")
        console.print(f"    Time: {pattern.time_estimate}")
        console.print(f"    Use for: {', '.join(pattern.applicable_for)}")
        console.print()


@main.command()
def serve():
    """Run the MCP server over stdio."""
    from .server import main as run_server
    run_server()


if __name__ == "__main__":
    main()
