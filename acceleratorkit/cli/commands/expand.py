import click
from rich.console import Console

from ...domain.exceptions import AcceleratorKitError
from ...infrastructure.container import DependencyContainer

console = Console()


@click.command()
@click.argument("url")
@click.option("--server", required=True, help="Terminology server base address")
@click.option(
    "--header",
    "headers",
    multiple=True,
    help="Extra request header as 'Name: value' (repeatable)",
)
@click.option(
    "--system-version",
    "system_versions",
    multiple=True,
    help="Pin a code system version, e.g. http://loinc.org|2.74 (repeatable)",
)
@click.option(
    "--logical-id",
    is_flag=True,
    help="Treat the last URL segment as the value set's logical id",
)
def expand_command(
    url: str,
    server: str,
    headers: tuple[str, ...],
    system_versions: tuple[str, ...],
    logical_id: bool,
) -> None:
    """Expand a value set on a FHIR terminology server."""
    container = DependencyContainer(console=console)
    try:
        client = container.create_terminology_client(
            server, headers=headers, treat_canonical_tail_as_logical_id=logical_id
        )
        value_set = client.expand(url, system_versions or None)
    except AcceleratorKitError as e:
        raise click.ClickException(str(e)) from e

    expansion = value_set.get("expansion") or {}
    contains = expansion.get("contains") or []
    total = expansion.get("total", len(contains))
    console.print(f"[bold]{value_set.get('url', url)}[/bold]: {total} codes")
    for entry in contains:
        console.print(
            f"  {entry.get('system', '')} [cyan]{entry.get('code', '')}[/cyan] "
            f"{entry.get('display', '')}"
        )
