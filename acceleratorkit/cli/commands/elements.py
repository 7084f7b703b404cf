from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...application.models import ProcessDictionaryRequest
from ...config import ConfigLoader
from ...domain.exceptions import AcceleratorKitError
from ...infrastructure.container import DependencyContainer
from .options import split_pages

console = Console()


@click.command()
@click.argument("spreadsheet", type=click.Path(exists=True, path_type=Path))
@click.option("-p", "--page", "pages", multiple=True, help="Page (sheet) to read")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an acceleratorkit.toml config file",
)
def list_elements_command(
    spreadsheet: Path, pages: tuple[str, ...], config_file: Path | None
) -> None:
    """List the data elements a dictionary defines, without writing anything."""
    container = DependencyContainer(console=console, use_null_logger=True)
    try:
        request = ProcessDictionaryRequest(
            spreadsheet_path=spreadsheet,
            pages=split_pages(pages),
            config=ConfigLoader.load(config_file=config_file),
        )
        response = container.create_dictionary_processing_use_case().collect_elements(
            request
        )
    except AcceleratorKitError as e:
        raise click.ClickException(str(e)) from e

    table = Table(title=f"Data elements in {spreadsheet.name}")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Page")
    table.add_column("Group")
    table.add_column("Type")
    table.add_column("Resource")
    table.add_column("Choices", justify="right", style="yellow")
    for element in response.registry:
        table.add_row(
            element.name,
            element.page,
            element.group or "",
            element.type or "",
            element.fhir_type.resource_type or "",
            str(len(element.choices)),
        )
    console.print(table)
