"""Process command - Turn a data dictionary into FHIR conformance artifacts.

This module is a thin adapter between the Click CLI framework and the
application layer's DictionaryProcessingUseCase. It is responsible for:
1. Parsing CLI arguments and layering them over the loaded configuration
2. Creating the ProcessDictionaryRequest
3. Calling the use case
4. Formatting the response for user output
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ProcessDictionaryRequest
from ...config import ConfigLoader, ProcessorConfig
from ...constants import Encodings
from ...domain.exceptions import AcceleratorKitError
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import SummaryPresenter
from .options import split_pages

console = Console()


@dataclass(frozen=True)
class ProcessCommandOptions:
    pages: tuple[str, ...]
    output_dir: Path | None
    encoding: str | None
    canonical_base: str | None
    config_file: Path | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ProcessCommandOptions:
        return cls(
            pages=cast("tuple[str, ...]", options.get("pages") or ()),
            output_dir=cast("Path | None", options.get("output_dir")),
            encoding=cast("str | None", options.get("encoding")),
            canonical_base=cast("str | None", options.get("canonical_base")),
            config_file=cast("Path | None", options.get("config_file")),
            verbose=cast("int", options.get("verbose", 0)),
        )

    def apply_to(self, config: ProcessorConfig) -> ProcessorConfig:
        if self.output_dir is not None:
            config = replace(config, output_dir=self.output_dir)
        if self.encoding is not None:
            config = replace(config, encoding=self.encoding)
        if self.canonical_base is not None:
            config = replace(config, canonical_base=self.canonical_base)
        return config


@click.command()
@click.argument("spreadsheet", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-p",
    "--page",
    "pages",
    multiple=True,
    help="Page (sheet) to process; repeat the option or pass a comma list",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(path_type=Path),
    help="Output directory for generated artifacts (default: ./output)",
)
@click.option(
    "--encoding",
    type=click.Choice(list(Encodings.SUPPORTED)),
    help="Artifact encoding (default: json)",
)
@click.option(
    "--canonical-base",
    "canonical_base",
    help="Canonical base URL for generated artifacts",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an acceleratorkit.toml config file (default: ./acceleratorkit.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def process_command(spreadsheet: Path, **options: object) -> None:
    """Generate profiles, code systems and value sets from a data dictionary.

    SPREADSHEET is an Excel workbook or a directory holding one CSV export
    per page. Every page is read in order and its data elements are merged
    into one registry before any artifact is written.

    Examples:

    \b
        # Process two pages of a workbook as JSON
        acceleratorkit process WHO-ANC-mini.xlsx -p Registration -p "ANC Contact"

    \b
        # Write FHIR XML into a custom directory
        acceleratorkit process dictionary/ -p Registration --encoding xml --output-dir out/
    """
    command_options = ProcessCommandOptions.from_kwargs(dict(options))
    container = DependencyContainer(verbose=command_options.verbose, console=console)
    try:
        config = command_options.apply_to(
            ConfigLoader.load(config_file=command_options.config_file)
        )
        request = ProcessDictionaryRequest(
            spreadsheet_path=spreadsheet,
            pages=split_pages(command_options.pages),
            config=config,
        )
        use_case = container.create_dictionary_processing_use_case()
        response = use_case.execute(request)
    except AcceleratorKitError as e:
        raise click.ClickException(str(e)) from e

    SummaryPresenter(console).present(response)
