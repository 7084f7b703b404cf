from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import ProcessDictionaryResponse, WrittenArtifact


@dataclass(frozen=True, slots=True)
class _ArtifactRow:
    resource_type: str
    resource_id: str
    file_name: str


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ProcessDictionaryResponse) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(response.written))
        self.console.print()
        self._print_status_summary(response)
        self._print_output_information(response)

    def _build_summary_table(self, written: Sequence[WrittenArtifact]) -> Table:
        table = Table(
            title="📊 Artifact Summary",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Resource", style="cyan", no_wrap=True)
        table.add_column("Id", style="white", overflow="fold", ratio=2)
        table.add_column("File", style="dim", overflow="fold", ratio=2)
        for row in self._rows(written):
            table.add_row(row.resource_type, row.resource_id, row.file_name)
        table.add_section()
        counts = Counter(artifact.resource_type for artifact in written)
        totals = ", ".join(f"{kind}: {count}" for kind, count in counts.items())
        table.add_row("[bold]Total[/bold]", f"[bold yellow]{len(written)}[/bold yellow]", totals)
        return table

    def _rows(self, written: Sequence[WrittenArtifact]) -> list[_ArtifactRow]:
        return [
            _ArtifactRow(
                resource_type=artifact.resource_type,
                resource_id=artifact.resource_id,
                file_name=artifact.path.name,
            )
            for artifact in written
        ]

    def _print_status_summary(self, response: ProcessDictionaryResponse) -> None:
        pages = len(response.page_results)
        self.console.print(
            f"[green]✓[/green] {response.element_count} data elements from "
            f"{pages} page{'s' if pages != 1 else ''}"
        )
        if response.synthesis is not None:
            synthesis = response.synthesis
            self.console.print(
                f"[green]✓[/green] {len(synthesis.profiles)} profiles, "
                f"{len(synthesis.code_systems)} code systems, "
                f"{len(synthesis.value_sets)} value sets"
            )

    def _print_output_information(self, response: ProcessDictionaryResponse) -> None:
        self.console.print(f"[bold]Output directory:[/bold] {response.output_dir}")
        for path in response.manifest_paths:
            self.console.print(f"  [dim]Manifest:[/dim] {path.name}")
