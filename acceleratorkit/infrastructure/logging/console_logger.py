from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.element_builder import PageParseResult


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    page: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "pages_processed": 0,
        "rows_read": 0,
        "elements_registered": 0,
        "choices_added": 0,
        "artifacts_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_run_start(self, source: Path, pages: list[str], output_dir: Path) -> None:
        self.set_context(operation="process")
        self.console.print(f"[bold]Processing {source.name}[/bold]")
        self.verbose(f"Data dictionary: {source}")
        self.verbose(f"Pages ({len(pages)}): {', '.join(pages)}")
        self.verbose(f"Output directory: {output_dir}")

    @override
    def log_page_loaded(self, page: str, row_count: int) -> None:
        self.set_context(page=page)
        self._stats["pages_processed"] += 1
        self._stats["rows_read"] += row_count
        self.verbose(f"  Loaded {row_count:,} rows from page {page}")

    @override
    def log_page_complete(self, result: PageParseResult) -> None:
        self._stats["elements_registered"] += result.elements_registered
        self._stats["choices_added"] += result.choices_added
        self.verbose(
            f"  {result.page}: {result.elements_registered} elements, "
            f"{result.choices_added} choices"
        )
        if result.skipped_rows:
            self.debug(f"    Skipped {result.skipped_rows} reserved rows")
        if result.groups_seen:
            self.debug(f"    Group headings: {result.groups_seen}")
        if result.missing_columns:
            self.debug(f"    Columns not on this page: {', '.join(result.missing_columns)}")
        if result.uncoded_elements:
            self.debug(f"    Elements without a code: {', '.join(result.uncoded_elements)}")

    @override
    def log_synthesis_complete(
        self, *, profiles: int, code_systems: int, value_sets: int
    ) -> None:
        self.clear_context()
        self.success(
            f"Synthesized {profiles} profiles, {code_systems} code systems, "
            f"{value_sets} value sets"
        )

    @override
    def log_artifact_written(self, resource_type: str, resource_id: str, path: Path) -> None:
        self._stats["artifacts_written"] += 1
        self.debug(f"  Wrote {resource_type}/{resource_id} to {path}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Processing Statistics:[/dim]")
            self.console.print(
                f"[dim]  Pages processed: {self._stats['pages_processed']}[/dim]"
            )
            self.console.print(f"[dim]  Rows read: {self._stats['rows_read']:,}[/dim]")
            self.console.print(
                f"[dim]  Elements registered: {self._stats['elements_registered']}[/dim]"
            )
            self.console.print(
                f"[dim]  Artifacts written: {self._stats['artifacts_written']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        return f"[{self._context.page}] " if self._context.page else ""
