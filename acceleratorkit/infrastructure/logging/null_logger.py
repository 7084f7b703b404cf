from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.element_builder import PageParseResult


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_run_start(self, source: Path, pages: list[str], output_dir: Path) -> None:
        return None

    @override
    def log_page_loaded(self, page: str, row_count: int) -> None:
        return None

    @override
    def log_page_complete(self, result: PageParseResult) -> None:
        return None

    @override
    def log_synthesis_complete(
        self, *, profiles: int, code_systems: int, value_sets: int
    ) -> None:
        return None

    @override
    def log_artifact_written(self, resource_type: str, resource_id: str, path: Path) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
