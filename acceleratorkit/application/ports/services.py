from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ...domain.entities.artifacts import FhirArtifact
    from ...domain.services.element_builder import PageParseResult


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_run_start(self, source: Path, pages: list[str], output_dir: Path) -> None: ...

    def log_page_loaded(self, page: str, row_count: int) -> None: ...

    def log_page_complete(self, result: PageParseResult) -> None: ...

    def log_synthesis_complete(
        self, *, profiles: int, code_systems: int, value_sets: int
    ) -> None: ...

    def log_artifact_written(self, resource_type: str, resource_id: str, path: Path) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class ArtifactWriterPort(Protocol):
    pass

    def write(self, artifact: FhirArtifact, output_dir: Path, encoding: str) -> Path: ...


@runtime_checkable
class ManifestWriterPort(Protocol):
    pass

    def write(self, output_dir: Path, *, ig_json: str, ig_xml: str) -> tuple[Path, Path]: ...


@runtime_checkable
class TerminologyServicePort(Protocol):
    """Operations a FHIR terminology server offers.

    Only ``expand`` is backed by an implementation so far; the remaining
    operations are part of the contract and raise ``NotImplementedError``.
    """

    def expand(
        self, url: str, system_versions: Iterable[str] | None = None
    ) -> dict[str, Any]: ...

    def lookup(self, code: str, system_url: str) -> dict[str, Any]: ...

    def validate_code_in_value_set(
        self, url: str, code: str, system_url: str, display: str | None = None
    ) -> dict[str, Any]: ...

    def validate_coding_in_value_set(
        self, url: str, coding: dict[str, Any]
    ) -> dict[str, Any]: ...

    def validate_codeable_concept_in_value_set(
        self, url: str, concept: dict[str, Any]
    ) -> dict[str, Any]: ...

    def validate_code_in_code_system(
        self, url: str, code: str, system_url: str, display: str | None = None
    ) -> dict[str, Any]: ...

    def validate_coding_in_code_system(
        self, url: str, coding: dict[str, Any]
    ) -> dict[str, Any]: ...

    def validate_codeable_concept_in_code_system(
        self, url: str, concept: dict[str, Any]
    ) -> dict[str, Any]: ...

    def subsumes(self, code_a: str, code_b: str, system_url: str) -> str: ...
