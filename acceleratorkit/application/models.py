from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import ProcessorConfig

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.services.artifact_synthesizer import SynthesisResult
    from ..domain.services.element_builder import PageParseResult
    from ..domain.services.element_registry import ElementRegistry


def _empty_str_list() -> list[str]:
    return []


def _empty_path_list() -> list[Path]:
    return []


def _empty_page_results() -> list[PageParseResult]:
    return []


@dataclass(slots=True)
class ProcessDictionaryRequest:
    spreadsheet_path: Path | None
    pages: list[str] = field(default_factory=_empty_str_list)
    config: ProcessorConfig = field(default_factory=ProcessorConfig)


@dataclass(slots=True)
class WrittenArtifact:
    resource_type: str
    resource_id: str
    path: Path


def _empty_written() -> list[WrittenArtifact]:
    return []


@dataclass(slots=True)
class ProcessDictionaryResponse:
    source: Path
    output_dir: Path
    registry: ElementRegistry
    synthesis: SynthesisResult | None = None
    page_results: list[PageParseResult] = field(default_factory=_empty_page_results)
    written: list[WrittenArtifact] = field(default_factory=_empty_written)
    manifest_paths: list[Path] = field(default_factory=_empty_path_list)

    @property
    def element_count(self) -> int:
        return len(self.registry)

    @property
    def artifact_count(self) -> int:
        return 0 if self.synthesis is None else len(self.synthesis)
