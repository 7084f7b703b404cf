"""Orchestration of one data dictionary run.

A run reads every requested page in order, folds the rows into a single
element registry, synthesizes the conformance artifacts and writes them,
followed by the two implementation guide manifests. Any error aborts the
run; nothing is retried and partial output is not cleaned up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.entities.terminology_systems import TerminologySystems
from ..domain.exceptions import InvalidConfigurationError
from ..domain.services.artifact_synthesizer import ArtifactSynthesizer
from ..domain.services.code_resolver import CodeResolver
from ..domain.services.element_builder import ElementBuilder
from ..domain.services.element_registry import ElementRegistry
from ..domain.services.manifest import ManifestFragmentCollector
from .models import ProcessDictionaryResponse, WrittenArtifact

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import ProcessorConfig
    from .models import ProcessDictionaryRequest
    from .ports.repositories import WorkbookRepositoryPort
    from .ports.services import ArtifactWriterPort, LoggerPort, ManifestWriterPort


@dataclass(slots=True)
class DictionaryProcessingDependencies:
    logger: LoggerPort
    workbook_repository: WorkbookRepositoryPort
    artifact_writer: ArtifactWriterPort
    manifest_writer: ManifestWriterPort


class DictionaryProcessingUseCase:
    pass

    def __init__(self, dependencies: DictionaryProcessingDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._workbook_repository = dependencies.workbook_repository
        self._artifact_writer = dependencies.artifact_writer
        self._manifest_writer = dependencies.manifest_writer

    def execute(self, request: ProcessDictionaryRequest) -> ProcessDictionaryResponse:
        response = self.collect_elements(request)
        config = request.config
        systems = _terminology_systems(config)

        synthesis = ArtifactSynthesizer(systems, config.canonical_base).synthesize(
            response.registry
        )
        response.synthesis = synthesis
        self.logger.log_synthesis_complete(
            profiles=len(synthesis.profiles),
            code_systems=len(synthesis.code_systems),
            value_sets=len(synthesis.value_sets),
        )

        manifest = ManifestFragmentCollector(config.encoding)
        for artifact in synthesis.artifacts():
            path = self._artifact_writer.write(
                artifact, response.output_dir, config.encoding
            )
            manifest.add(artifact.resource_type, artifact.id)
            response.written.append(
                WrittenArtifact(
                    resource_type=artifact.resource_type,
                    resource_id=artifact.id,
                    path=path,
                )
            )
            self.logger.log_artifact_written(artifact.resource_type, artifact.id, path)

        ig_json_path, ig_xml_path = self._manifest_writer.write(
            response.output_dir,
            ig_json=manifest.render_ig_json(),
            ig_xml=manifest.render_ig_xml(),
        )
        response.manifest_paths.extend([ig_json_path, ig_xml_path])
        self.logger.verbose(f"Manifest fragments: {len(manifest)}")
        self.logger.log_final_stats()
        return response

    def collect_elements(
        self, request: ProcessDictionaryRequest
    ) -> ProcessDictionaryResponse:
        """Parse the requested pages into a registry without synthesizing."""
        source = self._validate(request)
        config = request.config
        self.logger.log_run_start(source, list(request.pages), config.output_dir)

        registry = ElementRegistry()
        builder = ElementBuilder(
            CodeResolver(_terminology_systems(config)),
            registry,
            header_row=config.header_row,
        )
        response = ProcessDictionaryResponse(
            source=source, output_dir=config.output_dir, registry=registry
        )
        for page in request.pages:
            rows = self._workbook_repository.read_page(source, page)
            self.logger.log_page_loaded(page, len(rows))
            result = builder.process_page(page, rows)
            response.page_results.append(result)
            self.logger.log_page_complete(result)
        return response

    @staticmethod
    def _validate(request: ProcessDictionaryRequest) -> Path:
        if request.spreadsheet_path is None or not str(request.spreadsheet_path):
            raise InvalidConfigurationError("spreadsheet path is required")
        pages = [page for page in request.pages if page]
        if not pages:
            raise InvalidConfigurationError("at least one page is required")
        request.pages = pages
        return request.spreadsheet_path


def _terminology_systems(config: ProcessorConfig) -> TerminologySystems:
    return TerminologySystems(
        internal_system=config.internal_system, external=config.code_systems
    )
