from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.dictionary_processing_use_case import (
    DictionaryProcessingDependencies,
    DictionaryProcessingUseCase,
)
from .io.artifact_writer import FhirArtifactWriter
from .io.csv_reader import CSVReader
from .io.manifest_writer import ManifestWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.workbook_repository import WorkbookRepository
from .terminology.fhir_terminology_client import FhirTerminologyClient

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..application.ports.repositories import WorkbookRepositoryPort
    from ..application.ports.services import (
        ArtifactWriterPort,
        LoggerPort,
        ManifestWriterPort,
        TerminologyServicePort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._csv_reader_instance: CSVReader | None = None
        self._workbook_repository_instance: WorkbookRepositoryPort | None = None
        self._artifact_writer_instance: ArtifactWriterPort | None = None
        self._manifest_writer_instance: ManifestWriterPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_csv_reader(self) -> CSVReader:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_workbook_repository(self) -> WorkbookRepositoryPort:
        if self._workbook_repository_instance is None:
            self._workbook_repository_instance = WorkbookRepository(
                csv_reader=self.create_csv_reader()
            )
        return self._workbook_repository_instance

    def create_artifact_writer(self) -> ArtifactWriterPort:
        if self._artifact_writer_instance is None:
            self._artifact_writer_instance = FhirArtifactWriter()
        return self._artifact_writer_instance

    def create_manifest_writer(self) -> ManifestWriterPort:
        if self._manifest_writer_instance is None:
            self._manifest_writer_instance = ManifestWriter()
        return self._manifest_writer_instance

    def create_terminology_client(
        self,
        address: str,
        *,
        headers: Sequence[str] = (),
        treat_canonical_tail_as_logical_id: bool = False,
    ) -> TerminologyServicePort:
        return FhirTerminologyClient(
            address,
            headers=headers,
            treat_canonical_tail_as_logical_id=treat_canonical_tail_as_logical_id,
            logger=self.create_logger(),
        )

    def create_dictionary_processing_use_case(self) -> DictionaryProcessingUseCase:
        dependencies = DictionaryProcessingDependencies(
            logger=self.create_logger(),
            workbook_repository=self.create_workbook_repository(),
            artifact_writer=self.create_artifact_writer(),
            manifest_writer=self.create_manifest_writer(),
        )
        return DictionaryProcessingUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._csv_reader_instance = None
        self._workbook_repository_instance = None
        self._artifact_writer_instance = None
        self._manifest_writer_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_workbook_repository(
        self, workbook_repository: WorkbookRepositoryPort
    ) -> None:
        self._workbook_repository_instance = workbook_repository

    def override_artifact_writer(self, artifact_writer: ArtifactWriterPort) -> None:
        self._artifact_writer_instance = artifact_writer


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
