"""Unit tests for DictionaryProcessingUseCase."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

from acceleratorkit.application.dictionary_processing_use_case import (
    DictionaryProcessingDependencies,
    DictionaryProcessingUseCase,
)
from acceleratorkit.application.models import ProcessDictionaryRequest
from acceleratorkit.application.ports.repositories import WorkbookRepositoryPort
from acceleratorkit.application.ports.services import ArtifactWriterPort
from acceleratorkit.config import ProcessorConfig
from acceleratorkit.domain.exceptions import (
    InvalidConfigurationError,
    UnrecognizedTypeError,
)
from acceleratorkit.infrastructure.io.artifact_writer import FhirArtifactWriter
from acceleratorkit.infrastructure.io.manifest_writer import ManifestWriter
from acceleratorkit.infrastructure.logging import NullLogger


@pytest.fixture
def anc_page(page_rows, body_row):
    return page_rows(
        [
            body_row(
                label="Danger signs",
                name="Danger_Signs",
                type="MC (select multiple)",
                resource="Observation",
                openmrs_id="D0",
            ),
            body_row(choices="Bleeding", openmrs_id="D1"),
            body_row(choices="Fever", openmrs_id="D2", icd10="R50"),
            body_row(name="Hb_Level", type="Integer", required="Yes", resource="Observation"),
            body_row(name="Visit_Note", type="Text"),
        ]
    )


@pytest.fixture
def repository(anc_page):
    repository = Mock(spec=WorkbookRepositoryPort)
    repository.read_page.return_value = anc_page
    return repository


def _use_case(repository, artifact_writer=None):
    return DictionaryProcessingUseCase(
        DictionaryProcessingDependencies(
            logger=NullLogger(),
            workbook_repository=repository,
            artifact_writer=artifact_writer or FhirArtifactWriter(),
            manifest_writer=ManifestWriter(),
        )
    )


def _request(tmp_path, pages=("ANC",), encoding="json"):
    return ProcessDictionaryRequest(
        spreadsheet_path=Path("dictionary.xlsx"),
        pages=list(pages),
        config=ProcessorConfig(output_dir=tmp_path / "out", encoding=encoding),
    )


class TestDictionaryProcessingUseCase:
    """Test suite for a full dictionary run."""

    def test_execute_writes_artifacts_in_order(self, tmp_path, repository):
        response = _use_case(repository).execute(_request(tmp_path))

        assert response.element_count == 3
        assert [(w.resource_type, w.resource_id) for w in response.written] == [
            ("StructureDefinition", "danger-signs"),
            ("StructureDefinition", "hb-level"),
            ("CodeSystem", "danger-signs-codes"),
            ("ValueSet", "danger-signs-values"),
        ]
        assert response.artifact_count == 4
        for written in response.written:
            assert written.path.exists()
        value_set = json.loads(
            (tmp_path / "out/valueset/valueset-danger-signs-values.json").read_text(
                encoding="utf-8"
            )
        )
        assert value_set["resourceType"] == "ValueSet"

    def test_manifests_list_every_artifact(self, tmp_path, repository):
        response = _use_case(repository).execute(_request(tmp_path))

        ig_json, ig_xml = response.manifest_paths
        json_text = ig_json.read_bytes().decode("utf-8")
        assert json_text.startswith("{\r\n")
        assert '"StructureDefinition/hb-level"' in json_text
        assert '"ValueSet/danger-signs-values"' in json_text
        assert ig_xml.read_bytes().decode("utf-8").count("<resource>") == 4

    def test_xml_encoding(self, tmp_path, repository):
        response = _use_case(repository).execute(_request(tmp_path, encoding="xml"))

        assert all(w.path.suffix == ".xml" for w in response.written)
        ig_json = response.manifest_paths[0].read_bytes().decode("utf-8")
        assert "codesystem/codesystem-danger-signs-codes.xml" in ig_json

    def test_pages_read_in_order(self, tmp_path, repository):
        _use_case(repository).execute(_request(tmp_path, pages=("ANC", "", "PNC")))

        pages = [call.args[1] for call in repository.read_page.call_args_list]
        assert pages == ["ANC", "PNC"]

    def test_collect_elements_does_not_write(self, tmp_path, repository):
        writer = Mock(spec=ArtifactWriterPort)

        response = _use_case(repository, writer).collect_elements(_request(tmp_path))

        assert response.registry.names() == ["Danger_Signs", "Hb_Level", "Visit_Note"]
        assert response.synthesis is None
        writer.write.assert_not_called()

    def test_missing_spreadsheet_path(self, tmp_path, repository):
        request = _request(tmp_path)
        request.spreadsheet_path = None

        with pytest.raises(InvalidConfigurationError, match="spreadsheet path"):
            _use_case(repository).execute(request)

    def test_no_pages(self, tmp_path, repository):
        with pytest.raises(InvalidConfigurationError, match="at least one page"):
            _use_case(repository).execute(_request(tmp_path, pages=("",)))

    def test_unrecognized_type_writes_nothing(self, tmp_path, page_rows, body_row):
        repository = Mock(spec=WorkbookRepositoryPort)
        repository.read_page.return_value = page_rows(
            [body_row(name="Weird", type="Hologram", resource="Observation")]
        )
        writer = Mock(spec=ArtifactWriterPort)

        with pytest.raises(UnrecognizedTypeError):
            _use_case(repository, writer).execute(_request(tmp_path))

        writer.write.assert_not_called()
        assert not (tmp_path / "out").exists()
