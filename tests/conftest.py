from collections.abc import Callable, Sequence
from pathlib import Path

import pandas as pd
import pytest

from acceleratorkit.constants import CodeSystems
from acceleratorkit.domain.entities.sheet import SheetRow
from acceleratorkit.domain.entities.terminology_systems import TerminologySystems

HEADER = (
    "Data Element Label",
    "Data Element Name",
    "Data Type",
    "Input Options",
    "Required",
    "Description",
    "OpenMRS Entity Parent",
    "OpenMRS Entity",
    "OpenMRS Entity ID",
    "HL7 FHIR R4 - Resource",
    "HL7 FHIR R4 - Base Profile",
    "HL7 FHIR R4 - Version Number",
    "ICD-10-WHO",
    "LOINC",
)

COLUMNS = {
    "label": 0,
    "name": 1,
    "type": 2,
    "choices": 3,
    "required": 4,
    "description": 5,
    "openmrs_parent": 6,
    "openmrs_entity": 7,
    "openmrs_id": 8,
    "resource": 9,
    "base_profile": 10,
    "version": 11,
    "icd10": 12,
    "loinc": 13,
}

OBSERVATION_PROFILE = "http://hl7.org/fhir/StructureDefinition/Observation"

RowFactory = Callable[..., tuple[str, ...]]
PageFactory = Callable[[Sequence[tuple[str, ...]]], list[SheetRow]]


def _cells(**values: str) -> tuple[str, ...]:
    cells = [""] * len(HEADER)
    for key, value in values.items():
        cells[COLUMNS[key]] = value
    return tuple(cells)


@pytest.fixture
def systems() -> TerminologySystems:
    return TerminologySystems(
        internal_system=CodeSystems.OPENMRS, external=CodeSystems.EXTERNAL
    )


@pytest.fixture
def body_row() -> RowFactory:
    """Build the cells of one body row from column keys (``name="E1"``)."""
    return _cells


@pytest.fixture
def page_rows() -> PageFactory:
    """Wrap body rows with a title row (index 0) and the header row (index 1)."""

    def _build(body: Sequence[tuple[str, ...]]) -> list[SheetRow]:
        records = [("WHO ANC data dictionary",), HEADER, *body]
        return [SheetRow(index=i, cells=tuple(r)) for i, r in enumerate(records)]

    return _build


@pytest.fixture
def write_csv_page() -> Callable[[Path, str, Sequence[tuple[str, ...]]], Path]:
    """Write a dictionary page as ``<page>.csv`` under a directory."""

    def _write(directory: Path, page: str, body: Sequence[tuple[str, ...]]) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        records = [("WHO ANC data dictionary",) + ("",) * (len(HEADER) - 1), HEADER, *body]
        path = directory / f"{page}.csv"
        pd.DataFrame(records).to_csv(path, header=False, index=False)
        return path

    return _write
