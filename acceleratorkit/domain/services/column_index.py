from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum

from ..entities.sheet import ABSENT_COLUMN, SheetRow


class HeaderField(StrEnum):
    LABEL = "Label"
    NAME = "Name"
    DUE = "Due"
    RELEVANCE = "Relevance"
    INFO_ICON = "InfoIcon"
    DESCRIPTION = "Description"
    NOTES = "Notes"
    TYPE = "Type"
    CHOICES = "Choices"
    CALCULATION = "Calculation"
    CONSTRAINT = "Constraint"
    REQUIRED = "Required"
    EDITABLE = "Editable"
    OPENMRS_ENTITY_PARENT = "OpenMRSEntityParent"
    OPENMRS_ENTITY = "OpenMRSEntity"
    OPENMRS_ENTITY_ID = "OpenMRSEntityId"
    FHIR_R4_RESOURCE = "FhirR4Resource"
    FHIR_R4_BASE_PROFILE = "FhirR4BaseProfile"
    FHIR_R4_VERSION_NUMBER = "FhirR4VersionNumber"
    FHIR_CODE_SYSTEM = "FhirCodeSystem"
    FHIR_R4_CODE = "FhirR4Code"


HEADER_LABELS: Mapping[str, HeaderField] = {
    "data element label": HeaderField.LABEL,
    "data element name": HeaderField.NAME,
    "due": HeaderField.DUE,
    "relevance": HeaderField.RELEVANCE,
    "info icon": HeaderField.INFO_ICON,
    "description": HeaderField.DESCRIPTION,
    "notes": HeaderField.NOTES,
    "data type": HeaderField.TYPE,
    "input options": HeaderField.CHOICES,
    "calculation": HeaderField.CALCULATION,
    "validation required": HeaderField.CONSTRAINT,
    "required": HeaderField.REQUIRED,
    "editable": HeaderField.EDITABLE,
    "openmrs entity parent": HeaderField.OPENMRS_ENTITY_PARENT,
    "openmrs entity": HeaderField.OPENMRS_ENTITY,
    "openmrs entity id": HeaderField.OPENMRS_ENTITY_ID,
    "hl7 fhir r4 - resource": HeaderField.FHIR_R4_RESOURCE,
    "hl7 fhir r4 - base profile": HeaderField.FHIR_R4_BASE_PROFILE,
    "hl7 fhir r4 - version number": HeaderField.FHIR_R4_VERSION_NUMBER,
    "fhir code system": HeaderField.FHIR_CODE_SYSTEM,
    "hl7 fhir r4 code": HeaderField.FHIR_R4_CODE,
}


class ColumnIndex:
    """Header label to column position map for one sheet.

    Keys are either a ``HeaderField`` or the configured key of an external
    terminology system (its column carries the system's name). Looking up a
    key the header row did not contain yields ``ABSENT_COLUMN``, and reading
    a cell through an absent column yields ``""``.
    """

    def __init__(self, positions: Mapping[str, int] | None = None) -> None:
        super().__init__()
        self._positions: dict[str, int] = dict(positions or {})

    @classmethod
    def from_header_row(
        cls, row: SheetRow, system_keys: Iterable[str] = ()
    ) -> ColumnIndex:
        system_labels = {key.lower(): key for key in system_keys}
        positions: dict[str, int] = {}
        for position, raw in enumerate(row.cells):
            header = raw.strip().lower()
            if not header:
                continue
            if header in HEADER_LABELS:
                positions[HEADER_LABELS[header]] = position
            elif header in system_labels:
                positions[system_labels[header]] = position
        return cls(positions)

    def position(self, key: str) -> int:
        return self._positions.get(key, ABSENT_COLUMN)

    def has(self, key: str) -> bool:
        return key in self._positions

    def missing_fields(self) -> tuple[HeaderField, ...]:
        return tuple(f for f in HeaderField if f not in self._positions)

    def read(self, row: SheetRow, key: str) -> str:
        return row.cell(self.position(key))

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return f"ColumnIndex({self._positions!r})"
