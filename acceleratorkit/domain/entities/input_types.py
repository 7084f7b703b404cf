from __future__ import annotations

from enum import StrEnum


class InputType(StrEnum):
    """Input widget types a data dictionary row may declare."""

    IMAGE = "Image"
    NOTE = "Note"
    QR_CODE = "QR Code"
    TEXT = "Text"
    DATE = "Date"
    DATE_TIME = "DateTime"
    TIME = "Time"
    CHECKBOX = "Checkbox"
    INTEGER = "Integer"
    DECIMAL = "Decimal"
    QUANTITY = "Quantity"
    SELECT_ONE = "MC (select one)"
    SELECT_MULTIPLE = "MC (select multiple)"

    @classmethod
    def lookup(cls, raw: str | None) -> InputType | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


class FhirType(StrEnum):
    ATTACHMENT = "Attachment"
    ANNOTATION = "Annotation"
    MARKDOWN = "markdown"
    STRING = "string"
    DATE = "date"
    DATE_TIME = "dateTime"
    TIME = "time"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DECIMAL = "decimal"
    QUANTITY = "Quantity"
    CODEABLE_CONCEPT = "CodeableConcept"


class ResourceKind(StrEnum):
    OBSERVATION = "Observation"
    PATIENT = "Patient"
    COVERAGE = "Coverage"
    ENCOUNTER = "Encounter"

    @classmethod
    def lookup(cls, raw: str | None) -> ResourceKind | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @property
    def default_value_path(self) -> str:
        if self is ResourceKind.OBSERVATION:
            return "value[x]"
        return "extension"

    @property
    def fixed_code_path(self) -> str | None:
        if self is ResourceKind.OBSERVATION:
            return "code"
        return None
