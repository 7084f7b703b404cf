from __future__ import annotations

from collections.abc import Mapping

from ..entities.input_types import FhirType, InputType
from ..exceptions import UnrecognizedTypeError

PROFILED_INPUT_TYPES: frozenset[InputType] = frozenset(
    {
        InputType.IMAGE,
        InputType.NOTE,
        InputType.QR_CODE,
        InputType.TEXT,
        InputType.DATE,
        InputType.CHECKBOX,
        InputType.INTEGER,
        InputType.SELECT_ONE,
        InputType.SELECT_MULTIPLE,
    }
)

FHIR_TYPES: Mapping[InputType, FhirType] = {
    InputType.IMAGE: FhirType.ATTACHMENT,
    InputType.NOTE: FhirType.ANNOTATION,
    InputType.QR_CODE: FhirType.ATTACHMENT,
    InputType.TEXT: FhirType.MARKDOWN,
    InputType.DATE: FhirType.DATE,
    InputType.DATE_TIME: FhirType.DATE_TIME,
    InputType.TIME: FhirType.TIME,
    InputType.CHECKBOX: FhirType.BOOLEAN,
    InputType.INTEGER: FhirType.INTEGER,
    InputType.DECIMAL: FhirType.DECIMAL,
    InputType.QUANTITY: FhirType.QUANTITY,
    InputType.SELECT_ONE: FhirType.CODEABLE_CONCEPT,
    InputType.SELECT_MULTIPLE: FhirType.CODEABLE_CONCEPT,
}

OBSERVATION_NARROWING: Mapping[FhirType, FhirType] = {
    FhirType.MARKDOWN: FhirType.STRING,
    FhirType.DATE: FhirType.DATE_TIME,
}


def parse_input_type(type_code: str | None, element_name: str | None = None) -> InputType:
    input_type = InputType.lookup(type_code)
    if input_type is None:
        raise UnrecognizedTypeError(type_code or "", element_name)
    return input_type


def should_synthesize_profile(type_code: str | None) -> bool:
    """Whether elements of this input type get a profile.

    Date-time, time, decimal and quantity inputs map to FHIR types but are
    not profiled.
    """
    input_type = InputType.lookup(type_code)
    return input_type is not None and input_type in PROFILED_INPUT_TYPES


def to_fhir_type(type_code: str | None, element_name: str | None = None) -> FhirType:
    return FHIR_TYPES[parse_input_type(type_code, element_name)]


def to_observation_type(
    type_code: str | None, element_name: str | None = None
) -> FhirType:
    fhir_type = to_fhir_type(type_code, element_name)
    return OBSERVATION_NARROWING.get(fhir_type, fhir_type)
