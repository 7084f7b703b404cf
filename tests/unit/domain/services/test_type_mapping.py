"""Unit tests for input type mapping."""

import pytest

from acceleratorkit.domain.entities.input_types import FhirType, InputType
from acceleratorkit.domain.exceptions import UnrecognizedTypeError
from acceleratorkit.domain.services.type_mapping import (
    FHIR_TYPES,
    parse_input_type,
    should_synthesize_profile,
    to_fhir_type,
    to_observation_type,
)


class TestShouldSynthesizeProfile:
    """Test the profile allow-list."""

    @pytest.mark.parametrize(
        "type_code",
        [
            "Image",
            "Note",
            "QR Code",
            "Text",
            "Date",
            "Checkbox",
            "Integer",
            "MC (select one)",
            "MC (select multiple)",
        ],
    )
    def test_profiled_types(self, type_code):
        assert should_synthesize_profile(type_code) is True

    @pytest.mark.parametrize("type_code", ["Decimal", "DateTime", "Time", "Quantity"])
    def test_excluded_types(self, type_code):
        assert should_synthesize_profile(type_code) is False

    @pytest.mark.parametrize("type_code", ["", None, "Calculation"])
    def test_unknown_types_are_not_profiled(self, type_code):
        assert should_synthesize_profile(type_code) is False


class TestTypeMapping:
    """Test structural and observation value types."""

    def test_mapping_is_total(self):
        assert set(FHIR_TYPES) == set(InputType)

    @pytest.mark.parametrize(
        ("type_code", "expected"),
        [
            ("Image", FhirType.ATTACHMENT),
            ("Note", FhirType.ANNOTATION),
            ("Text", FhirType.MARKDOWN),
            ("Checkbox", FhirType.BOOLEAN),
            ("Decimal", FhirType.DECIMAL),
            ("Quantity", FhirType.QUANTITY),
            ("MC (select one)", FhirType.CODEABLE_CONCEPT),
            ("MC (select multiple)", FhirType.CODEABLE_CONCEPT),
        ],
    )
    def test_to_fhir_type(self, type_code, expected):
        assert to_fhir_type(type_code) is expected

    def test_observation_narrowing(self):
        assert to_observation_type("Text") is FhirType.STRING
        assert to_observation_type("Date") is FhirType.DATE_TIME
        assert to_observation_type("Integer") is FhirType.INTEGER

    def test_unknown_type_raises(self):
        with pytest.raises(UnrecognizedTypeError, match="Unknown type code Calc"):
            parse_input_type("Calc", "Bmi")

    def test_error_carries_element_name(self):
        with pytest.raises(UnrecognizedTypeError) as excinfo:
            to_fhir_type("Slider", "Pain_Score")

        assert excinfo.value.type_code == "Slider"
        assert excinfo.value.element_name == "Pain_Score"
