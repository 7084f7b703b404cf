"""Unit tests for terminology code resolution."""

import pytest

from acceleratorkit.constants import CodeSystems
from acceleratorkit.domain.entities.sheet import SheetRow
from acceleratorkit.domain.services.code_resolver import CodeResolver
from acceleratorkit.domain.services.column_index import ColumnIndex

HEADER = SheetRow(
    index=1,
    cells=(
        "Data Element Name",
        "OpenMRS Entity Parent",
        "OpenMRS Entity",
        "OpenMRS Entity ID",
        "FHIR Code System",
        "HL7 FHIR R4 Code",
        "LOINC",
        "ICD-10-WHO",
    ),
)


def _row(*cells: str) -> SheetRow:
    return SheetRow(index=2, cells=cells)


@pytest.fixture
def columns(systems) -> ColumnIndex:
    return ColumnIndex.from_header_row(HEADER, system_keys=systems)


@pytest.fixture
def resolver(systems) -> CodeResolver:
    return CodeResolver(systems)


class TestResolvePrimary:
    """Test primary code priority order."""

    def test_internal_code_wins_over_external(self, resolver, columns):
        row = _row("Hb", "1000AAAA", "concept", "165395AAAA", "", "", "718-7", "")

        code = resolver.resolve_primary("Hb", row, columns)

        assert code is not None
        assert code.system == CodeSystems.OPENMRS
        assert code.code == "165395AAAA"
        assert code.display == "concept"
        assert code.parent == "1000AAAA"
        assert code.label == "Hb"

    def test_structural_code_comes_second(self, resolver, columns):
        row = _row("Hb", "", "", "", "http://example.org/cs", "hb", "718-7", "")

        code = resolver.resolve_primary("Hb", row, columns)

        assert code is not None
        assert code.system == "http://example.org/cs"
        assert code.code == "hb"
        assert code.display == "Hb (FHIR)"

    def test_structural_code_needs_both_cells(self, resolver, columns):
        row = _row("Hb", "", "", "", "http://example.org/cs", "", "718-7", "")

        code = resolver.resolve_primary("Hb", row, columns)

        assert code is not None
        assert code.system == "http://loinc.org"

    def test_external_systems_in_sorted_key_order(self, resolver, columns):
        row = _row("Hb", "", "", "", "", "", "718-7", "D64.9")

        code = resolver.resolve_primary("Hb", row, columns)

        assert code is not None
        assert code.system == "http://hl7.org/fhir/sid/icd-10"
        assert code.code == "D64.9"
        assert code.display == "Hb (ICD-10-WHO)"

    def test_no_code_anywhere(self, resolver, columns):
        assert resolver.resolve_primary("Hb", _row("Hb"), columns) is None

    def test_missing_columns_are_soft_absences(self, resolver):
        columns = ColumnIndex.from_header_row(SheetRow(index=1, cells=("Data Element Name",)))

        assert resolver.resolve_primary("Hb", _row("Hb"), columns) is None


class TestResolveForSystem:
    """Test resolution for a single configured system."""

    def test_unknown_system_key(self, resolver, columns):
        row = _row("Hb", "", "", "", "", "", "718-7", "")

        assert resolver.resolve_for_system("SNOMED", "Hb", row, columns) is None

    def test_configured_system_without_column(self, resolver, columns):
        row = _row("Hb", "", "", "", "", "", "718-7", "")

        assert resolver.resolve_for_system("SNOMED-CT", "Hb", row, columns) is None

    def test_configured_system_with_code(self, resolver, columns):
        row = _row("Hb", "", "", "", "", "", "718-7", "")

        code = resolver.resolve_for_system("LOINC", "Hb", row, columns)

        assert code is not None
        assert (code.system, code.code) == ("http://loinc.org", "718-7")


class TestResolveChoices:
    """Choice rows contribute one code per system that carries one."""

    def test_every_system_contributes(self, resolver, columns):
        row = _row("", "", "Yes", "1065AAAA", "http://example.org/cs", "y", "LA33-6", "")

        codes = resolver.resolve_choices("Yes", row, columns)

        assert [c.system for c in codes] == [
            CodeSystems.OPENMRS,
            "http://example.org/cs",
            "http://loinc.org",
        ]
        assert {c.label for c in codes} == {"Yes"}

    def test_row_without_codes(self, resolver, columns):
        assert resolver.resolve_choices("Yes", _row(""), columns) == []
