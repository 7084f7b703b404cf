"""Unit tests for the workbook repository."""

import pandas as pd
import pytest

from acceleratorkit.application.ports.repositories import WorkbookRepositoryPort
from acceleratorkit.domain.services.code_resolver import CodeResolver
from acceleratorkit.domain.services.element_builder import ElementBuilder
from acceleratorkit.domain.services.element_registry import ElementRegistry
from acceleratorkit.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
)
from acceleratorkit.infrastructure.repositories.workbook_repository import (
    WorkbookRepository,
)


@pytest.fixture
def workbook(tmp_path):
    path = tmp_path / "dictionary.xlsx"
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame(
            [
                ["ANC registration", None, None],
                ["Data Element Label", "Data Element Name", "OpenMRS Entity ID"],
                ["Gravida", "Gravida", 5624.0],
            ]
        ).to_excel(writer, sheet_name="Registration", header=False, index=False)
        pd.DataFrame([["Data Element Name"], ["Pulse"]]).to_excel(
            writer, sheet_name="Vitals", header=False, index=False
        )
    return path


class TestWorkbookRepository:
    """Test suite for WorkbookRepository."""

    def test_implements_port(self):
        assert isinstance(WorkbookRepository(), WorkbookRepositoryPort)

    def test_read_excel_page(self, workbook):
        rows = WorkbookRepository().read_page(workbook, "Registration")

        assert [row.index for row in rows] == [0, 1, 2]
        assert rows[0].cells == ("ANC registration", "", "")
        assert rows[2].cells == ("Gravida", "Gravida", "5624")

    def test_list_excel_pages(self, workbook):
        assert WorkbookRepository().list_pages(workbook) == ["Registration", "Vitals"]

    def test_missing_excel_page(self, workbook):
        with pytest.raises(DataSourceNotFoundError, match="Page not found"):
            WorkbookRepository().read_page(workbook, "Labs")

    def test_read_csv_directory_page(self, tmp_path, write_csv_page, body_row):
        write_csv_page(tmp_path / "dict", "Vitals", [body_row(name="Pulse", type="Integer")])

        rows = WorkbookRepository().read_page(tmp_path / "dict", "Vitals")

        assert len(rows) == 3
        assert rows[1].cells[1] == "Data Element Name"
        assert rows[2].cells[1] == "Pulse"
        assert rows[2].cells[0] == ""

    def test_list_csv_pages(self, tmp_path, write_csv_page):
        write_csv_page(tmp_path, "b", [])
        write_csv_page(tmp_path, "a", [])

        assert WorkbookRepository().list_pages(tmp_path) == ["a", "b"]

    def test_missing_csv_page(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError):
            WorkbookRepository().read_page(tmp_path, "Missing")

    def test_missing_source(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="Data dictionary not found"):
            WorkbookRepository().read_page(tmp_path / "nope.xlsx", "P")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "dictionary.ods"
        path.write_text("", encoding="utf-8")

        with pytest.raises(DataParseError, match="Unsupported format"):
            WorkbookRepository().read_page(path, "P")


class TestWorkbookMissingMarkers:
    """Cells that pandas would treat as missing must keep their text."""

    def test_na_and_none_cells_survive(self, tmp_path, systems):
        path = tmp_path / "dictionary.xlsx"
        pd.DataFrame(
            [
                ["ANC", None, None, None, None],
                ["Data Element Label", "Data Element Name", "Data Type", "Input Options", "OpenMRS Entity ID"],
                ["Group A", None, None, None, None],
                ["Next steps", "NA", None, None, None],
                ["E1 label", "E1", "MC (select one)", None, None],
                [None, None, None, "None", "1107"],
                [None, None, None, "N/A", "1175"],
            ]
        ).to_excel(path, sheet_name="Registration", header=False, index=False)

        rows = WorkbookRepository().read_page(path, "Registration")

        assert rows[3].cells[1] == "NA"
        assert rows[5].cells[3] == "None"
        assert rows[6].cells[3] == "N/A"

        registry = ElementRegistry()
        result = ElementBuilder(CodeResolver(systems), registry).process_page(
            "Registration", rows
        )

        element = registry.get("E1")
        assert element is not None
        assert element.group == "Group A"
        assert [(c.label, c.code) for c in element.choices] == [
            ("None", "1107"),
            ("N/A", "1175"),
        ]
        assert result.skipped_rows == 1
