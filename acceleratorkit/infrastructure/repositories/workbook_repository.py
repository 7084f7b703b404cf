from pathlib import Path
from typing import override

import pandas as pd

from ...application.ports.repositories import WorkbookRepositoryPort
from ...domain.entities.sheet import SheetRow
from ...pandas_utils import frame_to_rows
from ..io.csv_reader import CSVReader
from ..io.exceptions import DataParseError, DataSourceNotFoundError

EXCEL_SUFFIXES = (".xlsx", ".xlsm")


class WorkbookRepository(WorkbookRepositoryPort):
    """Reads data dictionary pages as rows of cell text.

    The source is either an Excel workbook, where a page is a sheet, or a
    directory of CSV exports, where page ``X`` is the file ``X.csv``.
    """

    def __init__(self, csv_reader: CSVReader | None = None) -> None:
        super().__init__()
        self._csv_reader = csv_reader or CSVReader()

    @override
    def read_page(self, source: Path, page: str) -> list[SheetRow]:
        path = Path(source)
        if not path.exists():
            raise DataSourceNotFoundError(f"Data dictionary not found: {path}")
        if path.is_dir():
            frame = self._csv_reader.read(path / f"{page}.csv")
        elif path.suffix.lower() in EXCEL_SUFFIXES:
            frame = self._read_sheet(path, page)
        else:
            supported = ", ".join(EXCEL_SUFFIXES)
            raise DataParseError(
                f"Unsupported format '{path.suffix}'. Supported: {supported} or a CSV directory"
            )
        return [
            SheetRow(index=index, cells=cells)
            for index, cells in enumerate(frame_to_rows(frame))
        ]

    @override
    def list_pages(self, source: Path) -> list[str]:
        path = Path(source)
        if not path.exists():
            raise DataSourceNotFoundError(f"Data dictionary not found: {path}")
        if path.is_dir():
            return sorted(csv.stem for csv in path.glob("*.csv"))
        try:
            with pd.ExcelFile(path) as workbook:
                return [str(name) for name in workbook.sheet_names]
        except (OSError, ValueError) as e:
            raise DataParseError(f"Failed to read Excel file {path}: {e}") from e

    def _read_sheet(self, path: Path, page: str) -> pd.DataFrame:
        try:
            with pd.ExcelFile(path) as workbook:
                if page not in workbook.sheet_names:
                    raise DataSourceNotFoundError(f"Page not found in {path.name}: {page}")
                return workbook.parse(
                    sheet_name=page, header=None, keep_default_na=False, na_values=[]
                )
        except DataSourceNotFoundError:
            raise
        except (OSError, ValueError) as e:
            raise DataParseError(f"Failed to read Excel file {path}: {e}") from e
