from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True)
class CSVReadOptions:
    encoding: str = "utf-8"
    keep_blank_lines: bool = True


class CSVReader:
    """Reads a dictionary page exported as CSV.

    No header is inferred: the element builder decides which row is the
    header, so the frame keeps every row in file order. Rows may be ragged
    (title rows above the header are usually short), so the frame is as
    wide as the widest row.
    """

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            width = self._max_width(path, options.encoding)
            if width == 0:
                raise DataParseError(f"CSV file is empty: {path}")
            return pd.read_csv(
                path,
                header=None,
                names=list(range(width)),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=not options.keep_blank_lines,
                encoding=options.encoding,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e

    def _max_width(self, path: Path, encoding: str) -> int:
        with path.open(newline="", encoding=encoding) as handle:
            return max((len(record) for record in csv.reader(handle)), default=0)
