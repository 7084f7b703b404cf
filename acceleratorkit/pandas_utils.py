from typing import Any, cast

import pandas as pd

from .constants import MissingValues


def is_missing_scalar(value: object) -> bool:
    try:
        return cast("bool", pd.isna(cast("Any", value)))
    except (TypeError, ValueError):
        return False


def cell_as_string(value: object) -> str:
    """Render one spreadsheet cell the way the dictionary expects to read it.

    Missing cells, NaN and pandas' missing markers collapse to ``""``.
    Integral floats (Excel stores most numeric codes that way) lose the
    trailing ``.0`` so ``1234.0`` reads back as ``"1234"``.
    """
    if value is None or is_missing_scalar(value):
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value).strip()
    if text.upper() in MissingValues.STRING_MARKERS:
        return ""
    return text


def frame_to_rows(frame: pd.DataFrame) -> list[tuple[str, ...]]:
    return [
        tuple(cell_as_string(value) for value in record)
        for record in frame.itertuples(index=False, name=None)
    ]
