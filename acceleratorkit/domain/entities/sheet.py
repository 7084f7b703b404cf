from dataclasses import dataclass

ABSENT_COLUMN = -1


@dataclass(frozen=True, slots=True)
class SheetRow:
    """One spreadsheet row: its zero-based position and its cell text."""

    index: int
    cells: tuple[str, ...] = ()

    def cell(self, position: int) -> str:
        if position < 0 or position >= len(self.cells):
            return ""
        return self.cells[position]

    def is_blank(self) -> bool:
        return not any(self.cells)
