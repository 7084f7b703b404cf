from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.sheet import SheetRow


@runtime_checkable
class WorkbookRepositoryPort(Protocol):
    pass

    def read_page(self, source: Path, page: str) -> list[SheetRow]: ...

    def list_pages(self, source: Path) -> list[str]: ...
