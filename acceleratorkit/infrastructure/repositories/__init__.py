"""Repository adapters for reading data dictionaries."""

from .workbook_repository import WorkbookRepository

__all__ = ["WorkbookRepository"]
