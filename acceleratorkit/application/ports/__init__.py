"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import WorkbookRepositoryPort
from .services import (
    ArtifactWriterPort,
    LoggerPort,
    ManifestWriterPort,
    TerminologyServicePort,
)

__all__ = [
    "ArtifactWriterPort",
    "LoggerPort",
    "ManifestWriterPort",
    "TerminologyServicePort",
    "WorkbookRepositoryPort",
]
