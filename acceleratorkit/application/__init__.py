"""Application layer for the accelerator kit processor.

This layer contains the use case that orchestrates a dictionary run and
the ports (interfaces) it depends on.
"""

from .models import (
    ProcessDictionaryRequest,
    ProcessDictionaryResponse,
    WrittenArtifact,
)

__all__ = [
    "ProcessDictionaryRequest",
    "ProcessDictionaryResponse",
    "WrittenArtifact",
]
