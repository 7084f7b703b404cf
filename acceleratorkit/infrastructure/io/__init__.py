"""Infrastructure I/O layer.

This package contains adapters for reading dictionary pages and writing
FHIR artifacts and implementation guide manifests.
"""

from .artifact_writer import FhirArtifactWriter
from .csv_reader import CSVReader, CSVReadOptions
from .exceptions import (
    AcceleratorKitInfrastructureError,
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
)
from .manifest_writer import ManifestWriter

__all__ = [
    "AcceleratorKitInfrastructureError",
    "CSVReadOptions",
    "CSVReader",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "FhirArtifactWriter",
    "ManifestWriter",
]
