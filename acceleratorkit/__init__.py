"""Accelerator kit processor.

This package turns a WHO accelerator kit data dictionary spreadsheet into
FHIR R4 conformance artifacts.

Features:
- Data element extraction from workbook pages
- StructureDefinition profile synthesis
- CodeSystem and ValueSet synthesis for coded answers
- Implementation guide manifest fragments (ig.json, ig.xml)
- Value set expansion against a FHIR terminology server
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("acceleratorkit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from acceleratorkit.config import ConfigLoader, ProcessorConfig
from acceleratorkit.domain.entities.dictionary_element import (
    DictionaryCode,
    DictionaryElement,
)
from acceleratorkit.domain.services.artifact_synthesizer import ArtifactSynthesizer
from acceleratorkit.domain.services.element_builder import ElementBuilder

__all__ = [
    "__version__",
    # Configuration
    "ConfigLoader",
    "ProcessorConfig",
    # Data elements
    "DictionaryCode",
    "DictionaryElement",
    "ElementBuilder",
    # Synthesis
    "ArtifactSynthesizer",
]
