"""Domain entities.

The data dictionary model (elements, codes, structural targets), the
spreadsheet row record and the synthesized artifact records.
"""

from .artifacts import (
    Binding,
    CodeSystemArtifact,
    Coding,
    Concept,
    ElementDefinitionRecord,
    FhirArtifact,
    StructureDefinitionArtifact,
    ValueSetArtifact,
    ValueSetInclude,
)
from .dictionary_element import (
    DictionaryCode,
    DictionaryElement,
    DictionaryFhirType,
    to_boolean,
    to_id,
)
from .input_types import FhirType, InputType, ResourceKind
from .sheet import ABSENT_COLUMN, SheetRow
from .terminology_systems import TerminologySystems

__all__ = [
    # Dictionary model
    "DictionaryCode",
    "DictionaryElement",
    "DictionaryFhirType",
    "to_boolean",
    "to_id",
    # Vocabularies
    "FhirType",
    "InputType",
    "ResourceKind",
    "TerminologySystems",
    # Spreadsheet rows
    "ABSENT_COLUMN",
    "SheetRow",
    # Artifacts
    "Binding",
    "CodeSystemArtifact",
    "Coding",
    "Concept",
    "ElementDefinitionRecord",
    "FhirArtifact",
    "StructureDefinitionArtifact",
    "ValueSetArtifact",
    "ValueSetInclude",
]
