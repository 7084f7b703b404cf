"""Domain services.

Parsing (column index, code resolution, element building, registry) and
synthesis (type mapping, artifact synthesis, manifest fragments).
"""

from .artifact_synthesizer import ArtifactSynthesizer, SynthesisResult
from .code_resolver import CodeResolver
from .column_index import HEADER_LABELS, ColumnIndex, HeaderField
from .element_builder import (
    ElementBuilder,
    PageParseResult,
    PageParseState,
    ParserState,
)
from .element_registry import ElementRegistry
from .manifest import ManifestFragmentCollector
from .type_mapping import (
    parse_input_type,
    should_synthesize_profile,
    to_fhir_type,
    to_observation_type,
)

__all__ = [
    "HEADER_LABELS",
    "ArtifactSynthesizer",
    "CodeResolver",
    "ColumnIndex",
    "ElementBuilder",
    "ElementRegistry",
    "HeaderField",
    "ManifestFragmentCollector",
    "PageParseResult",
    "PageParseState",
    "ParserState",
    "SynthesisResult",
    "parse_input_type",
    "should_synthesize_profile",
    "to_fhir_type",
    "to_observation_type",
]
