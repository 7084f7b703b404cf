from typing import ClassVar


class Defaults:
    OUTPUT_DIR = "output"
    ENCODING = "json"
    CANONICAL_BASE = "http://fhir.org/guides/who/anc-cds"
    HEADER_ROW = 1
    CONFIG_FILE = "acceleratorkit.toml"


class Encodings:
    JSON = "json"
    XML = "xml"
    SUPPORTED: ClassVar[tuple[str, ...]] = ("json", "xml")


class CodeSystems:
    OPENMRS = "http://openmrs.org/concepts"
    EXTERNAL: ClassVar[dict[str, str]] = {
        "ICD-10-WHO": "http://hl7.org/fhir/sid/icd-10",
        "SNOMED-CT": "http://snomed.info/sct",
        "LOINC": "http://loinc.org",
        "RxNorm": "http://www.nlm.nih.gov/research/umls/rxnorm",
    }


class Markers:
    SKIPPED_ELEMENT_NAME = "NA"
    AFFIRMATIVE = "Yes"


class FhirDefaults:
    FHIR_VERSION = "4.0.0"
    NAMESPACE = "http://hl7.org/fhir"
    STATUS = "draft"
    BINDING_STRENGTH = "required"
    UNBOUNDED = "*"
    GROUPING_ID = "main"


class EnvVars:
    OUTPUT_DIR = "ACCELERATOR_KIT_OUTPUT_DIR"
    ENCODING = "ACCELERATOR_KIT_ENCODING"
    CANONICAL_BASE = "ACCELERATOR_KIT_CANONICAL_BASE"


class MissingValues:
    STRING_MARKERS: ClassVar[frozenset[str]] = frozenset({"NAN", "<NA>"})
