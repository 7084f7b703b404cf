"""Artifact records produced by synthesis.

Records are immutable projections of a data element. ``to_fhir`` renders
each one as a FHIR R4 JSON-shaped dict whose key order follows the FHIR
element order, so encoders can serialize it without reordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from ...constants import FhirDefaults


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@runtime_checkable
class FhirArtifact(Protocol):
    resource_type: ClassVar[str]

    @property
    def id(self) -> str: ...

    @property
    def url(self) -> str: ...

    def to_fhir(self) -> dict[str, Any]: ...


@dataclass(frozen=True, slots=True)
class Coding:
    system: str
    code: str
    display: str | None = None

    def to_fhir(self) -> dict[str, Any]:
        return _compact(
            {"system": self.system, "code": self.code, "display": self.display}
        )


@dataclass(frozen=True, slots=True)
class Binding:
    value_set: str
    strength: str = FhirDefaults.BINDING_STRENGTH

    def to_fhir(self) -> dict[str, Any]:
        return {"strength": self.strength, "valueSet": self.value_set}


@dataclass(frozen=True, slots=True)
class ElementDefinitionRecord:
    path: str
    min: int | None = None
    max: str | None = None
    types: tuple[str, ...] = ()
    fixed_codeable_concept: tuple[Coding, ...] | None = None
    must_support: bool = False
    binding: Binding | None = None

    @property
    def id(self) -> str:
        return self.path

    def to_fhir(self) -> dict[str, Any]:
        fixed = None
        if self.fixed_codeable_concept is not None:
            fixed = {
                "coding": [coding.to_fhir() for coding in self.fixed_codeable_concept]
            }
        return _compact(
            {
                "id": self.id,
                "path": self.path,
                "min": self.min,
                "max": self.max,
                "type": [{"code": code} for code in self.types] or None,
                "fixedCodeableConcept": fixed,
                "mustSupport": self.must_support,
                "binding": self.binding.to_fhir() if self.binding else None,
            }
        )


@dataclass(frozen=True, slots=True)
class StructureDefinitionArtifact:
    resource_type: ClassVar[str] = "StructureDefinition"

    id: str
    url: str
    name: str
    type: str
    elements: tuple[ElementDefinitionRecord, ...]
    title: str | None = None
    description: str | None = None
    base_definition: str | None = None
    status: str = FhirDefaults.STATUS
    experimental: bool = False
    fhir_version: str = FhirDefaults.FHIR_VERSION
    kind: str = "resource"
    abstract: bool = False
    derivation: str = "constraint"

    def element(self, path: str) -> ElementDefinitionRecord | None:
        for element in self.elements:
            if element.path == path:
                return element
        return None

    def to_fhir(self) -> dict[str, Any]:
        return _compact(
            {
                "resourceType": self.resource_type,
                "id": self.id,
                "url": self.url,
                "name": self.name,
                "title": self.title,
                "status": self.status,
                "experimental": self.experimental,
                "description": self.description,
                "fhirVersion": self.fhir_version,
                "kind": self.kind,
                "abstract": self.abstract,
                "type": self.type,
                "baseDefinition": self.base_definition,
                "derivation": self.derivation,
                "differential": {
                    "element": [element.to_fhir() for element in self.elements]
                },
            }
        )


@dataclass(frozen=True, slots=True)
class Concept:
    code: str
    display: str | None = None

    def to_fhir(self) -> dict[str, Any]:
        return _compact({"code": self.code, "display": self.display})


@dataclass(frozen=True, slots=True)
class CodeSystemArtifact:
    resource_type: ClassVar[str] = "CodeSystem"

    id: str
    url: str
    name: str
    concepts: tuple[Concept, ...]
    title: str | None = None
    description: str | None = None
    value_set: str | None = None
    status: str = FhirDefaults.STATUS
    experimental: bool = False
    case_sensitive: bool = True
    content: str = "complete"

    def to_fhir(self) -> dict[str, Any]:
        return _compact(
            {
                "resourceType": self.resource_type,
                "id": self.id,
                "url": self.url,
                "name": self.name,
                "title": self.title,
                "status": self.status,
                "experimental": self.experimental,
                "description": self.description,
                "caseSensitive": self.case_sensitive,
                "valueSet": self.value_set,
                "content": self.content,
                "concept": [concept.to_fhir() for concept in self.concepts] or None,
            }
        )


@dataclass(frozen=True, slots=True)
class ValueSetInclude:
    system: str
    concepts: tuple[Concept, ...]

    def to_fhir(self) -> dict[str, Any]:
        return {
            "system": self.system,
            "concept": [concept.to_fhir() for concept in self.concepts],
        }


@dataclass(frozen=True, slots=True)
class ValueSetArtifact:
    resource_type: ClassVar[str] = "ValueSet"

    id: str
    url: str
    name: str
    includes: tuple[ValueSetInclude, ...]
    title: str | None = None
    description: str | None = None
    status: str = FhirDefaults.STATUS
    experimental: bool = False
    immutable: bool = True

    def to_fhir(self) -> dict[str, Any]:
        compose = None
        if self.includes:
            compose = {"include": [include.to_fhir() for include in self.includes]}
        return _compact(
            {
                "resourceType": self.resource_type,
                "id": self.id,
                "url": self.url,
                "name": self.name,
                "title": self.title,
                "status": self.status,
                "experimental": self.experimental,
                "description": self.description,
                "immutable": self.immutable,
                "compose": compose,
            }
        )
