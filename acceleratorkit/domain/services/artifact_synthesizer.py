from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...constants import FhirDefaults
from ..entities.artifacts import (
    Binding,
    CodeSystemArtifact,
    Concept,
    ElementDefinitionRecord,
    StructureDefinitionArtifact,
    ValueSetArtifact,
    ValueSetInclude,
)
from ..entities.input_types import ResourceKind
from ..exceptions import UnsupportedResourceKindError
from .canonical import canonical_url
from .type_mapping import (
    PROFILED_INPUT_TYPES,
    parse_input_type,
    to_observation_type,
)

if TYPE_CHECKING:
    from ..entities.artifacts import FhirArtifact
    from ..entities.dictionary_element import DictionaryCode, DictionaryElement
    from ..entities.terminology_systems import TerminologySystems


def _empty_profiles() -> list[StructureDefinitionArtifact]:
    return []


def _empty_code_systems() -> list[CodeSystemArtifact]:
    return []


def _empty_value_sets() -> list[ValueSetArtifact]:
    return []


@dataclass(slots=True)
class SynthesisResult:
    profiles: list[StructureDefinitionArtifact] = field(default_factory=_empty_profiles)
    code_systems: list[CodeSystemArtifact] = field(default_factory=_empty_code_systems)
    value_sets: list[ValueSetArtifact] = field(default_factory=_empty_value_sets)

    def artifacts(self) -> Iterator[FhirArtifact]:
        """Yield artifacts in write order: profiles, code systems, value sets."""
        yield from self.profiles
        yield from self.code_systems
        yield from self.value_sets

    def __len__(self) -> int:
        return len(self.profiles) + len(self.code_systems) + len(self.value_sets)


class ArtifactSynthesizer:
    """Projects registered data elements onto profiles, code systems and value sets.

    Only elements with a declared structural target and a profiled input
    type produce a profile. An unknown input type or resource kind on such
    an element aborts synthesis.
    """

    def __init__(self, systems: TerminologySystems, canonical_base: str) -> None:
        super().__init__()
        self.systems = systems
        self.canonical_base = canonical_base

    def synthesize(self, elements: Iterable[DictionaryElement]) -> SynthesisResult:
        result = SynthesisResult()
        for element in elements:
            if self.should_create_profile(element):
                result.profiles.append(self.create_profile(element, result))
        return result

    def should_create_profile(self, element: DictionaryElement) -> bool:
        if not element.fhir_type.is_declared or not element.type:
            return False
        return parse_input_type(element.type, element.name) in PROFILED_INPUT_TYPES

    def create_profile(
        self, element: DictionaryElement, result: SynthesisResult
    ) -> StructureDefinitionArtifact:
        resource_type = element.fhir_type.resource_type or ""
        kind = ResourceKind.lookup(resource_type)
        if kind is None:
            raise UnsupportedResourceKindError(resource_type, element.name)

        profile_id = element.id
        elements = [ElementDefinitionRecord(path=resource_type, must_support=False)]

        code_path = kind.fixed_code_path
        if code_path and element.code is not None:
            elements.append(
                ElementDefinitionRecord(
                    path=f"{resource_type}.{code_path}",
                    min=1,
                    max="1",
                    fixed_codeable_concept=(element.code.to_coding(),),
                    must_support=True,
                )
            )

        binding = None
        if element.choices:
            value_set = self._synthesize_terminology(element, result)
            binding = Binding(value_set=value_set.url)

        elements.append(
            ElementDefinitionRecord(
                path=f"{resource_type}.{element.fhir_type.value_path(kind)}",
                min=1 if element.is_required else 0,
                max=FhirDefaults.UNBOUNDED if element.is_multiple_choice else "1",
                types=(to_observation_type(element.type, element.name).value,),
                must_support=True,
                binding=binding,
            )
        )

        return StructureDefinitionArtifact(
            id=profile_id,
            url=canonical_url(
                self.canonical_base, StructureDefinitionArtifact.resource_type, profile_id
            ),
            name=element.name,
            title=element.label,
            description=element.description,
            type=resource_type,
            base_definition=element.fhir_type.base_profile,
            elements=tuple(elements),
        )

    def _synthesize_terminology(
        self, element: DictionaryElement, result: SynthesisResult
    ) -> ValueSetArtifact:
        label = element.label or element.name
        description = f"Codes representing possible values for the {label} element"
        value_set_id = f"{element.id}-values"
        value_set = ValueSetArtifact(
            id=value_set_id,
            url=canonical_url(
                self.canonical_base, ValueSetArtifact.resource_type, value_set_id
            ),
            name=f"{element.name}_values",
            title=f"{label} values",
            description=description,
            includes=self._group_external_choices(element.choices),
        )

        internal_choices = element.choices_for_system(self.systems.internal_system)
        if internal_choices:
            code_system_id = f"{element.id}-codes"
            all_internal = len(internal_choices) == len(element.choices)
            result.code_systems.append(
                CodeSystemArtifact(
                    id=code_system_id,
                    url=canonical_url(
                        self.canonical_base,
                        CodeSystemArtifact.resource_type,
                        code_system_id,
                    ),
                    name=f"{element.name}_codes",
                    title=f"{label} codes",
                    description=description,
                    value_set=value_set.url if all_internal else None,
                    concepts=tuple(
                        Concept(code=code.code, display=code.display or code.label)
                        for code in internal_choices
                    ),
                )
            )

        result.value_sets.append(value_set)
        return value_set

    def _group_external_choices(
        self, choices: list[DictionaryCode]
    ) -> tuple[ValueSetInclude, ...]:
        """Group non-internal choices by system.

        Configured systems come first in sorted key order, followed by any
        other system (e.g. one named in the FHIR code system column) in
        order of first appearance.
        """
        grouped: dict[str, list[DictionaryCode]] = {}
        for key in self.systems:
            system = self.systems[key]
            if self.systems.is_internal(system):
                continue
            codes = [choice for choice in choices if choice.system == system]
            if codes:
                grouped[system] = codes
        configured = set(self.systems.values())
        for choice in choices:
            if self.systems.is_internal(choice.system) or choice.system in configured:
                continue
            grouped.setdefault(choice.system, []).append(choice)
        return tuple(
            ValueSetInclude(
                system=system,
                concepts=tuple(
                    Concept(code=code.code, display=code.label) for code in codes
                ),
            )
            for system, codes in grouped.items()
        )
