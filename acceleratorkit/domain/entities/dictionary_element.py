from __future__ import annotations

from dataclasses import dataclass, field

from ...constants import Markers
from ..exceptions import UnrecognizedElementNameError
from .artifacts import Coding
from .input_types import InputType, ResourceKind


def to_id(name: str | None) -> str:
    """Derive an artifact id from a data element name."""
    if name is None or not name.strip():
        raise UnrecognizedElementNameError("Name cannot be null or empty")
    return name.lower().replace("_", "-")


def to_boolean(value: str | None) -> bool:
    return value == Markers.AFFIRMATIVE


@dataclass(frozen=True, slots=True)
class DictionaryCode:
    label: str
    system: str
    code: str
    display: str | None = None
    parent: str | None = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("DictionaryCode requires a code value")

    def to_coding(self) -> Coding:
        return Coding(system=self.system, code=self.code, display=self.display)


@dataclass(frozen=True, slots=True)
class DictionaryFhirType:
    resource_type: str | None = None
    resource_path: str | None = None
    base_profile: str | None = None
    version: str | None = None

    @classmethod
    def from_cells(
        cls, resource: str, base_profile: str = "", version: str = ""
    ) -> DictionaryFhirType:
        """Build the structural target from the FHIR R4 resource columns.

        The resource cell may carry a dotted element path
        (``Observation.valueQuantity``). An empty resource cell yields an
        undeclared target regardless of the other two cells.
        """
        if not resource:
            return cls()
        resource_type, _, path = resource.partition(".")
        return cls(
            resource_type=resource_type.strip() or None,
            resource_path=path.strip() or None,
            base_profile=base_profile or None,
            version=version or None,
        )

    @property
    def is_declared(self) -> bool:
        return bool(self.resource_type)

    def value_path(self, kind: ResourceKind) -> str:
        return self.resource_path or kind.default_value_path


def _empty_choices() -> list[DictionaryCode]:
    return []


@dataclass(slots=True)
class DictionaryElement:
    name: str
    page: str | None = None
    group: str | None = None
    label: str | None = None
    info_icon: str | None = None
    due: str | None = None
    relevance: str | None = None
    description: str | None = None
    notes: str | None = None
    type: str | None = None
    calculation: str | None = None
    constraint: str | None = None
    required: str | None = None
    editable: str | None = None
    code: DictionaryCode | None = None
    fhir_type: DictionaryFhirType = field(default_factory=DictionaryFhirType)
    choices: list[DictionaryCode] = field(default_factory=_empty_choices)

    @property
    def id(self) -> str:
        return to_id(self.name)

    @property
    def is_required(self) -> bool:
        return to_boolean(self.required)

    @property
    def is_multiple_choice(self) -> bool:
        return InputType.lookup(self.type) is InputType.SELECT_MULTIPLE

    def choices_for_system(self, system: str) -> list[DictionaryCode]:
        return [choice for choice in self.choices if choice.system == system]

    def add_choice(self, code: DictionaryCode) -> None:
        self.choices.append(code)

    def merge_from(self, other: DictionaryElement) -> None:
        """Take ``other``'s scalar attributes, keeping accumulated choices.

        A ``None`` group on ``other`` keeps the group already recorded.
        """
        self.page = other.page
        self.group = other.group if other.group is not None else self.group
        self.label = other.label
        self.info_icon = other.info_icon
        self.due = other.due
        self.relevance = other.relevance
        self.description = other.description
        self.notes = other.notes
        self.type = other.type
        self.calculation = other.calculation
        self.constraint = other.constraint
        self.required = other.required
        self.editable = other.editable
        self.code = other.code
        self.fhir_type = other.fhir_type
        self.choices.extend(other.choices)
