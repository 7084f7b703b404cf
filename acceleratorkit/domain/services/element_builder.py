"""Row interpretation for data dictionary pages.

A page is read top to bottom. Rows above the header row are ignored, the
header row defines the column layout, and every later row either opens a
data element, adds choices to the open element, names a group, or is inert.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from ...constants import Defaults, Markers
from ..entities.dictionary_element import DictionaryElement, DictionaryFhirType
from .column_index import ColumnIndex, HeaderField

if TYPE_CHECKING:
    from ..entities.sheet import SheetRow
    from .code_resolver import CodeResolver
    from .element_registry import ElementRegistry


class ParserState(Enum):
    AWAITING_HEADER = auto()
    IN_HEADER = auto()
    IN_BODY = auto()


def _empty_names() -> list[str]:
    return []


@dataclass(slots=True)
class PageParseResult:
    page: str
    rows_read: int = 0
    elements_registered: int = 0
    choices_added: int = 0
    groups_seen: int = 0
    skipped_rows: int = 0
    missing_columns: tuple[str, ...] = ()
    uncoded_elements: list[str] = field(default_factory=_empty_names)


@dataclass(slots=True)
class PageParseState:
    page: str
    state: ParserState = ParserState.AWAITING_HEADER
    columns: ColumnIndex = field(default_factory=ColumnIndex)
    current_group: str | None = None
    open_element: DictionaryElement | None = None
    result: PageParseResult = field(init=False)

    def __post_init__(self) -> None:
        self.result = PageParseResult(page=self.page)


class ElementBuilder:
    pass

    def __init__(
        self,
        resolver: CodeResolver,
        registry: ElementRegistry,
        *,
        header_row: int = Defaults.HEADER_ROW,
    ) -> None:
        super().__init__()
        self.resolver = resolver
        self.registry = registry
        self.header_row = header_row

    def process_page(self, page: str, rows: Iterable[SheetRow]) -> PageParseResult:
        state = PageParseState(page=page)
        for row in rows:
            state.result.rows_read += 1
            self._advance(state, row)
            if state.state is ParserState.IN_HEADER:
                state.columns = ColumnIndex.from_header_row(
                    row, system_keys=self.resolver.systems
                )
                state.result.missing_columns = tuple(
                    str(f) for f in state.columns.missing_fields()
                )
                state.state = ParserState.IN_BODY
            elif state.state is ParserState.IN_BODY:
                self._consume_body_row(state, row)
        return state.result

    def _advance(self, state: PageParseState, row: SheetRow) -> None:
        if row.index < self.header_row:
            state.state = ParserState.AWAITING_HEADER
        elif row.index == self.header_row:
            state.state = ParserState.IN_HEADER
        else:
            state.state = ParserState.IN_BODY

    def _consume_body_row(self, state: PageParseState, row: SheetRow) -> None:
        columns = state.columns
        label = columns.read(row, HeaderField.LABEL)
        type_code = columns.read(row, HeaderField.TYPE)
        name = columns.read(row, HeaderField.NAME)

        if not name:
            if state.open_element is not None:
                self._add_choices(state, state.open_element, row)
            elif not type_code:
                state.current_group = label or None
                state.result.groups_seen += 1
            return

        if name == Markers.SKIPPED_ELEMENT_NAME:
            # Reserved for plan definition rows; nothing is generated yet.
            state.result.skipped_rows += 1
            return

        if state.open_element is not None and state.open_element.name == name:
            return

        element = self._build_element(state, row, name, label, type_code)
        if element.code is None:
            state.result.uncoded_elements.append(name)
        state.open_element = self.registry.register(element)
        state.result.elements_registered += 1

    def _add_choices(
        self, state: PageParseState, element: DictionaryElement, row: SheetRow
    ) -> None:
        choice_label = state.columns.read(row, HeaderField.CHOICES)
        if not choice_label:
            return
        for code in self.resolver.resolve_choices(choice_label, row, state.columns):
            element.add_choice(code)
            state.result.choices_added += 1

    def _build_element(
        self,
        state: PageParseState,
        row: SheetRow,
        name: str,
        label: str,
        type_code: str,
    ) -> DictionaryElement:
        columns = state.columns

        def cell(key: str) -> str | None:
            return columns.read(row, key) or None

        return DictionaryElement(
            name=name,
            page=state.page,
            group=state.current_group,
            label=label or None,
            info_icon=cell(HeaderField.INFO_ICON),
            due=cell(HeaderField.DUE),
            relevance=cell(HeaderField.RELEVANCE),
            description=cell(HeaderField.DESCRIPTION),
            notes=cell(HeaderField.NOTES),
            type=type_code or None,
            calculation=cell(HeaderField.CALCULATION),
            constraint=cell(HeaderField.CONSTRAINT),
            required=cell(HeaderField.REQUIRED),
            editable=cell(HeaderField.EDITABLE),
            code=self.resolver.resolve_primary(name, row, columns),
            fhir_type=DictionaryFhirType.from_cells(
                columns.read(row, HeaderField.FHIR_R4_RESOURCE),
                columns.read(row, HeaderField.FHIR_R4_BASE_PROFILE),
                columns.read(row, HeaderField.FHIR_R4_VERSION_NUMBER),
            ),
        )
