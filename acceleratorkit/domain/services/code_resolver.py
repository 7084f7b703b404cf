from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.dictionary_element import DictionaryCode
from .column_index import HeaderField

if TYPE_CHECKING:
    from ..entities.sheet import SheetRow
    from ..entities.terminology_systems import TerminologySystems
    from .column_index import ColumnIndex

FHIR_DISPLAY_TAG = "FHIR"


class CodeResolver:
    """Resolves terminology codes for a row.

    Resolution order is fixed: the internal entity system (OpenMRS id,
    entity and parent columns), then the structural FHIR code system and
    code columns, then every configured external system in sorted key order.
    An absent column or an empty cell means "no code for this system".
    """

    def __init__(self, systems: TerminologySystems) -> None:
        super().__init__()
        self.systems = systems

    def resolve_internal(
        self, label: str, row: SheetRow, columns: ColumnIndex
    ) -> DictionaryCode | None:
        code_value = columns.read(row, HeaderField.OPENMRS_ENTITY_ID)
        if not code_value:
            return None
        return DictionaryCode(
            label=label,
            system=self.systems.internal_system,
            code=code_value,
            display=columns.read(row, HeaderField.OPENMRS_ENTITY) or None,
            parent=columns.read(row, HeaderField.OPENMRS_ENTITY_PARENT) or None,
        )

    def resolve_structural(
        self, label: str, row: SheetRow, columns: ColumnIndex
    ) -> DictionaryCode | None:
        system = columns.read(row, HeaderField.FHIR_CODE_SYSTEM)
        if not system:
            return None
        code_value = columns.read(row, HeaderField.FHIR_R4_CODE)
        if not code_value:
            return None
        return DictionaryCode(
            label=label,
            system=system,
            code=code_value,
            display=f"{label} ({FHIR_DISPLAY_TAG})",
        )

    def resolve_for_system(
        self, system_key: str, label: str, row: SheetRow, columns: ColumnIndex
    ) -> DictionaryCode | None:
        system = self.systems.get(system_key)
        if system is None:
            return None
        code_value = columns.read(row, system_key)
        if not code_value:
            return None
        return DictionaryCode(
            label=label,
            system=system,
            code=code_value,
            display=f"{label} ({system_key})",
        )

    def resolve_primary(
        self, label: str, row: SheetRow, columns: ColumnIndex
    ) -> DictionaryCode | None:
        code = self.resolve_internal(label, row, columns)
        if code is None:
            code = self.resolve_structural(label, row, columns)
        if code is None:
            for system_key in self.systems:
                code = self.resolve_for_system(system_key, label, row, columns)
                if code is not None:
                    break
        return code

    def resolve_choices(
        self, label: str, row: SheetRow, columns: ColumnIndex
    ) -> list[DictionaryCode]:
        """Resolve every code a choice row carries, in resolution order.

        Unlike ``resolve_primary`` this does not short-circuit: one choice
        row may describe the same value under several coding systems.
        """
        codes: list[DictionaryCode] = []
        if (code := self.resolve_internal(label, row, columns)) is not None:
            codes.append(code)
        if (code := self.resolve_structural(label, row, columns)) is not None:
            codes.append(code)
        for system_key in self.systems:
            code = self.resolve_for_system(system_key, label, row, columns)
            if code is not None:
                codes.append(code)
        return codes
