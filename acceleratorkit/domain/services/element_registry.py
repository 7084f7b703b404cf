from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.dictionary_element import DictionaryElement


class ElementRegistry:
    """Owns every data element of a run, keyed by element name.

    Iteration follows first registration order. Registering a name again
    updates the stored element in place: scalar attributes are replaced by
    the newer values, choices keep accumulating.
    """

    def __init__(self) -> None:
        super().__init__()
        self._elements: dict[str, DictionaryElement] = {}

    def register(self, element: DictionaryElement) -> DictionaryElement:
        existing = self._elements.get(element.name)
        if existing is None:
            self._elements[element.name] = element
            return element
        existing.merge_from(element)
        return existing

    def get(self, name: str) -> DictionaryElement | None:
        return self._elements.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def __iter__(self) -> Iterator[DictionaryElement]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def names(self) -> list[str]:
        return list(self._elements)
