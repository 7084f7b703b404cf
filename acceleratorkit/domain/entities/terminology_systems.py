from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TerminologySystems(Mapping[str, str]):
    """External terminology systems keyed by their spreadsheet column name.

    Iteration always follows the sorted key order so that code resolution
    and value set grouping are reproducible between runs.
    """

    internal_system: str
    external: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ordered = {key: self.external[key] for key in sorted(self.external)}
        object.__setattr__(self, "external", ordered)

    def __getitem__(self, key: str) -> str:
        return self.external[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.external)

    def __len__(self) -> int:
        return len(self.external)

    def is_internal(self, system: str) -> bool:
        return system == self.internal_system

    def key_for(self, system: str) -> str | None:
        for key, uri in self.external.items():
            if uri == system:
                return key
        return None
