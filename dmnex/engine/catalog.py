from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .types import TypeDefinition


@dataclass
class TypeCatalog:
    """Read-only index of a document's item definitions, keyed by name.

    Built once per document. Duplicate names keep the first definition.
    """

    by_name: dict[str, TypeDefinition] = field(default_factory=dict)

    @classmethod
    def build(cls, definitions: Iterable[TypeDefinition]) -> "TypeCatalog":
        by_name: dict[str, TypeDefinition] = {}
        for d in definitions:
            if d.name and d.name not in by_name:
                by_name[d.name] = d
        return cls(by_name=by_name)

    def lookup(self, name: Optional[str]) -> Optional[TypeDefinition]:
        if not name:
            return None
        return self.by_name.get(name)

    def __len__(self) -> int:
        return len(self.by_name)

    def names(self) -> list[str]:
        return list(self.by_name)
