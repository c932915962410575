from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

# Example values are plain JSON-ready trees.
ExampleValue = Union[int, bool, str, dict[str, "ExampleValue"]]


@dataclass(frozen=True)
class InputVariable:
    name: str
    type_ref: Optional[str]     # catalog type name or primitive keyword


@dataclass(frozen=True)
class FieldRef:
    name: str
    type_ref: Optional[str] = None   # absent -> generic primitive


@dataclass(frozen=True)
class TypeDefinition:
    name: str
    fields: tuple[FieldRef, ...] = ()
    allowed_values: tuple[str, ...] = ()   # raw allowedValues text, e.g. '"A","B"'
    base_type: Optional[str] = None         # the definition's own typeRef


@dataclass(frozen=True)
class Primitive:
    literal: Optional[str] = None
    base_type: Optional[str] = None


@dataclass(frozen=True)
class Composite:
    fields: tuple[tuple[str, "ResolvedShape"], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Unresolved:
    type_name: Optional[str] = None


ResolvedShape = Union[Primitive, Composite, Unresolved]
