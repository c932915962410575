from __future__ import annotations

from typing import Optional

from .types import Composite, ExampleValue, Primitive, ResolvedShape, Unresolved


def placeholder(type_name: Optional[str]) -> ExampleValue:
    """Generic example for a primitive keyword (case-insensitive)."""
    t = (type_name or "string").lower()
    if t == "number":
        return 0
    if t == "boolean":
        return True
    return "example_" + t


def synthesize(shape: ResolvedShape) -> ExampleValue:
    if isinstance(shape, Primitive):
        if shape.literal is not None:
            return shape.literal
        return placeholder(shape.base_type)

    if isinstance(shape, Composite):
        # every declared field gets a key, placeholders included
        return {name: synthesize(sub) for name, sub in shape.fields}

    if isinstance(shape, Unresolved):
        return placeholder(shape.type_name)

    raise TypeError(f"not a resolved shape: {shape!r}")
