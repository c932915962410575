from __future__ import annotations

from typing import Iterable

from .catalog import TypeCatalog
from .resolve import resolve
from .synthesize import synthesize
from .types import ExampleValue, InputVariable, TypeDefinition


def extract_examples(
    *, inputs: Iterable[InputVariable], definitions: Iterable[TypeDefinition]
) -> dict[str, ExampleValue]:
    catalog = TypeCatalog.build(definitions)
    out: dict[str, ExampleValue] = {}
    for var in inputs:
        # later duplicates overwrite earlier ones
        out[var.name] = synthesize(resolve(var.type_ref, catalog))
    return out
