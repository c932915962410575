from __future__ import annotations

import logging
from typing import Optional

from .catalog import TypeCatalog
from .literals import first_literal
from .types import Composite, Primitive, ResolvedShape, Unresolved

log = logging.getLogger(__name__)


def resolve(type_ref: Optional[str], catalog: TypeCatalog) -> ResolvedShape:
    """Resolve a typeRef against the catalog into a Primitive, Composite or Unresolved shape.

    Unknown names are not failures: they come back as Unresolved and are
    turned into placeholders during synthesis.
    """
    return _resolve(type_ref, catalog, frozenset())


def _resolve(type_ref: Optional[str], catalog: TypeCatalog, path: frozenset[str]) -> ResolvedShape:
    if not type_ref:
        return Unresolved(type_name=None)

    if type_ref in path:
        # cycle on the current path: stop expanding this branch
        log.debug("cyclic type reference %r truncated", type_ref)
        return Unresolved(type_name=type_ref)

    definition = catalog.lookup(type_ref)
    if definition is None:
        log.debug("type %r not in catalog; using placeholder", type_ref)
        return Unresolved(type_name=type_ref)

    if not definition.fields:
        if definition.allowed_values:
            literal = first_literal(definition.allowed_values)
            if literal is not None:
                return Primitive(literal=literal)
            log.debug("allowedValues of %r has no quoted literals", type_ref)
        return Primitive(literal=None, base_type=definition.base_type)

    inner = path | {type_ref}
    return Composite(
        fields=tuple((f.name, _resolve(f.type_ref, catalog, inner)) for f in definition.fields)
    )
