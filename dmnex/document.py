"""Read input declarations and item definitions out of a decoded DMN tree.

The tree is the mapping-of-mappings-and-lists form produced by
`dmnex.decode.decode_xml` (or any parser with the same conventions):
attributes carry a prefix, text sits under a text key, and repeated
elements are lists. Element keys are matched by local name, so
`dmn:inputData`, `semantic:inputData` and `inputData` are equivalent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .engine.types import FieldRef, InputVariable, TypeDefinition
from .errors import DocumentStructureError
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DmnDocument:
    inputs: tuple[InputVariable, ...]
    definitions: tuple[TypeDefinition, ...]


def local_name(key: str) -> str:
    return key.rsplit(":", 1)[-1]


@dataclass
class TreeReader:
    settings: Settings

    def attr(self, node: Any, name: str) -> Optional[str]:
        if not isinstance(node, dict):
            return None
        v = node.get(self.settings.attribute_prefix + name)
        return None if v is None else str(v)

    def children(self, node: Any, name: str) -> list[Any]:
        """All child elements with local name `name`, single children wrapped in a list."""
        if not isinstance(node, dict):
            return []
        prefix = self.settings.attribute_prefix
        out: list[Any] = []
        for k, v in node.items():
            if prefix and k.startswith(prefix):
                continue
            if local_name(k) != name:
                continue
            out.extend(v if isinstance(v, list) else [v])
        return out

    def child(self, node: Any, name: str) -> Any:
        found = self.children(node, name)
        return found[0] if found else None

    def text(self, node: Any) -> Optional[str]:
        if node is None:
            return None
        if isinstance(node, dict):
            v = node.get(self.settings.text_key)
            return None if v is None else str(v).strip()
        return str(node).strip()


def _allowed_texts(r: TreeReader, node: Any) -> list[Optional[str]]:
    # normally <allowedValues><text>..</text></allowedValues>; bare text is accepted too
    texts = [r.text(x) for x in r.children(node, "text")]
    return texts or [r.text(node)]


def read_document(tree: Any, settings: Optional[Settings] = None) -> DmnDocument:
    """Pull InputVariables and TypeDefinitions out of a decoded tree.

    Raises DocumentStructureError when there is no definitions container.
    """
    r = TreeReader(settings or Settings())

    definitions = r.child(tree, "definitions")
    if not isinstance(definitions, dict):
        raise DocumentStructureError("Invalid DMN file structure", "no definitions element found")

    inputs: list[InputVariable] = []
    for node in r.children(definitions, "inputData"):
        variable = r.child(node, "variable")
        name = r.attr(node, "name") or r.attr(variable, "name")
        if not name:
            log.warning("skipping inputData without a name (id=%s)", r.attr(node, "id"))
            continue
        inputs.append(InputVariable(name=name, type_ref=r.attr(variable, "typeRef")))

    types: list[TypeDefinition] = []
    for node in r.children(definitions, "itemDefinition"):
        name = r.attr(node, "name")
        if not name:
            continue
        fields = tuple(
            FieldRef(name=r.attr(c, "name") or "", type_ref=r.text(r.child(c, "typeRef")) or None)
            for c in r.children(node, "itemComponent")
        )
        allowed = tuple(t for av in r.children(node, "allowedValues") for t in _allowed_texts(r, av) if t)
        base = r.text(r.child(node, "typeRef")) or r.attr(node, "typeRef")
        types.append(TypeDefinition(name=name, fields=fields, allowed_values=allowed, base_type=base))

    log.debug("read %d inputs and %d item definitions", len(inputs), len(types))
    return DmnDocument(inputs=tuple(inputs), definitions=tuple(types))
