from __future__ import annotations

from typing import Any, Optional

from .extract import extract_examples
from .types import ExampleValue
from ..document import DmnDocument, read_document
from ..settings import Settings


def generate_examples(document: DmnDocument) -> dict[str, ExampleValue]:
    return extract_examples(inputs=document.inputs, definitions=document.definitions)


def generate_from_tree(tree: Any, settings: Optional[Settings] = None) -> dict[str, ExampleValue]:
    # read
    document = read_document(tree, settings)
    # resolve + synthesize
    return generate_examples(document)
