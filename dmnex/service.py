from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .decode import check_filename, decode_xml
from .document import read_document
from .engine.pipeline import generate_examples
from .engine.types import ExampleValue
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ExampleService:
    settings: Settings

    def generate_from_file(self, filename: str, content: Union[str, bytes]) -> dict[str, ExampleValue]:
        """Gate -> decode -> read -> resolve/synthesize for one uploaded file."""
        check_filename(filename, self.settings.file_extension)
        tree = decode_xml(content, self.settings)
        document = read_document(tree, self.settings)
        examples = generate_examples(document)
        log.info(
            "%s: %d inputs, %d item definitions -> %d examples",
            filename,
            len(document.inputs),
            len(document.definitions),
            len(examples),
        )
        return examples
