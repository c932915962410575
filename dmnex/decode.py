"""XML -> generic tree decoding for DMN files.

Produces the same shape a browser-side XML parser would hand to the engine:

    {"dmn:definitions": {
        "_name": "loan",
        "dmn:inputData": [{"_name": "Applicant", "dmn:variable": {"_typeRef": "Person"}}],
        "dmn:itemDefinition": [...],
    }}

Element keys keep the document's namespace prefix, attributes are prefixed,
text of attribute-less leaves becomes a plain string and everything else
keeps its text under the configured text key.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from .errors import DocumentDecodeError, InvalidFileTypeError
from .settings import Settings

log = logging.getLogger(__name__)

# Always decoded as lists, even when only one occurrence is present.
ARRAY_ELEMENTS = frozenset({
    "inputData",
    "itemDefinition",
    "itemComponent",
    "binding",
    "contextEntry",
    "formalParameter",
})


def check_filename(filename: str, extension: str = ".dmn") -> None:
    if not (filename or "").endswith(extension):
        raise InvalidFileTypeError(
            "Invalid file type",
            f"Please upload a valid DMN file with {extension} extension",
        )


def split_tag(tag: str) -> tuple[Optional[str], str]:
    if tag.startswith("{"):
        ns, local = tag[1:].split("}", 1)
        return ns, local
    return None, tag


def declared_prefixes(content: Union[str, bytes]) -> dict[str, str]:
    """Namespace URI -> prefix as written in the document; first declaration wins."""
    # str input is already decoded text; only bytes defer to the XML declaration
    source = io.StringIO(content) if isinstance(content, str) else io.BytesIO(content)
    out: dict[str, str] = {}
    for _event, (prefix, uri) in ET.iterparse(source, events=("start-ns",)):
        out.setdefault(uri, prefix)
    return out


@dataclass
class TreeDecoder:
    settings: Settings
    prefixes: dict[str, str] = field(default_factory=dict)

    def key(self, tag: str) -> str:
        ns, local = split_tag(tag)
        prefix = self.prefixes.get(ns) if ns else None
        return f"{prefix}:{local}" if prefix else local

    def node(self, el: Element) -> Any:
        attrs = {self.settings.attribute_prefix + split_tag(k)[1]: v for k, v in el.attrib.items()}
        children = list(el)
        text = (el.text or "").strip()
        if not attrs and not children:
            return text

        out: dict[str, Any] = dict(attrs)
        for c in children:
            k = self.key(c.tag)
            v = self.node(c)
            if k in out:
                if not isinstance(out[k], list):
                    out[k] = [out[k]]
                out[k].append(v)
            elif split_tag(c.tag)[1] in ARRAY_ELEMENTS:
                out[k] = [v]
            else:
                out[k] = v
        if text:
            out[self.settings.text_key] = text
        return out


def decode_xml(content: Union[str, bytes], settings: Optional[Settings] = None) -> dict[str, Any]:
    """Parse XML text into the prefixed-attribute tree the document reader expects."""
    st = settings or Settings()
    try:
        root = ET.fromstring(content)
        prefixes = declared_prefixes(content)
    except ET.ParseError as e:
        raise DocumentDecodeError("Processing error", f"malformed XML: {e}") from e
    except DefusedXmlException as e:
        raise DocumentDecodeError("Processing error", f"forbidden XML construct: {e}") from e

    dec = TreeDecoder(settings=st, prefixes=prefixes)
    tree = {dec.key(root.tag): dec.node(root)}
    log.debug("decoded root element %s", next(iter(tree)))
    return tree
