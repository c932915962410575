"""Exception hierarchy for dmnex.

Unresolved type references are not errors; they surface as placeholder
example values. Only problems that make a whole document unusable raise.
"""

from __future__ import annotations


class DmnexError(Exception):
    """Base exception; carries a short message plus human-readable details."""

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(f"{message}: {details}" if details else message)
        self.message = message
        self.details = details

    def as_dict(self) -> dict[str, str]:
        return {"message": self.message, "details": self.details}


class InvalidFileTypeError(DmnexError):
    """Rejected by the file-acceptance gate before decoding."""


class DocumentDecodeError(DmnexError):
    """The file is not well-formed (or safe) XML."""


class DocumentStructureError(DmnexError):
    """The decoded tree lacks the definitions container."""
