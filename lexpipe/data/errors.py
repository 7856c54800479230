"""
Resource errors for the data layer.

Raised while dictionaries, lexicons and matcher chains are being built.
Steady-state tokenization and lemmatization never raise these.
"""
from typing import Optional


class ResourceError(Exception):
    """Base exception for resource setup failures."""

    def __init__(self, message: str, resource: Optional[str] = None, line_no: Optional[int] = None):
        super().__init__(message)
        self.resource = resource
        self.line_no = line_no

    def __str__(self) -> str:
        base = super().__str__()
        if self.resource and self.line_no is not None:
            return f"{self.resource}:{self.line_no}: {base}"
        if self.resource:
            return f"{self.resource}: {base}"
        return base


class ResourceNotFoundError(ResourceError):
    """Raised when a resource file cannot be located."""
    pass


class MalformedResourceError(ResourceError):
    """Raised when a resource is present but cannot be parsed or compiled."""
    pass
