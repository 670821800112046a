from typing import List, Optional


class MzQCError(Exception):
    """Base class for every failure raised by the mzqc package."""


class DocumentIOError(MzQCError, OSError):
    """A path could not be opened, read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ParseError(MzQCError, ValueError):
    """Wire bytes were not a well-formed JSON document."""


class SchemaError(MzQCError):
    """A wire document failed a structural presence check.

    ``reason`` names the check that failed, ``errors`` holds the
    ValidationError records reported by that check.
    """

    def __init__(self, reason: str, errors: Optional[List] = None):
        super().__init__(reason)
        self.reason = reason
        self.errors = errors or []
