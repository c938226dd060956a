"""Exception classes for Marksome.

Parsing never fails: malformed markup is reinterpreted as literal text.
These exceptions cover the layers around the parser.
"""

from __future__ import annotations


class MarksomeError(Exception):
    """Base exception for all Marksome errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MarksomeError):
    """Error during HTML rendering.

    Raised when the renderer encounters an unknown segment type or when a
    reference callback fails.
    """

    def __init__(self, message: str, reference: str | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            reference: Reference key being rendered, if any
        """
        self.message = message
        self.reference = reference

        location = f" (reference {reference!r})" if reference is not None else ""
        super().__init__(f"{message}{location}")
