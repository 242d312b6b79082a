"""Exception hierarchy shared by the loaders and parsers.

Structural problems in user files (bad gloss syntax, malformed CSV, a
morphology config of the wrong shape) raise a subclass of GlossatorError.
Data gaps found during translation never raise; they show up as inline
diagnostics in the translated text instead.
"""

from __future__ import annotations


class GlossatorError(Exception):
    """Base class for all structural errors raised by glossator."""


class LineError(GlossatorError):
    """A structural error that can be pinned to a line of an input file."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        full_message = message
        if line_number is not None:
            full_message = f"Line {line_number}: {message}"
        super().__init__(full_message)
