"""Parse gloss syntax into Gloss trees.

Gloss syntax:
- Bare word: literal or pointer, depending on the mode
- ^word: explicit literal
- *word: explicit pointer
- stem#PL#NEG: inflections, applied left to right
- [part+part+...]: compound; each part is itself a gloss
- ?word: the leading ? marks a generated word and is ignored

Examples (implicit-pointers mode):
- "bear" -> Pointer("bear")
- "bear#PL" -> Inflection(Pointer("bear"), ("PL",))
- "[^pre+see]#PL" -> Inflection(Compound((Literal("pre"), Pointer("see"))), ("PL",))
"""

from __future__ import annotations

import re
from enum import Enum

from glossator.errors import GlossatorError
from glossator.gloss.ast import Gloss, compound, inflection, literal, pointer


class GlossMode(Enum):
    """Which variant a bare word denotes."""

    IMPLICIT_POINTERS = "implicit-pointers"
    IMPLICIT_LITERALS = "implicit-literals"


class GlossParseError(GlossatorError):
    """Raised when a string is not well-formed gloss syntax."""

    def __init__(self, raw: str, detail: str, position: int | None = None):
        self.raw = raw
        self.detail = detail
        self.position = position
        super().__init__(f'Failed to parse "{raw}": {detail}')


# Anything that is not whitespace or gloss punctuation. Unicode letters,
# digits, hyphens, apostrophes and underscores all count as word characters.
WORD_PATTERN = re.compile(r"[^\s#\[\]+*^?]+")


def as_mode(mode: GlossMode | str) -> GlossMode:
    """Accept a GlossMode or its string value ("implicit-pointers" etc.)."""
    if isinstance(mode, GlossMode):
        return mode
    try:
        return GlossMode(mode)
    except ValueError:
        valid = [m.value for m in GlossMode]
        raise ValueError(f"Invalid gloss mode '{mode}'. Must be one of: {valid}")


class _GlossReader:
    """Recursive-descent reader over a single gloss string."""

    def __init__(self, mode: GlossMode, raw: str):
        self.mode = mode
        self.raw = raw
        self.pos = 0

    def fail(self, expected: str) -> GlossParseError:
        if self.pos >= len(self.raw):
            found = "end of input"
        else:
            found = f'"{self.raw[self.pos]}"'
        return GlossParseError(
            self.raw, f"Expected {expected} but {found} found.", self.pos
        )

    def peek(self) -> str:
        return self.raw[self.pos] if self.pos < len(self.raw) else ""

    def read_word(self, expected: str) -> str:
        match = WORD_PATTERN.match(self.raw, self.pos)
        if not match:
            raise self.fail(expected)
        self.pos = match.end()
        return match.group()

    def read_gloss(self) -> Gloss:
        if self.peek() == "?":
            self.pos += 1

        term = self.read_term()

        names = []
        while self.peek() == "#":
            self.pos += 1
            names.append(self.read_word("an inflection name"))

        if names:
            return inflection(term, names)
        return term

    def read_term(self) -> Gloss:
        head = self.peek()
        if head == "[":
            self.pos += 1
            elements = [self.read_gloss()]
            while self.peek() == "+":
                self.pos += 1
                elements.append(self.read_gloss())
            if self.peek() != "]":
                raise self.fail('"+" or "]"')
            self.pos += 1
            return compound(elements)
        if head == "^":
            self.pos += 1
            return literal(self.read_word("a word"))
        if head == "*":
            self.pos += 1
            return pointer(self.read_word("a word"))

        word = self.read_word("a word")
        if self.mode is GlossMode.IMPLICIT_POINTERS:
            return pointer(word)
        return literal(word)

    def read(self) -> Gloss:
        gloss = self.read_gloss()
        if self.pos != len(self.raw):
            raise self.fail('"#" or end of input')
        return gloss


def parse_gloss(mode: GlossMode | str, raw: str) -> Gloss:
    """
    Parse a gloss string.

    Args:
        mode: Whether bare words are pointers or literals
        raw: Gloss syntax, e.g. "[^pre+^hyen#INC+AGT]#PL"

    Returns:
        The parsed Gloss tree

    Raises:
        GlossParseError: If raw is not well-formed gloss syntax
    """
    mode = as_mode(mode)

    # The empty string is a valid, empty bare word.
    if raw in ("", "?"):
        return pointer("") if mode is GlossMode.IMPLICIT_POINTERS else literal("")

    return _GlossReader(mode, raw).read()
