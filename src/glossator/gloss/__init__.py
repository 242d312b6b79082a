"""Gloss expressions: the tree type, its parser, and its serializer.

Public API:
    parse_gloss(mode, raw) -> Gloss
    serialize_gloss(mode, gloss) -> str
    literal / pointer / inflection / compound constructors
"""

from glossator.gloss.ast import (
    Compound,
    Gloss,
    Inflection,
    Literal,
    Pointer,
    compound,
    inflection,
    literal,
    pointer,
)
from glossator.gloss.parser import GlossMode, GlossParseError, parse_gloss
from glossator.gloss.serializer import serialize_gloss

__all__ = [
    # Tree
    "Gloss",
    "Literal",
    "Pointer",
    "Inflection",
    "Compound",
    "literal",
    "pointer",
    "inflection",
    "compound",
    # Syntax
    "GlossMode",
    "GlossParseError",
    "parse_gloss",
    "serialize_gloss",
]
