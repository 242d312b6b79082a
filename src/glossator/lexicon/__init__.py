"""Lexicon loading and indexing.

Public API:
    parse_lexicon(csv_text) -> Lexicon
    load_lexicon(path) -> Lexicon
    build_index(lexemes) -> LexiconIndex
"""

from glossator.lexicon.index import (
    REQUIRED_COLUMNS,
    Lexeme,
    Lexicon,
    LexiconIndex,
    build_index,
)
from glossator.lexicon.loader import LexiconParseError, load_lexicon, parse_lexicon

__all__ = [
    "REQUIRED_COLUMNS",
    "Lexeme",
    "Lexicon",
    "LexiconIndex",
    "build_index",
    "LexiconParseError",
    "load_lexicon",
    "parse_lexicon",
]
