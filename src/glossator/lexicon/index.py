"""Lexicon records and the id -> gloss index the translator reads."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from glossator.gloss.ast import Gloss

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("id", "translation", "generator")


@dataclass(frozen=True)
class Lexeme:
    """A single lexicon row."""

    id: str
    translation: Gloss
    generator: str = ""
    user_columns: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "user_columns", tuple(self.user_columns))


@dataclass(frozen=True)
class Lexicon:
    """A parsed lexicon file: header order plus rows in file order."""

    column_order: tuple[str, ...]
    lexemes: tuple[Lexeme, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "column_order", tuple(self.column_order))
        object.__setattr__(self, "lexemes", tuple(self.lexemes))

    @property
    def user_column_names(self) -> list[str]:
        """Header names other than id/translation/generator, in header order."""
        return [c for c in self.column_order if c not in REQUIRED_COLUMNS]


class LexiconIndex(Mapping[str, Gloss]):
    """Read-only mapping from lexeme id to its defining gloss.

    Built once from an ordered sequence of lexemes. When an id occurs more
    than once, the later lexeme wins. A missing id is an ordinary state,
    so get() returns None rather than raising.
    """

    def __init__(self, entries: Mapping[str, Gloss] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def build(cls, lexemes: Iterable[Lexeme]) -> "LexiconIndex":
        entries: dict[str, Gloss] = {}
        for lexeme in lexemes:
            if lexeme.id in entries:
                logger.warning(
                    f"Duplicate lexeme id '{lexeme.id}': later entry overrides earlier one"
                )
            entries[lexeme.id] = lexeme.translation
        logger.debug(f"Built lexicon index with {len(entries)} entries")
        return cls(entries)

    def get(self, lexeme_id: str, default: Gloss | None = None) -> Gloss | None:
        return self._entries.get(lexeme_id, default)

    def __getitem__(self, lexeme_id: str) -> Gloss:
        return self._entries[lexeme_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LexiconIndex({len(self)} entries)"


def build_index(lexemes: Iterable[Lexeme]) -> LexiconIndex:
    """Build a LexiconIndex; for duplicate ids the last lexeme wins."""
    return LexiconIndex.build(lexemes)
