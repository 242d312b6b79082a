"""Gloss expression tree.

A gloss is one of four variants:

    Literal      a surface string, translated to itself
    Pointer      a reference to a lexicon entry
    Inflection   a stem plus an ordered list of inflection names
    Compound     an ordered list of glosses joined by boundary rules

All variants are frozen dataclasses, so structurally equal trees compare
equal and can be used as dict keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Literal:
    """A surface string."""

    string: str


@dataclass(frozen=True)
class Pointer:
    """A reference to a lexeme by id."""

    lexeme: str


@dataclass(frozen=True)
class Inflection:
    """A stem with inflections applied left to right."""

    stem: "Gloss"
    inflections: tuple[str, ...]

    def __post_init__(self):
        if isinstance(self.inflections, str):
            raise TypeError(
                "inflections must be a sequence of names, not a string: "
                f"{self.inflections!r}"
            )
        object.__setattr__(self, "inflections", tuple(self.inflections))


@dataclass(frozen=True)
class Compound:
    """Adjacent glosses joined by compounding boundary rules."""

    elements: tuple["Gloss", ...]

    def __post_init__(self):
        if isinstance(self.elements, str):
            raise TypeError(
                "elements must be a sequence of glosses, not a string: "
                f"{self.elements!r}"
            )
        object.__setattr__(self, "elements", tuple(self.elements))


Gloss = Union[Literal, Pointer, Inflection, Compound]


def literal(string: str) -> Literal:
    return Literal(string)


def pointer(lexeme: str) -> Pointer:
    return Pointer(lexeme)


def inflection(stem: Gloss, inflections: Iterable[str]) -> Inflection:
    return Inflection(stem, inflections)


def compound(elements: Iterable[Gloss]) -> Compound:
    return Compound(elements)


def unknown_gloss(gloss: object) -> TypeError:
    """Error for a value that is not one of the four gloss variants.

    Every function that dispatches on gloss type ends with
    ``raise unknown_gloss(gloss)`` so a new variant cannot slip through
    silently.
    """
    return TypeError(f"Not a gloss: {gloss!r}")
