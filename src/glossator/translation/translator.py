"""Gloss translation engine.

Translator walks a Gloss tree and produces its surface form:

- Literal: the string itself
- Pointer: the translation of the lexeme it names, or "(id??)"
- Inflection: the stem's translation run through each named inflector in
  order; an unknown inflection name turns the whole result so far into
  "(stem#NAME??)" and folding continues over that text
- Compound: the elements' translations folded left to right through the
  compounder

Missing lexemes and unknown inflections never raise. They come out as
inline diagnostics so one gap does not block the rest of a document.

Pointer cycles (A -> B -> A) resolve to "(A#CYCLE??)" at the point the
cycle closes. Evaluation depth counts every nested gloss, through pointers,
compounds and inflections alike; a pointer reached deeper than max_depth
resolves to "(id#DEPTH??)" so long chains never exhaust the call stack.
"""

from __future__ import annotations

from typing import Callable, Mapping

from glossator.gloss.ast import (
    Compound,
    Gloss,
    Inflection,
    Literal,
    Pointer,
    unknown_gloss,
)
from glossator.morphology.ruleset import Morphology

DEFAULT_MAX_DEPTH = 200

TranslateFn = Callable[[Gloss], str]


def missing_lexeme(lexeme_id: str) -> str:
    return f"({lexeme_id}??)"


def unknown_inflection(stem: str, name: str) -> str:
    return f"({stem}#{name}??)"


def cyclic_reference(lexeme_id: str) -> str:
    return f"({lexeme_id}#CYCLE??)"


def too_deep(lexeme_id: str) -> str:
    return f"({lexeme_id}#DEPTH??)"


class Translator:
    """Translates glosses against a fixed lexicon index and morphology.

    Holds references to the index and morphology only; neither is
    modified, so one Translator can serve any number of calls.
    """

    def __init__(
        self,
        index: Mapping[str, Gloss],
        morphology: Morphology,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.index = index
        self.morphology = morphology
        self.max_depth = max_depth

    def __call__(self, gloss: Gloss) -> str:
        return self.translate(gloss)

    def translate(self, gloss: Gloss) -> str:
        """Return the surface form of gloss."""
        return self._translate(gloss, (), 0)

    def _translate(
        self, gloss: Gloss, resolving: tuple[str, ...], depth: int
    ) -> str:
        if isinstance(gloss, Literal):
            return gloss.string
        if isinstance(gloss, Pointer):
            return self._resolve(gloss.lexeme, resolving, depth)
        if isinstance(gloss, Inflection):
            return self._inflect(gloss, resolving, depth)
        if isinstance(gloss, Compound):
            return self._compound(gloss, resolving, depth)
        raise unknown_gloss(gloss)

    def _resolve(
        self, lexeme_id: str, resolving: tuple[str, ...], depth: int
    ) -> str:
        referent = self.index.get(lexeme_id)
        if referent is None:
            return missing_lexeme(lexeme_id)
        if lexeme_id in resolving:
            return cyclic_reference(lexeme_id)
        if depth >= self.max_depth:
            return too_deep(lexeme_id)
        return self._translate(referent, resolving + (lexeme_id,), depth + 1)

    def _inflect(
        self, gloss: Inflection, resolving: tuple[str, ...], depth: int
    ) -> str:
        result = self._translate(gloss.stem, resolving, depth + 1)
        for name in gloss.inflections:
            inflector = self.morphology.inflector(name)
            if inflector is None:
                result = unknown_inflection(result, name)
            else:
                # A configured inflector that does not match leaves the
                # string as it was; only unknown names are diagnosed.
                result, _ = inflector(result)
        return result

    def _compound(
        self, gloss: Compound, resolving: tuple[str, ...], depth: int
    ) -> str:
        if not gloss.elements:
            return ""
        first, *rest = gloss.elements
        result = self._translate(first, resolving, depth + 1)
        for element in rest:
            result = self.morphology.compound(
                result, self._translate(element, resolving, depth + 1)
            )
        return result


def make_translator(
    index: Mapping[str, Gloss],
    morphology: Morphology,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> TranslateFn:
    """Build a translate(gloss) -> str function over index and morphology."""
    return Translator(index, morphology, max_depth=max_depth)
