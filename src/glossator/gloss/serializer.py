"""Serialize Gloss trees back to gloss syntax."""

from __future__ import annotations

from glossator.gloss.ast import (
    Compound,
    Gloss,
    Inflection,
    Literal,
    Pointer,
    unknown_gloss,
)
from glossator.gloss.parser import GlossMode, as_mode


def serialize_gloss(mode: GlossMode | str, gloss: Gloss) -> str:
    """Render a gloss as the canonical syntax for the given mode.

    parse_gloss(mode, serialize_gloss(mode, g)) == g for every gloss g
    built from non-empty words. An empty compound or an inflection with no
    names has no syntax of its own and raises ValueError.
    """
    mode = as_mode(mode)

    if isinstance(gloss, Literal):
        if mode is GlossMode.IMPLICIT_LITERALS:
            return gloss.string
        return f"^{gloss.string}"
    if isinstance(gloss, Pointer):
        if mode is GlossMode.IMPLICIT_POINTERS:
            return gloss.lexeme
        return f"*{gloss.lexeme}"
    if isinstance(gloss, Inflection):
        if not gloss.inflections:
            raise ValueError(
                f"Cannot serialize an inflection with no names: {gloss!r}"
            )
        stem = serialize_gloss(mode, gloss.stem)
        return "#".join([stem, *gloss.inflections])
    if isinstance(gloss, Compound):
        if not gloss.elements:
            raise ValueError("Cannot serialize an empty compound")
        elements = "+".join(serialize_gloss(mode, el) for el in gloss.elements)
        return f"[{elements}]"
    raise unknown_gloss(gloss)
