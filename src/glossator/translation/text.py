"""Interlinear text: prose with __glossed__ regions.

A document is split on "__" markers. Text between a pair of markers is
glossed; everything else passes through untouched, markers included.
Inside a glossed region, runs of punctuation and whitespace separate the
words, and each word is parsed as a gloss in implicit-pointers mode.

    "the word for bears is __bear#PL__!"

renders as "the word for bears is __arthec__!" given a lexicon entry
for bear and a PL inflection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from glossator.gloss.ast import Gloss
from glossator.gloss.parser import GlossMode, parse_gloss
from glossator.gloss.serializer import serialize_gloss
from glossator.translation.translator import TranslateFn

MARKER = "__"

_MARKER_SPLIT = re.compile(r"(__)")
_SEPARATOR_SPLIT = re.compile(r"([~`!@$%&()={}\\|;:'\",<.>/? \t\n\r]+)")


@dataclass(frozen=True)
class Passthrough:
    """Text copied to the output as-is."""

    string: str


@dataclass(frozen=True)
class Glossed:
    """A word to translate."""

    gloss: Gloss


Segment = Union[Passthrough, Glossed]


def _parse_glossed_region(region: str) -> list[Segment]:
    segments: list[Segment] = []
    for i, piece in enumerate(_SEPARATOR_SPLIT.split(region)):
        if i % 2 == 0 and piece:
            segments.append(Glossed(parse_gloss(GlossMode.IMPLICIT_POINTERS, piece)))
        else:
            segments.append(Passthrough(piece))
    return segments


def parse_text(raw: str) -> list[Segment]:
    """
    Split interlinear text into passthrough and glossed segments.

    Raises:
        GlossParseError: If any word in a glossed region is malformed
    """
    segments: list[Segment] = []
    # With a capturing split, index % 4 == 2 falls between an opening
    # and a closing marker.
    for i, piece in enumerate(_MARKER_SPLIT.split(raw)):
        if i % 4 == 2:
            segments.extend(_parse_glossed_region(piece))
        else:
            segments.append(Passthrough(piece))
    return segments


def render_text(
    text: list[Segment], translate: TranslateFn, include_source: bool = False
) -> str:
    """Join segments back into a string, translating the glossed ones.

    With include_source, each translation is wrapped as
    <x-out>translation<x-src>source gloss</x-src></x-out>.
    """
    parts = []
    for segment in text:
        if isinstance(segment, Passthrough):
            parts.append(segment.string)
            continue
        translated = translate(segment.gloss)
        if include_source:
            source = serialize_gloss(GlossMode.IMPLICIT_POINTERS, segment.gloss)
            translated = f"<x-out>{translated}<x-src>{source}</x-src></x-out>"
        parts.append(translated)
    return "".join(parts)


def translate_text(
    raw: str, translate: TranslateFn, include_source: bool = False
) -> str:
    """Parse and render interlinear text in one step."""
    return render_text(parse_text(raw), translate, include_source=include_source)
