"""glossator: translate interlinear glosses into a constructed language.

A lexicon (lexicon.csv) maps ids to glosses, a morphology
(morphology.yaml) defines inflections and compounding rules, and the
Translator turns glosses like "[^pre+see]#PL" into surface words.
"""

from glossator.gloss import (
    Compound,
    Gloss,
    GlossMode,
    GlossParseError,
    Inflection,
    Literal,
    Pointer,
    parse_gloss,
    serialize_gloss,
)
from glossator.lexicon import LexiconIndex, build_index, load_lexicon, parse_lexicon
from glossator.morphology import (
    Morphology,
    build_morphology,
    load_morphology,
    parse_morphology,
)
from glossator.translation import Translator, make_translator, translate_text

__version__ = "0.1.0"

__all__ = [
    "Gloss",
    "Literal",
    "Pointer",
    "Inflection",
    "Compound",
    "GlossMode",
    "GlossParseError",
    "parse_gloss",
    "serialize_gloss",
    "LexiconIndex",
    "build_index",
    "load_lexicon",
    "parse_lexicon",
    "Morphology",
    "build_morphology",
    "load_morphology",
    "parse_morphology",
    "Translator",
    "make_translator",
    "translate_text",
]
