"""Translation of glosses and interlinear text.

Public API:
    Translator(index, morphology) / make_translator(index, morphology)
    parse_text(raw) -> list[Segment]
    render_text(segments, translate, include_source=False) -> str
    translate_text(raw, translate, include_source=False) -> str
"""

from glossator.translation.text import (
    Glossed,
    Passthrough,
    Segment,
    parse_text,
    render_text,
    translate_text,
)
from glossator.translation.translator import (
    DEFAULT_MAX_DEPTH,
    TranslateFn,
    Translator,
    make_translator,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "TranslateFn",
    "Translator",
    "make_translator",
    "Glossed",
    "Passthrough",
    "Segment",
    "parse_text",
    "render_text",
    "translate_text",
]
