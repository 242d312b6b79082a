"""Tests for interlinear text parsing and rendering."""

import pytest

from glossator.gloss import GlossParseError, inflection, pointer
from glossator.translation import (
    Glossed,
    Passthrough,
    parse_text,
    render_text,
    translate_text,
)


def dummy_translate(gloss):
    return ""


class TestParseAndRender:
    """parse_text followed by render_text."""

    def test_round_trips_the_empty_string(self):
        """Empty text renders as empty text."""
        assert translate_text("", dummy_translate) == ""

    def test_round_trips_text_without_glosses(self):
        """Text with no markers passes through."""
        assert translate_text("English text", dummy_translate) == "English text"

    def test_translates_a_lone_gloss(self):
        """Markers are kept around the translation."""
        assert translate_text("__bear#PL__", lambda g: "bäryn") == "__bäryn__"

    def test_translates_several_glosses(self):
        """Every glossed region is translated."""
        result = translate_text(
            "the word for bears is __bear#PL__ and also __bear#PL__!",
            lambda g: "bäryn",
        )
        assert result == "the word for bears is __bäryn__ and also __bäryn__!"

    def test_translates_glosses_between_punctuation(self):
        """Punctuation and spaces inside a region separate words."""
        result = translate_text("__foo, bar, & baz.__", lambda g: "translated")
        assert result == "__translated, translated, & translated.__"

    def test_fails_on_malformed_gloss(self):
        """A bad gloss in the text raises with the offending word."""
        with pytest.raises(GlossParseError, match=r'Failed to parse "\[\["'):
            parse_text("the word for bears is __[[__!")

    def test_includes_sources_when_requested(self):
        """Source glosses are embedded after each translation."""
        result = translate_text("__foo!__", lambda g: "translated", include_source=True)
        assert result == "__<x-out>translated<x-src>foo</x-src></x-out>!__"

    def test_unclosed_marker_still_glosses(self):
        """Text after a lone opening marker is glossed to the end."""
        result = translate_text("a __bear", lambda g: "arth")
        assert result == "a __arth"


class TestParseText:
    """Segment structure."""

    def test_glosses_are_implicit_pointers(self):
        """Words in a glossed region are parsed as pointers."""
        segments = parse_text("x __bear#PL__ y")

        assert Glossed(inflection(pointer("bear"), ["PL"])) in segments
        assert Passthrough("x ") in segments

    def test_render_passes_glosses_to_translate(self):
        """render_text calls translate with each parsed gloss."""
        seen = []
        render_text(parse_text("__a b__"), lambda g: seen.append(g) or "")

        assert seen == [pointer("a"), pointer("b")]
