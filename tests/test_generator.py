"""Tests for the weighted random word generator."""

import random

import pytest

from glossator.generator import (
    Expansion,
    GeneratorError,
    RuleRef,
    Text,
    WeightedRandomVariable,
    compile_generator,
    load_generator,
    parse_generator,
)


def expansion(weight, *pattern):
    return Expansion(weight, pattern)


class TestWeightedRandomVariable:
    """Weighted choice."""

    def test_always_picks_a_lone_possibility(self):
        """One possibility is always chosen."""
        v = WeightedRandomVariable([1], lambda x: 1, lambda: 0.5)
        assert v() == 1

    def test_picks_first_when_rng_is_low(self):
        """Low random values pick early possibilities."""
        v = WeightedRandomVariable([1, 2], lambda x: 1, lambda: 0.49)
        assert v() == 1

    def test_picks_second_when_rng_is_high(self):
        """High random values pick later possibilities."""
        v = WeightedRandomVariable([1, 2], lambda x: 1, lambda: 0.51)
        assert v() == 2

    def test_respects_weights(self):
        """Heavier possibilities cover more of the range."""
        v = WeightedRandomVariable([99, 1], lambda x: x, lambda: 0.9)
        assert v() == 99

    def test_requires_a_possibility(self):
        """An empty list is rejected."""
        with pytest.raises(ValueError):
            WeightedRandomVariable([], lambda x: 1, lambda: 0.5)


class TestParseGenerator:
    """Parsing generator rules."""

    @pytest.mark.parametrize("raw", ["", "    \t\n\n\n\n"])
    def test_accepts_empty_document(self, raw):
        """Blank documents have no rules."""
        assert parse_generator(raw) == {}

    def test_parses_a_single_rule(self):
        """name: expansion"""
        assert parse_generator("word: blah") == {"word": [expansion(1, Text("blah"))]}

    def test_ignores_surrounding_whitespace(self):
        """Leading and trailing blank lines are fine."""
        assert parse_generator(" \n\n\tword: blah    \n\n") == {
            "word": [expansion(1, Text("blah"))]
        }

    def test_parses_multiple_rules(self):
        """Rules are separated by blank lines."""
        assert parse_generator("consonant:\n  t\n\nvowel:\n  o\n") == {
            "consonant": [expansion(1, Text("t"))],
            "vowel": [expansion(1, Text("o"))],
        }

    def test_allows_whitespace_only_lines_between_rules(self):
        """A line of spaces counts as blank."""
        assert parse_generator("a: a\n    \nb: b") == {
            "a": [expansion(1, Text("a"))],
            "b": [expansion(1, Text("b"))],
        }

    def test_parses_multiple_expansions(self):
        """Whitespace separates expansions."""
        assert parse_generator("a: foo bar baz") == {
            "a": [
                expansion(1, Text("foo")),
                expansion(1, Text("bar")),
                expansion(1, Text("baz")),
            ]
        }

    def test_parses_weights(self):
        """Integer and decimal weights."""
        assert parse_generator("a: 10.25*foo 2*bar 0.75*baz") == {
            "a": [
                expansion(10.25, Text("foo")),
                expansion(2, Text("bar")),
                expansion(0.75, Text("baz")),
            ]
        }

    def test_parses_expansions_with_multiple_segments(self):
        """References and text can be mixed."""
        assert parse_generator("a: 3*[b][c]foo") == {
            "a": [expansion(3, RuleRef("b"), RuleRef("c"), Text("foo"))]
        }

    def test_fails_with_a_parse_error(self):
        """A rule must start with a name."""
        with pytest.raises(GeneratorError, match=r'Expected a rule name but "\]" found\.'):
            parse_generator("]]]")

    def test_fails_on_unclosed_reference(self):
        """Brackets must pair up."""
        with pytest.raises(GeneratorError):
            parse_generator("a: [b")


class TestCompileGenerator:
    """Compiled generators."""

    def test_fails_when_a_rule_has_no_expansions(self):
        """Every rule needs something to choose from."""
        with pytest.raises(
            GeneratorError, match="Generator rule 'the-rule' lists no expansions"
        ):
            compile_generator(lambda: 0, {"the-rule": []})

    def test_generates_text(self):
        """A literal expansion is returned as-is."""
        generate = compile_generator(
            lambda: 0, {"the-rule": [expansion(1, Text("foo"))]}
        )
        assert generate("the-rule") == "foo"

    def test_expands_references(self):
        """[rule] references expand recursively."""
        generate = compile_generator(
            lambda: 0,
            {
                "rule-1": [expansion(1, Text("foo"), RuleRef("rule-2"))],
                "rule-2": [expansion(1, Text("bar"))],
            },
        )
        assert generate("rule-1") == "foobar"

    def test_uses_default_rule(self):
        """With no rule name, 'default' is used."""
        generate = compile_generator(
            lambda: 0,
            {
                "default": [expansion(1, Text("foo"))],
                "not-default": [expansion(1, Text("bar"))],
            },
        )
        assert generate() == "foo"

    def test_marks_missing_rule(self):
        """Unknown rules render as _name_."""
        generate = compile_generator(
            lambda: 0, {"the-rule": [expansion(1, RuleRef("foo"))]}
        )
        assert generate("the-rule") == "_foo_"

    def test_generates_at_random(self):
        """The rng decides between expansions."""
        value = [0.0]
        generate = compile_generator(
            lambda: value[0],
            {"the-rule": [expansion(1, Text("foo")), expansion(1, Text("bar"))]},
        )
        assert generate("the-rule") == "foo"
        value[0] = 0.999
        assert generate("the-rule") == "bar"

    def test_seeded_generation_is_repeatable(self):
        """The same seed gives the same words."""
        rules = parse_generator(
            "default:\n  [c][v]\n  [v][c][v]\n\nc: m n p t k\n\nv: a e i o u\n"
        )
        first = compile_generator(random.Random(7).random, rules)
        second = compile_generator(random.Random(7).random, rules)

        words = [first() for _ in range(5)]
        assert words == [second() for _ in range(5)]
        assert all(set(w) <= set("mnptkaeiou") for w in words)


class TestLoadGenerator:
    """Reading generator files."""

    def test_loads_file(self, tmp_path):
        """load_generator reads and parses a rules file."""
        path = tmp_path / "generators.txt"
        path.write_text("default: ka\n", encoding="utf-8")

        assert load_generator(path) == {"default": [expansion(1, Text("ka"))]}
