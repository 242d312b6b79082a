"""Word generator rules: parse and compile.

A generator file is a set of rules separated by blank lines:

    default:
      [c][v]
      2*[c][v][c]

    c: m n p t k
    v: a e i o u

Each rule is "name:" followed by whitespace-separated expansions. An
expansion may start with a weight ("2*", "0.5*"; default 1) and is a
sequence of literal text and [rule] references.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from glossator.errors import LineError
from glossator.generator.weighted import WeightedRandomVariable

logger = logging.getLogger(__name__)

DEFAULT_RULE = "default"

_RULE_SEPARATOR = re.compile(r"(?:[ \t\r]*\n){2,}")
_RULE_HEAD = re.compile(r"([^\s:\[\]*]+)\s*:")
_WEIGHT = re.compile(r"(\d+(?:\.\d+)?)\*")
_SEGMENT = re.compile(r"\[([^\s\[\]]+)\]|([^\[\]]+)")


class GeneratorError(LineError):
    """Raised when generator rules are malformed."""


@dataclass(frozen=True)
class RuleRef:
    """A [name] reference to another rule."""

    rule_name: str


@dataclass(frozen=True)
class Text:
    """Literal text in an expansion."""

    text: str


PatternSegment = Union[RuleRef, Text]


@dataclass(frozen=True)
class Expansion:
    """One weighted alternative of a rule."""

    weight: float
    pattern: tuple[PatternSegment, ...]

    def __post_init__(self):
        object.__setattr__(self, "pattern", tuple(self.pattern))


WordGenerator = dict[str, list[Expansion]]


def _found(s: str, pos: int) -> str:
    return f'"{s[pos]}"' if pos < len(s) else "end of input"


def _parse_expansion(token: str) -> Expansion:
    weight = 1.0
    weight_match = _WEIGHT.match(token)
    if weight_match:
        weight = float(weight_match.group(1))
        token = token[weight_match.end():]

    pattern: list[PatternSegment] = []
    pos = 0
    while pos < len(token):
        match = _SEGMENT.match(token, pos)
        if not match:
            raise GeneratorError(
                f"Expected literal text or a [rule] reference but {_found(token, pos)} found."
            )
        if match.group(1) is not None:
            pattern.append(RuleRef(match.group(1)))
        else:
            pattern.append(Text(match.group(2)))
        pos = match.end()

    if not pattern:
        raise GeneratorError("Expected an expansion after the weight.")
    return Expansion(weight, tuple(pattern))


def _parse_rule(raw: str) -> tuple[str, list[Expansion]]:
    head = _RULE_HEAD.match(raw)
    if not head:
        raise GeneratorError(f"Expected a rule name but {_found(raw, 0)} found.")
    expansions = [_parse_expansion(t) for t in raw[head.end():].split()]
    return head.group(1), expansions


def parse_generator(raw: str) -> WordGenerator:
    """
    Parse generator rules.

    Returns:
        Rule name -> expansions, in file order. An empty or blank
        document yields an empty dict.

    Raises:
        GeneratorError: On malformed rule syntax
    """
    rules: WordGenerator = {}
    for chunk in _RULE_SEPARATOR.split(raw):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, expansions = _parse_rule(chunk)
        rules[name] = expansions
    logger.debug(f"Parsed {len(rules)} generator rules")
    return rules


def compile_generator(
    rng: Callable[[], float], rules: WordGenerator
) -> Callable[..., str]:
    """
    Compile parsed rules into a generate(rule_name=None) -> str function.

    Args:
        rng: Source of floats in [0, 1)
        rules: Parsed generator rules

    Returns:
        A function that expands the named rule (or "default"). A reference
        to an undefined rule expands to "_name_".

    Raises:
        GeneratorError: If any rule lists no expansions
    """
    randomizers: dict[str, WeightedRandomVariable[Expansion]] = {}
    for name, expansions in rules.items():
        if not expansions:
            raise GeneratorError(f"Generator rule '{name}' lists no expansions")
        randomizers[name] = WeightedRandomVariable(
            expansions, lambda e: e.weight, rng
        )

    def generate(rule_name: str | None = None) -> str:
        rule_name = rule_name or DEFAULT_RULE
        randomizer = randomizers.get(rule_name)
        if randomizer is None:
            return f"_{rule_name}_"
        parts = []
        for segment in randomizer().pattern:
            if isinstance(segment, Text):
                parts.append(segment.text)
            elif isinstance(segment, RuleRef):
                parts.append(generate(segment.rule_name))
            else:
                raise TypeError(f"Not a pattern segment: {segment!r}")
        return "".join(parts)

    return generate


def load_generator(path: Path | str) -> WordGenerator:
    """Read and parse a generator rules file."""
    path = Path(path)
    logger.debug(f"Loading generator rules from {path}")
    return parse_generator(path.read_text(encoding="utf-8"))
