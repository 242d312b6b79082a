"""Inflection and compounding rules.

An Inflector maps a string to (result, status). Rules are tried in
order and the first one whose pattern matches wins; if none match, the
input comes back unchanged with status DOES_NOT_MATCH. Order is taken
from configuration and never rearranged.

A Compounder joins two adjacent translated strings. Each boundary rule
has a left and a right pattern; the first rule where both patterns
match rewrites the end of the left string and the start of the right
one. Without a matching rule the strings are simply concatenated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol


class InflectionStatus(Enum):
    """Whether an inflector changed its input."""

    APPLIED = "applied"
    DOES_NOT_MATCH = "does-not-match"


InflectionResult = tuple[str, InflectionStatus]


class Inflector(Protocol):
    """Anything callable as inflector(s) -> (result, status)."""

    def __call__(self, s: str) -> InflectionResult: ...


def _compile(pattern: str | re.Pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


@dataclass(frozen=True)
class ReplaceRule:
    """A single (pattern, replacement) inflection rule.

    The replacement uses Python's re.sub syntax, so capture groups are
    written \\1 or \\g<name>. count=1 rewrites the first match only;
    count=0 rewrites every match.
    """

    pattern: re.Pattern
    replacement: str
    count: int = 1

    def __call__(self, s: str) -> InflectionResult:
        if not self.pattern.search(s):
            return s, InflectionStatus.DOES_NOT_MATCH
        return (
            self.pattern.sub(self.replacement, s, count=self.count),
            InflectionStatus.APPLIED,
        )


def replace(
    pattern: str | re.Pattern, replacement: str, count: int = 1
) -> ReplaceRule:
    """Build a rule that rewrites matches of pattern with replacement."""
    return ReplaceRule(_compile(pattern), replacement, count)


@dataclass(frozen=True)
class FirstThatApplies:
    """An inflector built from an ordered list of rules; first match wins."""

    rules: tuple[Inflector, ...]

    def __post_init__(self):
        object.__setattr__(self, "rules", tuple(self.rules))

    def __call__(self, s: str) -> InflectionResult:
        for rule in self.rules:
            result, status = rule(s)
            if status is InflectionStatus.APPLIED:
                return result, status
        return s, InflectionStatus.DOES_NOT_MATCH


def first_that_applies(rules: Iterable[Inflector]) -> FirstThatApplies:
    return FirstThatApplies(tuple(rules))


def capitalize(s: str) -> InflectionResult:
    """Uppercase the first character; always reports APPLIED."""
    return s[:1].upper() + s[1:], InflectionStatus.APPLIED


@dataclass(frozen=True)
class BoundaryRule:
    """A compounding rule applied where two compound parts meet."""

    left_pattern: re.Pattern
    right_pattern: re.Pattern
    left_replacement: str
    right_replacement: str

    @classmethod
    def of(
        cls,
        left_pattern: str | re.Pattern,
        right_pattern: str | re.Pattern,
        left_replacement: str,
        right_replacement: str,
    ) -> "BoundaryRule":
        return cls(
            _compile(left_pattern),
            _compile(right_pattern),
            left_replacement,
            right_replacement,
        )

    def applies(self, left: str, right: str) -> bool:
        return bool(self.left_pattern.search(left) and self.right_pattern.search(right))

    def join(self, left: str, right: str) -> str:
        return self.left_pattern.sub(
            self.left_replacement, left, count=1
        ) + self.right_pattern.sub(self.right_replacement, right, count=1)


@dataclass(frozen=True)
class Compounder:
    """Joins two strings using the first boundary rule that applies."""

    rules: tuple[BoundaryRule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "rules", tuple(self.rules))

    def __call__(self, left: str, right: str) -> str:
        for rule in self.rules:
            if rule.applies(left, right):
                return rule.join(left, right)
        return left + right

