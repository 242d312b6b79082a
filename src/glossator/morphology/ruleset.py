"""The Morphology ruleset: named inflectors plus a compounder."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from glossator.morphology.rules import (
    BoundaryRule,
    Compounder,
    Inflector,
    capitalize,
    first_that_applies,
    replace,
)

CAP = "CAP"


@dataclass(frozen=True)
class Morphology:
    """Inflectors by name and the compounding rules.

    Built once via build_morphology() and never mutated afterwards. CAP is
    always present; an explicit CAP entry replaces the built-in one.
    """

    inflections: Mapping[str, Inflector] = field(default_factory=dict)
    compound: Compounder = field(default_factory=Compounder)

    def __post_init__(self):
        inflections = {CAP: capitalize, **self.inflections}
        object.__setattr__(self, "inflections", MappingProxyType(inflections))

    def inflector(self, name: str) -> Inflector | None:
        return self.inflections.get(name)


def build_morphology(
    inflections: Mapping[str, Sequence[Sequence[str]]] | None = None,
    compound: Iterable[Sequence[str]] | None = None,
) -> Morphology:
    """
    Build a Morphology from plain rule data.

    Args:
        inflections: Inflection name -> ordered [pattern, replacement] pairs
        compound: Ordered [left_pattern, right_pattern, left_replacement,
            right_replacement] boundary rules; None means plain concatenation

    Returns:
        Morphology with CAP always available. A configured CAP replaces
        the built-in capitalizer.
    """
    inflectors: dict[str, Inflector] = {}
    for name, rules in (inflections or {}).items():
        inflectors[name] = first_that_applies(
            replace(pattern, replacement) for pattern, replacement in rules
        )

    boundary_rules = [BoundaryRule.of(*rule) for rule in (compound or [])]

    return Morphology(inflections=inflectors, compound=Compounder(tuple(boundary_rules)))
