"""Weighted random word generator for coining new lexemes.

Public API:
    parse_generator(raw) -> WordGenerator
    load_generator(path) -> WordGenerator
    compile_generator(rng, rules) -> generate(rule_name=None) -> str
"""

from glossator.generator.rules import (
    DEFAULT_RULE,
    Expansion,
    GeneratorError,
    RuleRef,
    Text,
    WordGenerator,
    compile_generator,
    load_generator,
    parse_generator,
)
from glossator.generator.weighted import WeightedRandomVariable

__all__ = [
    "DEFAULT_RULE",
    "Expansion",
    "GeneratorError",
    "RuleRef",
    "Text",
    "WordGenerator",
    "WeightedRandomVariable",
    "compile_generator",
    "load_generator",
    "parse_generator",
]
