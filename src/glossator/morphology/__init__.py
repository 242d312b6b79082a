"""Morphology: ordered inflection rules and compounding boundary rules.

Public API:
    build_morphology(inflections, compound) -> Morphology
    parse_morphology(yaml_text) -> Morphology
    load_morphology(path) -> Morphology
    replace / first_that_applies / capitalize inflector builders
    BoundaryRule / Compounder
"""

from glossator.morphology.loader import (
    MorphologyConfigError,
    load_morphology,
    parse_morphology,
    validate_morphology,
)
from glossator.morphology.rules import (
    BoundaryRule,
    Compounder,
    FirstThatApplies,
    InflectionStatus,
    Inflector,
    ReplaceRule,
    capitalize,
    first_that_applies,
    replace,
)
from glossator.morphology.ruleset import CAP, Morphology, build_morphology

__all__ = [
    # Rules
    "InflectionStatus",
    "Inflector",
    "ReplaceRule",
    "FirstThatApplies",
    "BoundaryRule",
    "Compounder",
    "capitalize",
    "first_that_applies",
    "replace",
    # Ruleset
    "CAP",
    "Morphology",
    "build_morphology",
    # Loading
    "MorphologyConfigError",
    "load_morphology",
    "parse_morphology",
    "validate_morphology",
]
