"""Load morphology.yaml into a Morphology ruleset.

Expected shape:

    inflections:
      PL:
        - ["[aeo]$", "i"]
        - ["$", "ec"]
    compound:
      - ["(u)$", "^(w)", "\\1", "ff"]

inflections is required; compound is optional and defaults to an empty
list (plain concatenation). Patterns are Python regular expressions and
replacements use Python's backreference syntax.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

import yaml

from glossator.errors import GlossatorError
from glossator.morphology.ruleset import Morphology, build_morphology

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"


class MorphologyYamlLoader(yaml.SafeLoader):
    """SafeLoader that reads YES/NO/ON/OFF/true/false as plain strings.

    Inflection names such as NO or ON must stay names, not booleans.
    """


MorphologyYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class MorphologyConfigError(GlossatorError):
    """Raised when a morphology config is malformed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


def _show(value: object) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except TypeError:
        return repr(value)


def _expect_string_tuple(value: object, path: str, arity: int, what: str) -> list[str]:
    if not isinstance(value, list) or len(value) != arity:
        raise MorphologyConfigError(
            f"expected {path} to be a {what}, but got {_show(value)}", path
        )
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise MorphologyConfigError(
                f"expected {path}[{i}] to be a string, but got {_show(item)}", path
            )
    return value


def _check_pattern(pattern: str, path: str) -> None:
    try:
        re.compile(pattern)
    except re.error as e:
        raise MorphologyConfigError(
            f"invalid regular expression at {path}: {pattern!r} ({e})", path
        )


def validate_morphology(data: object) -> dict:
    """
    Check the shape of parsed YAML and return it as plain rule data.

    Raises:
        MorphologyConfigError: With a JSON-path style location of the
            first problem found
    """
    if not isinstance(data, dict):
        raise MorphologyConfigError(
            f"expected $ to be an object, but got {_show(data)}", "$"
        )

    inflections = data.get("inflections")
    if not isinstance(inflections, dict):
        raise MorphologyConfigError(
            f"expected $.inflections to be an object, but got {_show(inflections)}",
            "$.inflections",
        )

    checked_inflections: dict[str, list[list[str]]] = {}
    for name, rules in inflections.items():
        name = str(name)
        path = f"$.inflections.{name}"
        if not isinstance(rules, list):
            raise MorphologyConfigError(
                f"expected {path} to be an array, but got {_show(rules)}", path
            )
        checked = []
        for i, rule in enumerate(rules):
            rule_path = f"{path}[{i}]"
            pair = _expect_string_tuple(
                rule, rule_path, 2, "[pattern, replacement] pair"
            )
            _check_pattern(pair[0], f"{rule_path}[0]")
            checked.append(pair)
        checked_inflections[name] = checked

    compound = data.get("compound")
    if compound is None:
        compound = []
    if not isinstance(compound, list):
        raise MorphologyConfigError(
            f"expected $.compound to be an array, but got {_show(compound)}",
            "$.compound",
        )
    checked_compound = []
    for i, rule in enumerate(compound):
        rule_path = f"$.compound[{i}]"
        quad = _expect_string_tuple(
            rule,
            rule_path,
            4,
            "[left_pattern, right_pattern, left_replacement, right_replacement] rule",
        )
        _check_pattern(quad[0], f"{rule_path}[0]")
        _check_pattern(quad[1], f"{rule_path}[1]")
        checked_compound.append(quad)

    return {"inflections": checked_inflections, "compound": checked_compound}


def parse_morphology(raw: str) -> Morphology:
    """
    Parse morphology YAML text into a Morphology.

    Raises:
        MorphologyConfigError: If the YAML is malformed or has the wrong shape
    """
    try:
        data = yaml.load(raw, Loader=MorphologyYamlLoader)
    except yaml.YAMLError as e:
        raise MorphologyConfigError(f'Invalid YAML in "{raw}": {e}')

    checked = validate_morphology(data)
    morphology = build_morphology(checked["inflections"], checked["compound"])
    logger.debug(
        f"Built morphology with {len(morphology.inflections)} inflections "
        f"and {len(morphology.compound.rules)} compound rules"
    )
    return morphology


def load_morphology(path: Path | str) -> Morphology:
    """Read and parse a morphology YAML file."""
    path = Path(path)
    logger.debug(f"Loading morphology from {path}")
    return parse_morphology(path.read_text(encoding="utf-8"))
