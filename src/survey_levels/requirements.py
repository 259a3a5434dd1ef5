"""
Requirement-set parsing for level definitions.

A level's requirement arrives as comma-separated text naming the answer
options a respondent must have selected, e.g. "3,7,12".

This module turns that text into a frozenset of option ids.

MALFORMED ENTRIES:
    An entry that is not a decimal integer does NOT abort parsing.
    It is replaced by an UnparsedOption placeholder. The placeholder is
    never equal to any int, so it can never be present in a real
    selection and the level that carries it can never be attained.

    Example:
        "1,x,3"  ->  frozenset({1, UnparsedOption("x"), 3})

WHITESPACE:
    Whitespace around entries is tolerated ("1, 2 ,3" == "1,2,3").
    A wholly blank string is the empty requirement set.
    An empty entry between separators ("1,,3") is malformed.
"""

import re
import warnings
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Union


OPTION_SEPARATOR = ","

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


class MalformedRequirementWarning(UserWarning):
    """Emitted when a requirement entry does not parse as an integer."""
    pass


@dataclass(frozen=True)
class UnparsedOption:
    """
    Placeholder for a requirement entry that failed to parse.

    Keeps the raw token so the catalog can be reported on and written
    back out unchanged. Never compares equal to an option id.
    """

    token: str

    def __str__(self) -> str:
        return self.token


Requirement = Union[int, UnparsedOption]


def parse_option_id(token: str) -> Requirement:
    """
    Parse a single requirement entry.

    Args:
        token: Raw entry text, surrounding whitespace allowed

    Returns:
        The integer option id, or an UnparsedOption for anything else
    """
    stripped = token.strip()
    if _INTEGER_RE.match(stripped):
        return int(stripped)
    warnings.warn(
        f"Malformed requirement entry {token!r}; level will be unsatisfiable",
        MalformedRequirementWarning,
        stacklevel=3,
    )
    return UnparsedOption(stripped)


def parse_required_option_ids(value: Union[str, Iterable, None]) -> FrozenSet[Requirement]:
    """
    Parse a requirement set.

    Accepts either the textual form ("3,7,12") or an already split
    list/tuple/set (e.g. a YAML list), whose items may be ints or strings.
    String items are split on the separator as well. Any other scalar is
    one entry.

    Args:
        value: Requirement text, iterable of entries, or None

    Returns:
        Frozenset of option ids, with UnparsedOption for malformed entries
    """
    if value is None:
        return frozenset()

    # YAML reads a lone "12" as an int
    if isinstance(value, int) and not isinstance(value, bool):
        return frozenset({value})

    if isinstance(value, str):
        if not value.strip():
            return frozenset()
        entries: Iterable = value.split(OPTION_SEPARATOR)
    elif isinstance(value, (list, tuple, set, frozenset)):
        entries = value
    else:
        # any other scalar (1.5, True, ...) is a single malformed entry
        return frozenset({parse_option_id(str(value))})

    parsed = set()
    for entry in entries:
        # bool is an int subclass but never a valid option id
        if isinstance(entry, int) and not isinstance(entry, bool):
            parsed.add(entry)
        elif isinstance(entry, UnparsedOption):
            parsed.add(entry)
        elif isinstance(entry, str):
            # tokens never hold the separator, so they format back unchanged
            parsed.update(parse_option_id(token) for token in entry.split(OPTION_SEPARATOR))
        else:
            parsed.add(parse_option_id(str(entry)))
    return frozenset(parsed)


def is_satisfied(required: FrozenSet[Requirement], selection: FrozenSet[int]) -> bool:
    """True when every required option is in the selection (vacuous if empty)."""
    return required <= selection


def malformed_tokens(required: Iterable[Requirement]) -> List[str]:
    """Raw tokens of the UnparsedOption entries, sorted."""
    return sorted(r.token for r in required if isinstance(r, UnparsedOption))


def format_required_option_ids(required: Iterable[Requirement]) -> str:
    """
    Render a requirement set back to its textual form.

    Integers come first in ascending order, then raw malformed tokens.
    """
    ints = sorted(r for r in required if not isinstance(r, UnparsedOption))
    parts = [str(i) for i in ints] + malformed_tokens(required)
    if parts == [""]:
        # a lone empty token must not read back as the empty set
        return OPTION_SEPARATOR
    return OPTION_SEPARATOR.join(parts)


__all__ = [
    "OPTION_SEPARATOR",
    "MalformedRequirementWarning",
    "UnparsedOption",
    "Requirement",
    "parse_option_id",
    "parse_required_option_ids",
    "is_satisfied",
    "malformed_tokens",
    "format_required_option_ids",
]
