"""
Exclusion filters applied to tokens after tokenization.

Each filter answers ``matches(token)``; the tokenizer drops matching tokens.
"""

from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable, Tuple, Union

import regex

from .exceptions import InvalidFilterError


@dataclass(frozen=True)
class Predicate:
    """Excludes tokens for which func(token) is true."""

    func: Callable[[str], bool]

    def matches(self, token: str) -> bool:
        return bool(self.func(token))


@dataclass(frozen=True)
class ExactTokens:
    """Excludes tokens that are exactly one of the given tokens."""

    tokens: FrozenSet[str]

    def __init__(self, tokens: Iterable[str]):
        object.__setattr__(self, "tokens", frozenset(tokens))

    @classmethod
    def from_string(cls, text: str) -> "ExactTokens":
        """Build from a whitespace separated string, e.g. "eye of"."""
        return cls(text.split())

    def matches(self, token: str) -> bool:
        return token in self.tokens


@dataclass(frozen=True)
class PatternFilter:
    """Excludes tokens containing a match for a regular expression."""

    pattern: Any

    def __init__(self, pattern):
        if isinstance(pattern, str):
            pattern = regex.compile(pattern)
        object.__setattr__(self, "pattern", pattern)

    def matches(self, token: str) -> bool:
        return self.pattern.search(token) is not None


@dataclass(frozen=True)
class AnyOf:
    """Excludes tokens matched by any of the wrapped filters."""

    filters: Tuple["TokenFilter", ...]

    def __init__(self, filters: Iterable["TokenFilter"]):
        object.__setattr__(self, "filters", tuple(as_filter(f) for f in filters))

    def matches(self, token: str) -> bool:
        return any(f.matches(token) for f in self.filters)


TokenFilter = Union[Predicate, ExactTokens, PatternFilter, AnyOf]
FILTER_TYPES = (Predicate, ExactTokens, PatternFilter, AnyOf)


def as_filter(value) -> TokenFilter:
    """
    Return value as a single filter; lists and tuples become AnyOf.

    Raises:
        InvalidFilterError: If value is not a filter or a list of filters.
    """
    if isinstance(value, FILTER_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        return AnyOf(value)
    raise InvalidFilterError(value)
