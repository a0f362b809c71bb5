"""
Levenshtein edit distance.

Strings are compared as sequences of grapheme clusters, so a letter with a
combining accent or a multi-code-point emoji counts as a single edit unit.
"""

from typing import Hashable, List, Sequence, Union

from .utils import graphemes

Graphemes = Union[str, Sequence[Hashable]]


def _as_units(value: Graphemes) -> List[Hashable]:
    if isinstance(value, str):
        return graphemes(value)
    return list(value)


def distance(source: Graphemes, target: Graphemes) -> int:
    """
    Compute the minimum number of single-unit insertions, deletions and
    substitutions that turn source into target.

    Comparison is exact: no case folding and no Unicode normalization.

    Args:
        source: A string (split into graphemes) or a sequence of units.
        target: A string (split into graphemes) or a sequence of units.

    Returns:
        The edit distance, a non-negative integer.

    Examples:
        >>> distance("kitten", "sitting")
        3
        >>> distance("HOUSEBOAT", "houseboat")
        9
    """
    source = _as_units(source)
    target = _as_units(target)

    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    # Cost of turning the empty source prefix into each target prefix
    row = list(range(len(target) + 1))

    for i, src in enumerate(source, start=1):
        last_diag = row[0]
        row[0] = i
        for j, tgt in enumerate(target, start=1):
            cost = 0 if src == tgt else 1
            above = row[j]
            row[j] = min(above + 1, row[j - 1] + 1, last_diag + cost)
            last_diag = above

    return row[-1]
