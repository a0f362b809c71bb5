"""
Soundex phonetic encoding as defined by the U.S. National Archives (NARA).

Every code is the first letter of the name followed by three digits, such as
``W-252``. Digits come from the consonants that follow, using the guide below.
Zeroes are added when too few consonants remain; extra ones are disregarded.

    | score | glyph(s)               |
    | :---: | ---------------------- |
    |   1   | B, F, P, V             |
    |   2   | C, G, J, K, Q, S, X, Z |
    |   3   | D, T                   |
    |   4   | L                      |
    |   5   | M, N                   |
    |   6   | R                      |

A, E, I, O and U are not coded but separate same-scoring consonants, so both
are coded ("Tymczak" -> T-522). H, W, Y and anything that is not a Latin
letter are ignored entirely, which means same-scoring consonants on either
side of them are coded once ("Ashcraft" -> A-261).

An empty name raises EmptyInputError. A name whose first character does not
fold to a Latin letter A-Z (digits, punctuation, leading whitespace, Greek or
Cyrillic letters) raises InvalidNameError, since the code must start with A-Z.
"""

import logging
import unicodedata
from types import MappingProxyType
from typing import Iterable, List, Optional, Sequence, Union

from . import config
from .exceptions import EmptyInputError, InvalidNameError

logger = logging.getLogger(__name__)

VOWELS = "AEIOU"

_GROUPS = {
    1: "BFPV",
    2: "CGJKQSXZ",
    3: "DT",
    4: "L",
    5: "MN",
    6: "R",
}

# Consonants map to their class, each vowel maps to itself
SCORES = MappingProxyType({
    **{letter: score for score, letters in _GROUPS.items() for letter in letters},
    **{vowel: vowel for vowel in VOWELS},
})


def score(glyph: str) -> Optional[Union[int, str]]:
    """Return the class of an uppercase glyph: an int, a vowel, or None."""
    return SCORES.get(glyph)


def normalize(name: str) -> List[str]:
    """Decompose accents, uppercase and split a name into code points."""
    return list(unicodedata.normalize("NFD", name).upper())


def reduce_scores(scores: Iterable[Optional[Union[int, str]]]) -> List[Union[int, str]]:
    """
    Drop unscored glyphs and collapse runs of identical scores.

    Unscored glyphs (H, W, Y, marks, punctuation) never separate a run.
    """
    reduced = []
    for value in scores:
        if value is None:
            continue
        if reduced and reduced[-1] == value:
            continue
        reduced.append(value)
    return reduced


def encode(name: Union[str, Sequence[str]], digits: int = None,
           separator: str = None) -> str:
    """
    Encode a name into its Soundex code.

    Args:
        name: The name, as a string or a sequence of characters.
        digits: Number of digits in the code. If None, uses config default.
        separator: Text between the letter and the digits. If None, uses config default.

    Returns:
        The code, e.g. "W-252".

    Raises:
        EmptyInputError: If the name is empty.
        InvalidNameError: If the name does not start with a Latin letter.

    Examples:
        >>> encode("Washington")
        'W-252'
        >>> encode("Núñez") == encode("Nunez")
        True
    """
    if digits is None:
        digits = config.SOUNDEX_DIGITS
    if separator is None:
        separator = config.SOUNDEX_SEPARATOR

    if not isinstance(name, str):
        name = "".join(name)
    if not name:
        raise EmptyInputError()

    glyphs = normalize(name)
    first = glyphs[0]
    if not ("A" <= first <= "Z"):
        raise InvalidNameError(name)

    codes = [v for v in reduce_scores(score(g) for g in glyphs) if isinstance(v, int)]

    # The first letter absorbs a matching leading code
    if codes and codes[0] == score(first):
        codes = codes[1:]

    codes = (codes + [0] * digits)[:digits]
    code = first + separator + "".join(str(c) for c in codes)
    logger.debug("Soundex %r -> %s", name, code)
    return code


class SoundexEncoder:
    """Soundex encoder bound to a configuration."""

    def __init__(self, config=config):
        """Initialize with configuration."""
        self.config = config

    def encode(self, name: Union[str, Sequence[str]]) -> str:
        """Encode a name; see encode()."""
        return encode(name, digits=self.config.SOUNDEX_DIGITS,
                      separator=self.config.SOUNDEX_SEPARATOR)

    def same_sound(self, first: str, second: str) -> bool:
        """Return True if both names share a Soundex code."""
        return self.encode(first) == self.encode(second)
