"""
Levenshtein distance tests
"""
import pytest
from rapidfuzz.distance import Levenshtein

from text_analysis.levenshtein import distance

WORDS = ["", "a", "snail", "kitten", "sitting", "jogging", "logger", "donkey", "GRAPES", "grapes", "flaw", "lawn"]


class TestDistance:
    """Concrete distances"""

    @pytest.mark.parametrize(
        "source, target, expected",
        [
            ("kitten", "sitting", 3),
            ("snail", "snail", 0),
            ("donkey", "donkey", 0),
            ("HOUSEBOAT", "houseboat", 9),
            ("GRAPES", "grapes", 6),
            ("jogging", "logger", 4),
            ("flaw", "lawn", 2),
        ],
    )
    def test_known_distances(self, source, target, expected):
        assert distance(source, target) == expected

    def test_empty_source(self):
        assert distance("", "abc") == 3

    def test_empty_target(self):
        assert distance("abc", "") == 3

    def test_both_empty(self):
        assert distance("", "") == 0

    def test_accepts_character_lists(self):
        assert distance(list("jogging"), list("logger")) == 4

    def test_accepts_token_sequences(self):
        """Any sequence of hashable units works, e.g. words"""
        assert distance(["the", "prophet"], ["the", "madman"]) == 1
        assert distance(("a", "b", "c"), ("a", "c")) == 1


class TestGraphemes:
    """Multi-code-point characters count as a single edit unit"""

    def test_combining_mark_is_one_unit(self):
        decomposed = "cafe\u0301"
        assert distance(decomposed, "") == 4
        assert distance(decomposed, "cafe") == 1

    def test_precomposed_and_decomposed_are_not_normalized(self):
        assert distance("caf\u00e9", "cafe\u0301") == 1

    def test_emoji_sequence_is_one_unit(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert distance(family, "") == 1
        assert distance("a" + family, "a") == 1


class TestInvariants:
    """Properties that hold for every pair"""

    @pytest.mark.parametrize("word", WORDS)
    def test_identity(self, word):
        assert distance(word, word) == 0

    @pytest.mark.parametrize("source", WORDS)
    @pytest.mark.parametrize("target", WORDS)
    def test_symmetry_and_bounds(self, source, target):
        d = distance(source, target)
        assert d == distance(target, source)
        assert abs(len(source) - len(target)) <= d <= len(source) + len(target)

    @pytest.mark.parametrize("source", WORDS)
    @pytest.mark.parametrize("target", WORDS)
    def test_agrees_with_rapidfuzz(self, source, target):
        assert distance(source, target) == Levenshtein.distance(source, target)
