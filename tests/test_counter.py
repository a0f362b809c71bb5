"""
Token statistics tests
"""
import pytest

from text_analysis import config
from text_analysis.counter import TokenCounter, round_half_up

PROPHET = ["the", "prophet", "eye", "of", "the", "prophet"]


@pytest.fixture
def counter():
    return TokenCounter(config)


class TestCounts:
    """Counts and unique tokens"""

    def test_uniq_tokens_keep_order(self, counter):
        assert counter.uniq_tokens(PROPHET) == ["the", "prophet", "eye", "of"]

    def test_token_count(self, counter):
        assert counter.token_count(["the", "madman"]) == 2

    def test_uniq_token_count(self, counter):
        assert counter.uniq_token_count(PROPHET) == 4

    def test_char_count(self, counter):
        assert counter.char_count(["the", "wanderer"]) == 11

    def test_char_count_uses_graphemes(self, counter):
        assert counter.char_count(["cafe\u0301"]) == 4


class TestAverages:
    """Rounded averages"""

    def test_default_precision(self, counter):
        assert counter.average_chars_per_token(["twenty", "drawings"]) == 7.0

    def test_custom_precision(self, counter):
        tokens = ["The", "Treasured", "Writings", "of", "Kahlil", "Gibran"]
        assert counter.average_chars_per_token(tokens, precision=4) == 5.6667

    def test_halves_round_up(self, counter):
        assert counter.average_chars_per_token(["ab", "abc"], precision=0) == 3.0
        assert counter.average_chars_per_token(["ab", "abc"], precision=1) == 2.5

    def test_empty(self, counter):
        assert counter.average_chars_per_token([]) == 0.0

    @pytest.mark.parametrize("precision", [-1, 1.5, "2", True])
    def test_invalid_precision(self, counter, precision):
        with pytest.raises(ValueError):
            counter.average_chars_per_token(["a"], precision=precision)


class TestMaps:
    """Lengths, frequencies and densities"""

    def test_token_lengths(self, counter):
        assert counter.token_lengths(["voice", "and", "master"]) == {"and": 3, "master": 6, "voice": 5}

    def test_token_frequency(self, counter):
        assert counter.token_frequency(PROPHET) == {"eye": 1, "of": 1, "prophet": 2, "the": 2}

    def test_token_density(self, counter):
        assert counter.token_density(PROPHET) == {"eye": 0.17, "of": 0.17, "prophet": 0.33, "the": 0.33}

    def test_token_density_precision(self, counter):
        assert counter.token_density(PROPHET, precision=4) == {
            "eye": 0.1667, "of": 0.1667, "prophet": 0.3333, "the": 0.3333
        }

    def test_token_density_rounds_halves_up(self, counter):
        tokens = ["a", "b", "c", "d", "e", "f", "g", "h"]
        assert counter.token_density(tokens)["a"] == 0.13
        assert counter.token_density(tokens, precision=3)["a"] == 0.125

    def test_empty_maps(self, counter):
        assert counter.token_lengths([]) == {}
        assert counter.token_frequency([]) == {}
        assert counter.token_density([]) == {}


class TestRanked:
    """Top ranked tokens"""

    def test_longest_tokens(self, counter):
        assert counter.longest_tokens(["kingdom", "of", "the", "imagination"]) == [("imagination", 11)]

    def test_most_frequent_tokens_ties(self, counter):
        assert counter.most_frequent_tokens(PROPHET) == [("prophet", 2), ("the", 2)]

    def test_empty(self, counter):
        assert counter.longest_tokens([]) == []
        assert counter.most_frequent_tokens([]) == []


class TestRoundHalfUp:
    """Decimal rounding helper"""

    @pytest.mark.parametrize(
        "value, precision, expected",
        [(0.125, 2, 0.13), (2.5, 0, 3.0), (3.75, 1, 3.8), (17 / 3, 4, 5.6667), (0.5, 2, 0.5)],
    )
    def test_round_half_up(self, value, precision, expected):
        assert round_half_up(value, precision) == expected


class TestSummarize:
    """Combined summary"""

    def test_summary(self, counter):
        summary = counter.summarize(PROPHET, top_n=2)
        assert summary["token_count"] == 6
        assert summary["uniq_token_count"] == 4
        assert summary["char_count"] == 25
        assert summary["average_chars_per_token"] == 4.17
        assert summary["most_frequent_tokens"] == [("prophet", 2), ("the", 2)]
        assert summary["top_tokens"] == [("the", 2, 0.33), ("prophet", 2, 0.33)]

    def test_default_top_n(self, counter):
        tokens = [f"t{i}" for i in range(config.TOP_N + 5)]
        assert len(counter.summarize(tokens)["top_tokens"]) == config.TOP_N

    def test_empty_summary(self, counter):
        summary = counter.summarize([])
        assert summary["token_count"] == 0
        assert summary["top_tokens"] == []
