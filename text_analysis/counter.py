"""
Token statistics.

This module computes counts, lengths, frequencies and densities over a list
of tokens. Character counts are grapheme counts, so "café" has four
characters whether or not its accent is precomposed.
"""

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Sequence, Tuple

from .utils import grapheme_length

# Operations callable through TextAnalyzer.from_string()
OPERATIONS = (
    "uniq_tokens",
    "token_count",
    "uniq_token_count",
    "char_count",
    "average_chars_per_token",
    "token_lengths",
    "longest_tokens",
    "token_frequency",
    "most_frequent_tokens",
    "token_density",
)


def round_half_up(value: float, precision: int) -> float:
    """Round to precision digits, sending exact halves away from zero."""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _top_ranked(scores: Dict[str, int]) -> List[Tuple[str, int]]:
    """Return every (token, score) pair sharing the highest score."""
    if not scores:
        return []
    best = max(scores.values())
    return sorted((token, value) for token, value in scores.items() if value == best)


class TokenCounter:
    """Retrieves statistics on a list of tokens."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _precision(self, precision):
        if precision is None:
            return self.config.DEFAULT_PRECISION
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
        return precision

    def uniq_tokens(self, tokens: Sequence[str]) -> List[str]:
        """
        Return the unique tokens in order of first appearance.

        Example: uniq_tokens(["the", "prophet", "eye", "of", "the", "prophet"]) returns ['the', 'prophet', 'eye', 'of']
        """
        return list(dict.fromkeys(tokens))

    def token_count(self, tokens: Sequence[str]) -> int:
        """Return the number of tokens."""
        return len(tokens)

    def uniq_token_count(self, tokens: Sequence[str]) -> int:
        """Return the number of unique tokens."""
        return len(self.uniq_tokens(tokens))

    def char_count(self, tokens: Sequence[str]) -> int:
        """Return the total number of characters across all tokens."""
        return sum(grapheme_length(token) for token in tokens)

    def average_chars_per_token(self, tokens: Sequence[str], precision: int = None) -> float:
        """
        Return the average characters per token, rounded to precision digits.

        An empty token list averages to 0.0.

        Args:
            tokens: List of tokens.
            precision: Decimal digits to keep. If None, uses config default.

        Returns:
            Rounded average.
        """
        precision = self._precision(precision)
        if not tokens:
            return 0.0
        return round_half_up(self.char_count(tokens) / self.token_count(tokens), precision)

    def token_lengths(self, tokens: Sequence[str]) -> Dict[str, int]:
        """Return a map of each unique token to its length."""
        return {token: grapheme_length(token) for token in self.uniq_tokens(tokens)}

    def longest_tokens(self, tokens: Sequence[str]) -> List[Tuple[str, int]]:
        """
        Return (token, length) pairs for the longest tokens.

        Example: longest_tokens(["kingdom", "of", "the", "imagination"]) returns [('imagination', 11)]
        """
        return _top_ranked(self.token_lengths(tokens))

    def token_frequency(self, tokens: Sequence[str]) -> Dict[str, int]:
        """Return a map of tokens to the number of times they occur."""
        return dict(Counter(tokens))

    def most_frequent_tokens(self, tokens: Sequence[str]) -> List[Tuple[str, int]]:
        """
        Return (token, frequency) pairs sharing the highest frequency.

        Example: most_frequent_tokens(["the", "prophet", "eye", "of", "the", "prophet"]) returns [('prophet', 2), ('the', 2)]
        """
        return _top_ranked(self.token_frequency(tokens))

    def token_density(self, tokens: Sequence[str], precision: int = None) -> Dict[str, float]:
        """
        Return a map of tokens to their share of all tokens.

        Args:
            tokens: List of tokens.
            precision: Decimal digits to keep. If None, uses config default.

        Returns:
            Dictionary of token to rounded density.
        """
        precision = self._precision(precision)
        total = self.token_count(tokens)
        return {
            token: round_half_up(frequency / total, precision)
            for token, frequency in self.token_frequency(tokens).items()
        }

    def summarize(self, tokens: Sequence[str], top_n: int = None,
                  precision: int = None) -> Dict[str, Any]:
        """
        Collect the main statistics of a token list in one dictionary.

        Args:
            tokens: List of tokens.
            top_n: Number of most common tokens to include. If None, uses config default.
            precision: Decimal digits for averages and densities.

        Returns:
            Dictionary of statistics; "top_tokens" holds (token, count, density) tuples.
        """
        if top_n is None:
            top_n = self.config.TOP_N
        precision = self._precision(precision)

        density = self.token_density(tokens, precision=precision)
        most_common = Counter(tokens).most_common(top_n) if top_n > 0 else []

        return {
            "token_count": self.token_count(tokens),
            "uniq_token_count": self.uniq_token_count(tokens),
            "char_count": self.char_count(tokens),
            "average_chars_per_token": self.average_chars_per_token(tokens, precision=precision),
            "longest_tokens": self.longest_tokens(tokens),
            "most_frequent_tokens": self.most_frequent_tokens(tokens),
            "top_tokens": [(token, count, density[token]) for token, count in most_common],
        }
