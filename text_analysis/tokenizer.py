"""
Tokenization module.

This module splits text into tokens using a separator regular expression,
with optional exclusion filters.
"""

import logging
from collections import Counter
from typing import Dict, List, Tuple

import regex

from .filters import as_filter

logger = logging.getLogger(__name__)


class Tokenizer:
    """Splits text into tokens with a separator regular expression."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self._default_pattern = regex.compile(config.TOKEN_PATTERN)

    def _compile(self, pattern):
        if pattern is None:
            return self._default_pattern
        if isinstance(pattern, str):
            return regex.compile(pattern)
        return pattern

    def tokenize(self, text: str, pattern=None, exclude=None,
                 lowercase: bool = None) -> List[str]:
        """
        Split text into tokens using a separator regular expression.

        The default pattern ignores punctuation, but keeps apostrophes and
        hyphens so that "one's" and "al-Ajniha" stay single tokens.

        Args:
            text: Text to tokenize.
            pattern: Separator regex (string or compiled). If None, uses config default.
            exclude: A filter, or a list of filters, removing matching tokens.
            lowercase: Whether to downcase tokens. If None, uses config default.

        Returns:
            List of tokens.

        Raises:
            InvalidFilterError: If exclude is not a filter or a list of filters.
        """
        if lowercase is None:
            lowercase = self.config.LOWERCASE

        tokens = [t for t in self._compile(pattern).split(text) if t]
        if lowercase:
            tokens = [t.lower() for t in tokens]

        if exclude is not None:
            token_filter = as_filter(exclude)
            tokens = [t for t in tokens if not token_filter.matches(t)]

        logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
        return tokens

    def build_vocab(self, texts: Dict[str, str], **tokenize_opts) -> Tuple[Dict[str, List[str]], Counter]:
        """
        Tokenize several texts and collect their combined token frequencies.

        Args:
            texts: Dictionary mapping a text id to its content.
            **tokenize_opts: Options passed to tokenize().

        Returns:
            Tuple of (tokens per text id, combined token frequency).
        """
        per_text = {}
        token_freq = Counter()
        for text_id, text in texts.items():
            tokens = self.tokenize(text, **tokenize_opts)
            per_text[text_id] = tokens
            token_freq.update(tokens)
        return per_text, token_freq

