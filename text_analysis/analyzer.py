"""
Main TextAnalyzer class that ties the toolkit together.

This module contains the TextAnalyzer class that coordinates tokenization,
token statistics, phonetic encoding and edit distance behind one object
sharing a single configuration.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from . import config
from . import levenshtein
from .counter import OPERATIONS, TokenCounter
from .exceptions import UnknownOperationError
from .soundex import SoundexEncoder
from .tokenizer import Tokenizer
from .utils import ResultFormatter

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """
    Unified interface to the text analysis toolkit.

    Shortcut methods such as from_string() let the caller work with strings
    directly instead of tokenizing the input before applying any calculations.
    """

    def __init__(self, config_dict: Optional[Dict] = None):
        """
        Initialize the TextAnalyzer.

        Args:
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = self._load_config(config_dict)

        self.tokenizer = Tokenizer(self.config)
        self.counter = TokenCounter(self.config)
        self.soundex = SoundexEncoder(self.config)
        self.result_formatter = ResultFormatter(self.config)

        self.texts: Dict[str, str] = {}

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overlaid with a dictionary."""
        if config_dict:
            class Config:
                def __init__(self, config_dict):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in config_dict.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    def load_texts(self, paths: Iterable[Union[str, Path]]) -> Dict[str, str]:
        """
        Load text files from disk.

        Args:
            paths: Paths of the files to read.

        Returns:
            Dictionary mapping file name to text content.

        Raises:
            FileNotFoundError: If a file does not exist.
        """
        texts = {}
        for path in paths:
            path = Path(path)
            texts[path.name] = path.read_text(encoding=self.config.TEXT_ENCODING)
            logger.info("Loaded %s (%d characters)", path.name, len(texts[path.name]))
        self.texts = texts
        return texts

    def tokenize(self, text: str, **opts) -> List[str]:
        """Tokenize text; see Tokenizer.tokenize()."""
        return self.tokenizer.tokenize(text, **opts)

    def apply(self, tokens: Sequence[str], func: str, **fn_opts) -> Any:
        """
        Apply the TokenCounter operation named func to a list of tokens.

        Raises:
            UnknownOperationError: If func is not a counter operation.
        """
        if func not in OPERATIONS:
            raise UnknownOperationError(func, OPERATIONS)
        return getattr(self.counter, func)(tokens, **fn_opts)

    def from_string(self, text: str, func: str, opts: Optional[Dict] = None,
                    fn_opts: Optional[Dict] = None) -> Any:
        """
        Tokenize a string, then apply a TokenCounter operation to the tokens.

        The following two calls are equivalent:

            analyzer.from_string("The Prophet", "token_count")
            analyzer.counter.token_count(analyzer.tokenize("The Prophet"))

        Args:
            text: Input text.
            func: Name of a TokenCounter operation, e.g. "token_count".
            opts: Keyword options passed to the tokenizer.
            fn_opts: Keyword options passed to the operation.

        Returns:
            The operation's result.

        Raises:
            UnknownOperationError: If func is not a counter operation.
        """
        tokens = self.tokenize(text, **(opts or {}))
        return self.apply(tokens, func, **(fn_opts or {}))

    def analyze(self, text: str, top_n: Optional[int] = None, **opts) -> Dict[str, Any]:
        """
        Tokenize text and summarize its token statistics.

        Args:
            text: Input text.
            top_n: Number of most common tokens to include. If None, uses config default.
            **opts: Keyword options passed to the tokenizer.

        Returns:
            Summary dictionary; see TokenCounter.summarize().
        """
        tokens = self.tokenize(text, **opts)
        summary = self.counter.summarize(tokens, top_n=top_n)
        logger.info("Analyzed %d tokens (%d unique)",
                    summary["token_count"], summary["uniq_token_count"])
        return summary

    def analyze_texts(self, top_n: Optional[int] = None, **opts) -> Dict[str, Any]:
        """
        Summarize the combined tokens of every loaded text.

        Raises:
            RuntimeError: If no texts have been loaded.
        """
        if not self.texts:
            raise RuntimeError("No texts loaded. Call load_texts() first.")

        per_text, _freq = self.tokenizer.build_vocab(self.texts, **opts)
        tokens = [token for text_tokens in per_text.values() for token in text_tokens]
        return self.counter.summarize(tokens, top_n=top_n)

    def distance(self, source, target) -> int:
        """Levenshtein distance between two strings or sequences."""
        return levenshtein.distance(source, target)

    def encode(self, name) -> str:
        """Soundex code of a name."""
        return self.soundex.encode(name)

    def sounds_like(self, first: str, second: str) -> bool:
        """Return True if two names share a Soundex code."""
        return self.soundex.same_sound(first, second)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the loaded texts.

        Returns:
            Dictionary containing various statistics.

        Raises:
            RuntimeError: If no texts have been loaded.
        """
        if not self.texts:
            raise RuntimeError("No texts loaded. Call load_texts() first.")

        return {
            "num_texts": len(self.texts),
            "num_characters": sum(len(text) for text in self.texts.values()),
            "avg_text_length": sum(len(text) for text in self.texts.values()) / len(self.texts),
        }
