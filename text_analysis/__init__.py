"""
NLP Text Analysis

A small library of text analysis primitives: a configurable tokenizer,
token statistics, Soundex phonetic encoding and Levenshtein edit distance.

Main components:
- TextAnalyzer: Unified interface sharing one configuration
- Tokenizer: Regex tokenization with exclusion filters
- TokenCounter: Counts, frequencies, densities and top-k tokens
- levenshtein.distance: Grapheme-aware edit distance
- soundex.encode: NARA Soundex codes
"""

from .analyzer import TextAnalyzer
from .counter import TokenCounter
from .exceptions import (
    EmptyInputError,
    InvalidFilterError,
    InvalidNameError,
    SoundexError,
    TextAnalysisError,
    UnknownOperationError,
)
from .filters import AnyOf, ExactTokens, PatternFilter, Predicate
from .levenshtein import distance
from .soundex import SoundexEncoder, encode
from .tokenizer import Tokenizer
from .utils import ResultFormatter, graphemes

__version__ = "1.0.0"
__author__ = "Rohan Jain"

_default_analyzer = None


def from_string(text, func, opts=None, fn_opts=None):
    """
    Tokenize text and apply the TokenCounter operation named func.

    Example: from_string("The Prophet", "token_count") returns 2.
    See TextAnalyzer.from_string().
    """
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = TextAnalyzer()
    return _default_analyzer.from_string(text, func, opts=opts, fn_opts=fn_opts)


__all__ = [
    "TextAnalyzer",
    "Tokenizer",
    "TokenCounter",
    "SoundexEncoder",
    "ResultFormatter",
    "Predicate",
    "ExactTokens",
    "PatternFilter",
    "AnyOf",
    "distance",
    "encode",
    "graphemes",
    "from_string",
    "TextAnalysisError",
    "SoundexError",
    "EmptyInputError",
    "InvalidNameError",
    "InvalidFilterError",
    "UnknownOperationError",
]
