"""
Exception hierarchy for the text analysis toolkit.
"""


class TextAnalysisError(Exception):
    """Base class for all errors raised by this package."""


class SoundexError(TextAnalysisError, ValueError):
    """Raised when a name cannot be Soundex-encoded."""


class EmptyInputError(SoundexError):
    """Raised when an empty name is passed to the Soundex encoder."""

    def __init__(self, message: str = "Cannot encode an empty name"):
        super().__init__(message)


class InvalidNameError(SoundexError):
    """Raised when a name does not start with a Latin letter."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name must start with a Latin letter A-Z: {name!r}")


class InvalidFilterError(TextAnalysisError, TypeError):
    """Raised when an exclusion filter has an unsupported type."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            "Filter must be a Predicate, ExactTokens, PatternFilter, or a list "
            f"of any combination of those types, got {type(value).__name__}"
        )


class UnknownOperationError(TextAnalysisError, LookupError):
    """Raised when a counter operation name does not exist."""

    def __init__(self, name: str, available):
        self.operation = name
        self.available = list(available)
        super().__init__(
            f"Unknown operation {name!r}. Available: {', '.join(self.available)}"
        )
