"""
Configuration settings for the NLP Text Analysis toolkit.

This module contains all configurable parameters for the toolkit.
Modify these values to customize the behavior of the system, or pass a
dictionary of overrides to TextAnalyzer(config_dict=...).
"""

# Tokenization settings
TOKEN_PATTERN = r"[^\p{L}'-]"  # Separators: anything but letters, apostrophes and hyphens
LOWERCASE = True  # Downcase tokens after splitting

# Counter settings
DEFAULT_PRECISION = 2  # Decimal digits for averages and densities
TOP_N = 10  # Number of rows shown in frequency summaries

# Soundex settings
SOUNDEX_DIGITS = 3  # Digits following the first letter
SOUNDEX_SEPARATOR = "-"  # Between the first letter and the digits

# Output settings
VERBOSE = False  # Enable verbose output during processing
RESULT_FORMAT = "table"  # Result format: "table", "list", "json"

# Debug settings
LOG_LEVEL = "WARNING"  # Logging level: DEBUG, INFO, WARNING, ERROR

# File settings
TEXT_ENCODING = "utf-8"  # Encoding used to read input files
