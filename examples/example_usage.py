#!/usr/bin/env python3
"""
Example usage of the NLP Text Analysis toolkit.

This script demonstrates how to use the toolkit programmatically
for various analysis tasks.
"""

import sys
from pathlib import Path

# Add parent directory to path to import text_analysis
sys.path.append(str(Path(__file__).parent.parent))

from text_analysis import (
    ExactTokens,
    PatternFilter,
    Predicate,
    TextAnalyzer,
    distance,
    encode,
)

PROPHET = (
    "Your children are not your children. They are the sons and daughters "
    "of Life's longing for itself. They come through you but not from you, "
    "and though they are with you yet they belong not to you."
)


def tokenize_example():
    """Demonstrate tokenization with exclusion filters."""
    print("=== Tokenization Example ===")

    analyzer = TextAnalyzer()

    print(analyzer.tokenize("Al-Ajniha al-Mutakassira"))
    print(analyzer.tokenize("Broken Wings, 1912", pattern=r","))
    print(analyzer.tokenize(
        "Eye of The Prophet",
        exclude=[ExactTokens(["eye"]), Predicate(lambda t: t.endswith("he")), PatternFilter("of")],
    ))


def statistics_example():
    """Demonstrate token statistics."""
    print("\n=== Statistics Example ===")

    analyzer = TextAnalyzer(config_dict={"TOP_N": 5})
    summary = analyzer.analyze(PROPHET, exclude=ExactTokens.from_string("the and of"))
    analyzer.result_formatter.print_summary(summary)

    print("\nDensity with 4 digits:")
    print(analyzer.from_string(PROPHET, "token_density", fn_opts={"precision": 4}))


def soundex_example():
    """Demonstrate Soundex phonetic encoding."""
    print("\n=== Soundex Example ===")

    names = ["Washington", "Lee", "Gutierrez", "Jackson", "Tymczak", "Ashcraft", "Ashcroft", "Núñez"]
    for name in names:
        print(f"  {name:<12} {encode(name)}")


def distance_example():
    """Demonstrate Levenshtein distance."""
    print("\n=== Levenshtein Example ===")

    pairs = [("kitten", "sitting"), ("jogging", "logger"), ("HOUSEBOAT", "houseboat"), ("café", "café")]
    for source, target in pairs:
        print(f"  {source!r} -> {target!r}: {distance(source, target)}")


def main():
    """Run all examples."""
    print("NLP Text Analysis - Example Usage")
    print("=" * 50)

    try:
        tokenize_example()
        statistics_example()
        soundex_example()
        distance_example()

        print("\n" + "=" * 50)
        print("All examples completed successfully!")

    except Exception as e:
        print(f"Error running examples: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
