#!/usr/bin/env python3
"""
Main entry point for the NLP Text Analysis toolkit.

This script provides a command-line interface for the toolkit.
"""

import argparse
import logging
import sys

from text_analysis import ExactTokens, TextAnalyzer, TextAnalysisError
from text_analysis import config
from text_analysis.counter import OPERATIONS

PRECISION_OPERATIONS = ("average_chars_per_token", "token_density")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="NLP Text Analysis: token statistics, Soundex and Levenshtein distance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py stats --file book.txt --top-k 20      # Token statistics for a file
  python main.py stats --text "The Prophet" --exclude "the"
  python main.py count token_density --text "Eye of The Prophet" --precision 4
  python main.py soundex Washington Tymczak            # Soundex codes
  python main.py distance kitten sitting               # Edit distance
        """
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_input_args(sub):
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("--text", type=str, help="Text to analyze")
        source.add_argument("--file", type=str, nargs="+", help="File(s) to analyze")
        sub.add_argument(
            "--exclude",
            type=str,
            default=None,
            help="Space separated tokens to exclude, e.g. \"the of\""
        )
        sub.add_argument(
            "--pattern",
            type=str,
            default=None,
            help=f"Separator regular expression (default: {config.TOKEN_PATTERN})"
        )
        sub.add_argument(
            "--case-sensitive",
            action="store_true",
            help="Keep token case instead of lowercasing"
        )

    stats = subparsers.add_parser("stats", help="Summarize token statistics")
    add_input_args(stats)
    stats.add_argument(
        "--top-k",
        type=int,
        default=None,
        help=f"Number of top tokens to show (default: {config.TOP_N})"
    )
    stats.add_argument(
        "--format",
        choices=["table", "list", "json"],
        default=None,
        help=f"Output format (default: {config.RESULT_FORMAT})"
    )

    count = subparsers.add_parser("count", help="Run a single counter operation")
    count.add_argument("operation", choices=OPERATIONS, help="Counter operation")
    add_input_args(count)
    count.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal digits for averages and densities"
    )

    soundex = subparsers.add_parser("soundex", help="Print Soundex codes of names")
    soundex.add_argument("names", nargs="+", help="Names to encode")

    distance = subparsers.add_parser("distance", help="Print the Levenshtein distance")
    distance.add_argument("source", help="Source string")
    distance.add_argument("target", help="Target string")

    return parser


def tokenizer_opts(args) -> dict:
    """Translate parsed arguments into Tokenizer.tokenize() options."""
    opts = {"lowercase": not args.case_sensitive}
    if args.pattern:
        opts["pattern"] = args.pattern
    if args.exclude:
        opts["exclude"] = ExactTokens.from_string(args.exclude)
    return opts


def read_input(analyzer: TextAnalyzer, args) -> str:
    """Return the text given on the command line or read from files."""
    if args.text is not None:
        return args.text
    return "\n".join(analyzer.load_texts(args.file).values())


def main(argv=None):
    """Main entry point for the toolkit."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or config.VERBOSE else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    analyzer = TextAnalyzer()

    try:
        if args.command == "stats":
            text = read_input(analyzer, args)
            summary = analyzer.analyze(text, top_n=args.top_k, **tokenizer_opts(args))
            analyzer.result_formatter.print_summary(summary, result_format=args.format)
        elif args.command == "count":
            text = read_input(analyzer, args)
            fn_opts = {}
            if args.precision is not None and args.operation in PRECISION_OPERATIONS:
                fn_opts["precision"] = args.precision
            result = analyzer.from_string(
                text, args.operation, opts=tokenizer_opts(args), fn_opts=fn_opts
            )
            print(analyzer.result_formatter.format_value(result))
        elif args.command == "soundex":
            for name in args.names:
                print(f"{name}\t{analyzer.encode(name)}")
        elif args.command == "distance":
            print(analyzer.distance(args.source, args.target))
    except (TextAnalysisError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"Error reading input: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
