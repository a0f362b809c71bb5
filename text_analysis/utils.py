"""
Utility functions for grapheme handling and result formatting.

This module contains helpers for Unicode grapheme segmentation and the
console/JSON formatting of analysis results.
"""

import json
from typing import Any, Dict, List, Sequence, Tuple

import regex

# Extended grapheme cluster: one user-perceived character
GRAPHEME_REGEX = regex.compile(r"\X")


def graphemes(text: str) -> List[str]:
    """
    Split text into extended grapheme clusters.

    Args:
        text: Input text.

    Returns:
        List of user-perceived characters, e.g. "é" is a single item.
    """
    return GRAPHEME_REGEX.findall(text)


def grapheme_length(text: str) -> int:
    """Return the number of grapheme clusters in text."""
    return len(graphemes(text))


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _format_tokens(self, tokens: Sequence[str], maxn: int = 12) -> str:
        """
        Return tokens as a compact string; truncate long lists with an ellipsis.

        Args:
            tokens: List of tokens to format.
            maxn: Maximum number of tokens to show.

        Returns:
            Formatted token string.
        """
        tokens = list(tokens)
        if len(tokens) <= maxn:
            return "[" + ", ".join(tokens) + "]"
        head = ", ".join(tokens[:maxn//2])
        tail = ", ".join(tokens[-maxn//2:])
        return "[" + head + ", …, " + tail + "]"

    def format_value(self, value: Any) -> str:
        """Render a single counter result for console output."""
        if isinstance(value, dict):
            return ", ".join(f"{k}: {v}" for k, v in sorted(value.items()))
        if isinstance(value, list) and value and isinstance(value[0], tuple):
            return ", ".join(f"{token} ({n})" for token, n in value)
        if isinstance(value, (list, tuple)):
            return self._format_tokens([str(v) for v in value])
        return str(value)

    def render_table(self, headers: List[str], rows: List[List[str]],
                     max_widths: List[int] = None) -> str:
        """
        Render rows as a clean ASCII table.

        Args:
            headers: Column headers.
            rows: Table rows, one string per column.
            max_widths: Optional per-column width caps.

        Returns:
            The table as a single string.
        """
        if max_widths is None:
            max_widths = [40] * len(headers)

        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            width = min(width, max_widths[j])
            col_widths.append(width)

        # Helper to clip and pad
        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        lines = [
            " | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers)),
            "-+-".join("-" * col_widths[i] for i in range(len(headers))),
        ]
        for row in rows:
            lines.append(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))
        return "\n".join(lines)

    def format_summary(self, summary: Dict[str, Any], result_format: str = None) -> str:
        """
        Format a TokenCounter summary in the configured result format.

        Args:
            summary: Dictionary produced by TokenCounter.summarize().
            result_format: "table", "list" or "json". If None, uses config default.

        Returns:
            Formatted summary string.
        """
        if result_format is None:
            result_format = self.config.RESULT_FORMAT

        if result_format == "json":
            return json.dumps(summary, ensure_ascii=False, indent=2)

        scalars = [(k, v) for k, v in summary.items() if k != "top_tokens"]
        top: List[Tuple[str, int, float]] = summary.get("top_tokens", [])

        if result_format == "list":
            lines = [f"{key}: {self.format_value(value)}" for key, value in scalars]
            for rank, (token, freq, density) in enumerate(top, start=1):
                lines.append(f"#{rank}  {token}  count={freq}  density={density}")
            return "\n".join(lines)

        if result_format != "table":
            raise ValueError(f"Unknown result format: {result_format!r}")

        stats_table = self.render_table(
            ["Statistic", "Value"],
            [[key, self.format_value(value)] for key, value in scalars],
            max_widths=[28, 60],
        )
        if not top:
            return "=== Token Statistics ===\n" + stats_table

        top_table = self.render_table(
            ["#", "Token", "Count", "Density"],
            [[str(rank), token, str(freq), str(density)]
             for rank, (token, freq, density) in enumerate(top, start=1)],
            max_widths=[3, 30, 8, 8],
        )
        return "=== Token Statistics ===\n" + stats_table + "\n\n=== Top Tokens ===\n" + top_table

    def print_summary(self, summary: Dict[str, Any], result_format: str = None) -> None:
        """Print a TokenCounter summary."""
        print(self.format_summary(summary, result_format=result_format))
