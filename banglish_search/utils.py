"""
Utility functions for result formatting.

This module turns suggestion responses into the JSON payload served to the
frontend, and renders them for the console.
"""

import json
from typing import Any, Dict, List

from .models import BookSearchResult, SuggestionResponse


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def to_payload(self, response: SuggestionResponse) -> Dict[str, Any]:
        """
        Shape a response as {"data": [...], "meta": {"variants": [...]}}.

        The popular (empty query) response has no meta section.

        Args:
            response: Suggestion response.

        Returns:
            JSON-serializable dictionary.
        """
        payload: Dict[str, Any] = {"data": [entry.to_dict() for entry in response.data]}
        if not response.is_popular:
            payload["meta"] = {"variants": list(response.variants)}
        return payload

    def to_json(self, response: SuggestionResponse, indent: int = 2) -> str:
        """Serialize a response payload, keeping Bengali text readable."""
        return json.dumps(self.to_payload(response), ensure_ascii=False, indent=indent)

    def _format_variants(self, variants: List[str], maxn: int = 12) -> str:
        """
        Return variants as a compact string; truncate long lists with an ellipsis.

        Args:
            variants: List of variants to format.
            maxn: Maximum number of variants to show.

        Returns:
            Formatted variant string.
        """
        if len(variants) <= maxn:
            return "[" + ", ".join(variants) + "]"
        head = ", ".join(variants[:maxn//2])
        tail = ", ".join(variants[-maxn//2:])
        return "[" + head + ", …, " + tail + "]"

    def print_results_table(self, response: SuggestionResponse, max_chars: int = None) -> None:
        """
        Render suggestions as a clean ASCII table.

        Args:
            response: Suggestion response.
            max_chars: Maximum characters of a name.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not response.data:
            print("No suggestions found.")
            return

        rows = []
        for rank, entry in enumerate(response.data, start=1):
            score = "-" if entry.relevancy is None else str(entry.relevancy)
            rows.append([str(rank), entry.id, score, entry.type, entry.name, entry.url])

        headers = ["#", "ID", "Score", "Type", "Name", "URL"]
        if not self.config.SHOW_SCORES:
            headers.pop(2)
            rows = [row[:2] + row[3:] for row in rows]

        # Compute column widths with caps for Name and URL
        max_widths = {"#": 3, "ID": 20, "Score": 5, "Type": 12, "Name": max_chars, "URL": 40}
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            width = min(width, max_widths[h])
            col_widths.append(width)

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        line = " | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers))
        sep = "-+-".join("-" * col_widths[i] for i in range(len(headers)))
        print("\n=== Suggestions ===")
        print(line)
        print(sep)

        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))

        if not response.is_popular:
            print(f"\n(variants used: {self._format_variants(response.variants)})\n")

    def print_results_simple(self, response: SuggestionResponse) -> None:
        """
        Print a simple view of suggestions.

        Args:
            response: Suggestion response.
        """
        if not response.data:
            print("No suggestions found.")
            return

        print("\n=== Suggestions ===")
        for rank, entry in enumerate(response.data, start=1):
            score = "" if entry.relevancy is None else f"  score={entry.relevancy}"
            print(f"#{rank}  {entry.id}{score}  type={entry.type}")
            print(f"     {entry.name}  ->  {entry.url}")

        if not response.is_popular:
            print(f"\n(variants used: {self._format_variants(response.variants)})\n")

    def print_book_results(self, result: BookSearchResult) -> None:
        """
        Print one page of catalog search results.

        Args:
            result: Book search result.
        """
        if not result.books:
            print("No books found.")
            return

        print(f"\n=== Books ({len(result.books)} of {result.total}) ===")
        for rank, book in enumerate(result.books, start=1):
            writer = f"  by {book.writer}" if book.writer else ""
            print(f"#{rank}  {book.name}{writer}")

        if result.variants:
            print(f"\n(variants used: {self._format_variants(result.variants)})\n")

    def print_results(self, response: SuggestionResponse) -> None:
        """Print a response in the configured RESULT_FORMAT."""
        fmt = self.config.RESULT_FORMAT
        if fmt == "json":
            print(self.to_json(response))
        elif fmt == "list":
            self.print_results_simple(response)
        else:
            self.print_results_table(response)
