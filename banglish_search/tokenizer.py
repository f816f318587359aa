"""
Query tokenization and phonetic expansion.

This module splits a search query into tokens and expands every token into
its lowercase form plus its Bengali-script transliterations, so that a query
typed in Banglish also finds names written in Bengali.
"""

import re
from typing import Iterable, List

from .models import TokenVariants
from .phonetic import translate

_WHITESPACE = re.compile(r"\s+")


def _unique(values: Iterable[str]) -> tuple:
    """Drop duplicates, keeping the first occurrence."""
    return tuple(dict.fromkeys(values))


class Tokenizer:
    """Handles query normalization and variant generation."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def normalize_query(self, text: str) -> str:
        """Collapse whitespace runs to a single space and trim the ends."""
        if not text:
            return ""
        return _WHITESPACE.sub(" ", text).strip()

    def tokenize_query(self, text: str) -> List[str]:
        """
        Split a query into whitespace-delimited tokens.

        Args:
            text: Raw query string.

        Returns:
            List of tokens; empty for an empty or blank query.
        """
        normalized = self.normalize_query(text)
        if not normalized:
            return []
        return normalized.split(" ")

    def token_variants(self, token: str) -> TokenVariants:
        """
        Build the variant set of a single token.

        The plain lowercase token always comes first. Pure ASCII tokens also
        get their transliteration, and tokens containing "o" get a second
        transliteration with every "o" read as the inherent vowel "A"
        (Banglish writers use "o" for both sounds).

        Args:
            token: A query token.

        Returns:
            TokenVariants for the token.
        """
        lowered = token.lower()
        variants = [lowered]

        if token.isascii():
            variants.append(translate(token).lower())

            if "o" in lowered:
                inherent = re.sub("o", "A", token, flags=re.IGNORECASE)
                variants.append(translate(inherent).lower())

        return TokenVariants(token=token, variants=_unique(variants))

    def expand_query(self, text: str) -> List[TokenVariants]:
        """
        Expand a query into per-token variant sets, in token order.

        Args:
            text: Raw query string.

        Returns:
            List of TokenVariants.
        """
        return [self.token_variants(token) for token in self.tokenize_query(text)]

    def flatten_variants(self, expanded: List[TokenVariants]) -> List[str]:
        """Return every variant of every token, without duplicates."""
        return list(_unique(v for tv in expanded for v in tv.variants))
