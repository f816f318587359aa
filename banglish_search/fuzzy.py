"""
Fuzzy matching module for misspelled query tokens.

This module decides whether a token variant is close enough to a word of a
candidate name using Levenshtein distance relative to the longer term.
"""

from typing import Iterable, List, Optional, Tuple
from rapidfuzz.distance import Levenshtein


class FuzzyMatcher:
    """Handles edit-distance matching between token variants and name words."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def is_eligible(self, term: str) -> bool:
        """Return True if a word or variant is long enough for fuzzy matching."""
        return len(term) > self.config.FUZZY_MIN_TERM_LENGTH

    def max_distance(self, variant: str, word: str) -> float:
        """
        Allowed edit distance for a pair of terms.

        Args:
            variant: Token variant.
            word: Word of a candidate name.

        Returns:
            FUZZY_DISTANCE_RATIO times the longer length.
        """
        return max(len(variant), len(word)) * self.config.FUZZY_DISTANCE_RATIO

    def is_close(self, variant: str, word: str) -> bool:
        """
        Check whether two terms are within the allowed edit distance.

        Both terms must be longer than FUZZY_MIN_TERM_LENGTH.

        Args:
            variant: Token variant.
            word: Word of a candidate name.

        Returns:
            True if the pair counts as a fuzzy match.
        """
        if not (self.is_eligible(variant) and self.is_eligible(word)):
            return False
        return Levenshtein.distance(variant, word) <= self.max_distance(variant, word)

    def find_match(self, variants: Iterable[str], words: List[str]) -> Optional[Tuple[str, str]]:
        """
        Find the first (variant, word) pair that matches, scanning words first.

        Args:
            variants: Variants of one query token.
            words: Lowercased words of a candidate name.

        Returns:
            The matching (variant, word) pair, or None.
        """
        variants = list(variants)
        for word in words:
            for variant in variants:
                if self.is_close(variant, word):
                    return variant, word
        return None
