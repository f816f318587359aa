"""
Relevancy scoring and ranking module.

This module scores candidate names against a query and its per-token
variants, and orders candidates by score.

Scoring:
    PHRASE_BONUS     name contains the whole query
    TOKEN_HIT_SCORE  per token, name contains any of its variants
    FUZZY_HIT_SCORE  per token without a hit, a name word is within
                     FUZZY_DISTANCE_RATIO edit distance of a variant
"""

from typing import List, Sequence

from .fuzzy import FuzzyMatcher
from .models import CatalogRecord, ScoredCandidate, TokenVariants


class Ranker:
    """Handles candidate scoring and ranking."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.fuzzy = FuzzyMatcher(config)

    def score(self, name: str, query: str, token_variants: Sequence[TokenVariants]) -> int:
        """
        Compute the relevancy score of a candidate name.

        Args:
            name: Candidate display name.
            query: Original (trimmed) query.
            token_variants: Variant sets, one per query token.

        Returns:
            Non-negative integer score.
        """
        name_lower = name.lower()
        query_lower = query.lower()
        score = 0

        if query_lower and query_lower in name_lower:
            score += self.config.PHRASE_BONUS

        words = None
        for tv in token_variants:
            if any(v in name_lower for v in tv.variants):
                score += self.config.TOKEN_HIT_SCORE
                continue

            if len(query) > self.config.FUZZY_MIN_QUERY_LENGTH:
                if words is None:
                    words = name_lower.split()
                if self.fuzzy.find_match(tv.variants, words) is not None:
                    score += self.config.FUZZY_HIT_SCORE

        return score

    def score_records(self, records: Sequence[CatalogRecord], query: str,
                      token_variants: Sequence[TokenVariants]) -> List[ScoredCandidate]:
        """Score every record, keeping fetch order."""
        return [
            ScoredCandidate(record=r, name=r.name, score=self.score(r.name, query, token_variants))
            for r in records
        ]

    def rank(self, candidates: Sequence[ScoredCandidate], topk: int) -> List[ScoredCandidate]:
        """
        Sort candidates by score descending and keep the top-k.

        The sort is stable, so candidates with equal scores stay in fetch order.

        Args:
            candidates: Scored candidates in fetch order.
            topk: Number of candidates to keep.

        Returns:
            Ranked, truncated list.
        """
        ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
        return ranked[:topk]

    def order_by_name_hits(self, records: Sequence[CatalogRecord], query: str,
                           variants: Sequence[str]) -> List[CatalogRecord]:
        """
        Bring books whose name holds the query, then each leading variant, to the top.

        Only the first BOOK_SEARCH_RANKED_VARIANTS variants take part. Writer-only
        matches sort after name matches; otherwise records keep their given order.

        Args:
            records: Matched books, newest first.
            query: Trimmed query.
            variants: Flattened query variants.

        Returns:
            Reordered list.
        """
        needles = [query.lower()] + list(variants[:self.config.BOOK_SEARCH_RANKED_VARIANTS])

        def misses(record: CatalogRecord) -> tuple:
            name = record.name.lower()
            return tuple(n not in name for n in needles)

        return sorted(records, key=misses)
