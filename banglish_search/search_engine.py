"""
Main SuggestionEngine class that orchestrates the search-suggestion pipeline.

This module contains the SuggestionEngine class that coordinates query
expansion, catalog lookups, scoring and result shaping for the
search-as-you-type endpoint of the bookstore.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional

from .catalog import CatalogProvider
from .models import (
    AUTHOR, BOOK, CATEGORIES, CATEGORY, POPULAR,
    BookSearchResult, CatalogRecord, ScoredCandidate, SuggestionEntry, SuggestionResponse, TokenVariants,
)
from .ranker import Ranker
from .tokenizer import Tokenizer
import config

logger = logging.getLogger(__name__)


class QueryTooLongError(ValueError):
    """Raised when a query exceeds MAX_QUERY_LENGTH."""


class CategorySettings(NamedTuple):
    fetch_limit: int
    result_limit: int
    id_prefix: str
    label: str
    url_template: str


class SuggestionEngine:
    """
    Suggestion engine that ranks books, authors and categories for a query.

    Every call is independent: the engine keeps no per-query state, so a
    single instance can serve concurrent requests.
    """

    def __init__(self, catalog: CatalogProvider, config_dict: Optional[Dict] = None):
        """
        Initialize the SuggestionEngine.

        Args:
            catalog: Provider of candidate records.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = self._load_config(config_dict)
        self.catalog = catalog

        self.tokenizer = Tokenizer(self.config)
        self.ranker = Ranker(self.config)

        self.categories: Dict[str, CategorySettings] = {
            BOOK: CategorySettings(
                self.config.BOOK_FETCH_LIMIT, self.config.BOOK_RESULT_LIMIT,
                self.config.BOOK_ID_PREFIX, self.config.BOOK_LABEL, self.config.BOOK_URL_TEMPLATE,
            ),
            AUTHOR: CategorySettings(
                self.config.AUTHOR_FETCH_LIMIT, self.config.AUTHOR_RESULT_LIMIT,
                self.config.AUTHOR_ID_PREFIX, self.config.AUTHOR_LABEL, self.config.AUTHOR_URL_TEMPLATE,
            ),
            CATEGORY: CategorySettings(
                self.config.CATEGORY_FETCH_LIMIT, self.config.CATEGORY_RESULT_LIMIT,
                self.config.CATEGORY_ID_PREFIX, self.config.CATEGORY_LABEL, self.config.CATEGORY_URL_TEMPLATE,
            ),
        }

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overridden by a dictionary."""
        if config_dict:
            class Config:
                def __init__(self, overrides):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in overrides.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    def validate_query(self, query: Optional[str]) -> Optional[str]:
        """
        Trim a raw query and reject oversized input.

        Args:
            query: Raw query from the caller.

        Returns:
            Trimmed query, or None for a missing or blank query.

        Raises:
            QueryTooLongError: If the query exceeds MAX_QUERY_LENGTH.
        """
        if query is None:
            return None
        query = query.strip()
        if len(query) > self.config.MAX_QUERY_LENGTH:
            raise QueryTooLongError(
                f"Query must not exceed {self.config.MAX_QUERY_LENGTH} characters"
            )
        return query or None

    def suggest(self, query: Optional[str]) -> SuggestionResponse:
        """
        Return ranked suggestions for a query.

        A missing or blank query returns the newest books instead.

        Args:
            query: Search query string.

        Returns:
            SuggestionResponse with ranked entries and generated variants.
        """
        query = self.validate_query(query)
        if query is None:
            return self.popular()

        expanded = self.tokenizer.expand_query(query)
        variants = self.tokenizer.flatten_variants(expanded)
        logger.debug("Expanded query %r into %s", query, variants)

        results: List[SuggestionEntry] = []
        for category in CATEGORIES:
            ranked = self.search_category(category, query, expanded, variants)
            results.extend(self._to_entry(category, c.record, c.score) for c in ranked)

        return SuggestionResponse(data=results, variants=variants)

    def search_category(self, category: str, query: str, expanded: List[TokenVariants],
                        variants: List[str]) -> List[ScoredCandidate]:
        """
        Fetch, score and rank the candidates of one category.

        A failing lookup yields no candidates for that category only.

        Args:
            category: Candidate category.
            query: Trimmed query.
            expanded: Per-token variant sets.
            variants: All variants, used for the broad name filter.

        Returns:
            Ranked candidates, truncated to the category's result limit.
        """
        settings = self.categories[category]
        try:
            records = self.catalog.find_by_name(category, variants, settings.fetch_limit)
        except Exception as e:
            logger.warning("Lookup for %s failed, skipping: %s", category, e)
            return []

        candidates = self.ranker.score_records(records, query, expanded)
        return self.ranker.rank(candidates, settings.result_limit)

    def popular(self) -> SuggestionResponse:
        """Return the newest active books without scoring."""
        try:
            books = self.catalog.latest_active(self.config.POPULAR_LIMIT)
        except Exception as e:
            logger.warning("Popular lookup failed: %s", e)
            books = []

        entries = [
            SuggestionEntry(
                id=f"{self.config.POPULAR_ID_PREFIX}{book.id}",
                name=book.name,
                category=POPULAR,
                type=self.config.POPULAR_LABEL,
                url=self.build_url(BOOK, book),
                image=self.build_image(book),
            )
            for book in books
        ]
        return SuggestionResponse(data=entries)

    def search_books(self, query: Optional[str], limit: Optional[int] = None) -> BookSearchResult:
        """
        Search active books by name or writer for the catalog listing.

        Every variant of every token is matched against book and writer names.
        Books whose name contains the whole query come first, then those whose
        name contains the leading variants; remaining ties stay newest first.
        A missing or blank query lists the newest books.

        Args:
            query: Search query string.
            limit: Page size. If None, uses BOOK_SEARCH_PAGE_SIZE.

        Returns:
            BookSearchResult with one page of books and the variants used.
        """
        if limit is None:
            limit = self.config.BOOK_SEARCH_PAGE_SIZE

        query = query.strip() if query else ""
        variants = self.tokenizer.flatten_variants(self.tokenizer.expand_query(query))

        try:
            if variants:
                books = self.catalog.find_books(variants)
                books = self.ranker.order_by_name_hits(books, query, variants)
            else:
                books = self.catalog.latest_active(None)
        except Exception as e:
            logger.warning("Book search failed: %s", e)
            books = []

        return BookSearchResult(books=books[:limit], total=len(books), variants=variants)

    def build_url(self, category: str, record: CatalogRecord) -> str:
        """Build the deep link of a record from its natural key."""
        template = self.categories[category].url_template
        return template.format(id=record.id, slug=record.slug or record.id)

    def build_image(self, record: CatalogRecord) -> Optional[str]:
        """Return the public image path of a record, if it has one."""
        if not record.image:
            return None
        return f"{self.config.IMAGE_URL_PREFIX}{record.image}"

    def _to_entry(self, category: str, record: CatalogRecord, score: int) -> SuggestionEntry:
        settings = self.categories[category]
        entry = SuggestionEntry(
            id=f"{settings.id_prefix}{record.id}",
            name=record.name,
            category=category,
            type=settings.label,
            url=self.build_url(category, record),
            image=self.build_image(record) if category == BOOK else None,
            relevancy=score,
        )
        if category == BOOK:
            entry.writer = record.writer
            entry.price = float(record.price) if record.price is not None else None
            entry.original_price = float(record.original_price) if record.original_price is not None else None
        return entry

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the configured engine.

        Returns:
            Dictionary with catalog sizes (when known) and category limits.
        """
        stats: Dict[str, Any] = {
            category: {"fetch_limit": s.fetch_limit, "result_limit": s.result_limit}
            for category, s in self.categories.items()
        }
        summary = getattr(self.catalog, "summary", None)
        if callable(summary):
            stats["catalog"] = summary()
        return stats
