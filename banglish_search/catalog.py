"""
Catalog access for the suggestion engine.

The engine only needs three lookups from whatever stores books, authors and
categories: a substring search on names, a name-or-writer search over books,
and the newest active books. This module defines that interface and an
in-memory implementation backed by a JSON file.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .models import AUTHOR, BOOK, CATEGORIES, CATEGORY, CatalogRecord

logger = logging.getLogger(__name__)

# Section names in a catalog JSON file
_SECTIONS = {BOOK: "books", AUTHOR: "authors", CATEGORY: "categories"}


class CatalogProvider(ABC):
    """Read-only source of candidate records."""

    @abstractmethod
    def find_by_name(self, category: str, variants: Sequence[str], limit: int) -> List[CatalogRecord]:
        """
        Return up to `limit` records whose name contains any variant.

        Matching is case-insensitive. Books are limited to active ones.
        """

    @abstractmethod
    def find_books(self, variants: Sequence[str]) -> List[CatalogRecord]:
        """
        Return active books whose name or writer contains any variant, newest first.

        Matching is case-insensitive.
        """

    @abstractmethod
    def latest_active(self, limit: Optional[int]) -> List[CatalogRecord]:
        """Return up to `limit` active books, newest first; all of them for None."""


class InMemoryCatalog(CatalogProvider):
    """Catalog held in memory, in insertion order."""

    def __init__(self, books: Iterable[CatalogRecord] = (), authors: Iterable[CatalogRecord] = (),
                 categories: Iterable[CatalogRecord] = ()):
        self.records: Dict[str, List[CatalogRecord]] = {
            BOOK: list(books),
            AUTHOR: list(authors),
            CATEGORY: list(categories),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, List[dict]]) -> "InMemoryCatalog":
        """Build a catalog from {"books": [...], "authors": [...], "categories": [...]}."""
        sections = {
            category: [CatalogRecord.from_dict(item) for item in data.get(key, [])]
            for category, key in _SECTIONS.items()
        }
        return cls(sections[BOOK], sections[AUTHOR], sections[CATEGORY])

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryCatalog":
        """
        Load a catalog from a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            Loaded catalog.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls.from_dict(data)
        logger.info("Loaded catalog from %s: %s", path, catalog.summary())
        return catalog

    def _candidates(self, category: str) -> List[CatalogRecord]:
        if category not in self.records:
            raise KeyError(f"Unknown category: {category}")
        records = self.records[category]
        if category == BOOK:
            return [r for r in records if r.is_active]
        return records

    def find_by_name(self, category: str, variants: Sequence[str], limit: int) -> List[CatalogRecord]:
        needles = [v.lower() for v in variants]
        found = []
        for record in self._candidates(category):
            name = record.name.lower()
            if any(n in name for n in needles):
                found.append(record)
                if len(found) >= limit:
                    break
        return found

    def find_books(self, variants: Sequence[str]) -> List[CatalogRecord]:
        needles = [v.lower() for v in variants]
        found = []
        for record in self._newest_books():
            fields = [record.name.lower(), (record.writer or "").lower()]
            if any(n in f for n in needles for f in fields):
                found.append(record)
        return found

    def latest_active(self, limit: Optional[int]) -> List[CatalogRecord]:
        return self._newest_books()[:limit]

    def _newest_books(self) -> List[CatalogRecord]:
        # Records without a timestamp sort last; ties keep insertion order
        def created(record: CatalogRecord) -> float:
            return record.created_at.timestamp() if record.created_at else float("-inf")

        return sorted(self._candidates(BOOK), key=created, reverse=True)

    def summary(self) -> Dict[str, int]:
        """Number of records per category."""
        return {category: len(self.records[category]) for category in CATEGORIES}
