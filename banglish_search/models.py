"""
Data containers shared by the search components.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

# Candidate categories, in result priority order
BOOK = "book"
AUTHOR = "author"
CATEGORY = "category"
CATEGORIES = (BOOK, AUTHOR, CATEGORY)

POPULAR = "popular"


@dataclass(frozen=True)
class TokenVariants:
    """A query token and its unique lowercase variants (plain form first)."""
    token: str
    variants: Tuple[str, ...]


@dataclass
class CatalogRecord:
    """A book, author or category as returned by a catalog provider."""
    id: int
    name: str
    slug: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    writer: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogRecord":
        """Build a record from a JSON-style dictionary."""
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            id=data["id"],
            name=data["name"],
            slug=data.get("slug"),
            image=data.get("image") or data.get("cover_photo"),
            is_active=bool(data.get("is_active", True)),
            created_at=created_at,
            writer=data.get("writer"),
            price=data.get("price"),
            original_price=data.get("original_price"),
        )


@dataclass
class ScoredCandidate:
    """A fetched record with its relevancy score."""
    record: CatalogRecord
    name: str
    score: int


BOOK_ONLY_FIELDS = ("writer", "price", "original_price")


@dataclass
class SuggestionEntry:
    """One suggestion as handed to the boundary layer."""
    id: str
    name: str
    category: str
    type: str
    url: str
    image: Optional[str] = None
    relevancy: Optional[int] = None
    writer: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the entry as a dictionary, keeping price fields for searched books only."""
        data = asdict(self)
        if self.category != BOOK:
            for key in BOOK_ONLY_FIELDS:
                data.pop(key)
        if self.relevancy is None:
            data.pop("relevancy")
        return data


@dataclass
class SuggestionResponse:
    """Ranked suggestions plus the variants generated for the query."""
    data: List[SuggestionEntry] = field(default_factory=list)
    variants: Optional[List[str]] = None

    @property
    def is_popular(self) -> bool:
        """True when the response came from the empty-query path."""
        return self.variants is None


@dataclass
class BookSearchResult:
    """A page of catalog search results plus the variants used to match them."""
    books: List[CatalogRecord] = field(default_factory=list)
    total: int = 0
    variants: List[str] = field(default_factory=list)
