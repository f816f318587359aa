"""
Banglish Search

Search suggestions for a Bengali bookstore that understand queries typed in
Romanized Bengali (Banglish).

Main components:
- SuggestionEngine: Main suggestion engine class
- translate: Banglish to Bengali script transliteration
- Tokenizer: Query tokenization and phonetic variant generation
- Ranker: Relevancy scoring and ranking
- FuzzyMatcher: Levenshtein matching of misspelled tokens
- InMemoryCatalog: Catalog provider backed by a JSON file
- ResultFormatter: JSON payload and console output
"""

from .catalog import CatalogProvider, InMemoryCatalog
from .fuzzy import FuzzyMatcher
from .models import BookSearchResult, CatalogRecord, SuggestionEntry, SuggestionResponse, TokenVariants
from .phonetic import translate
from .ranker import Ranker
from .search_engine import QueryTooLongError, SuggestionEngine
from .tokenizer import Tokenizer
from .utils import ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "SuggestionEngine",
    "QueryTooLongError",
    "translate",
    "Tokenizer",
    "Ranker",
    "FuzzyMatcher",
    "CatalogProvider",
    "InMemoryCatalog",
    "CatalogRecord",
    "TokenVariants",
    "SuggestionEntry",
    "SuggestionResponse",
    "BookSearchResult",
    "ResultFormatter",
]
