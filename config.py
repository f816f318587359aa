"""
Configuration settings for the Banglish search engine.

This module contains all configurable parameters for the suggestion engine.
Modify these values to customize the behavior of the system.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CATALOG_FILE = DATA_DIR / "catalog.json"

# Query boundary settings
MAX_QUERY_LENGTH = 100  # Longer queries are rejected before expansion

# Relevancy weights
PHRASE_BONUS = 50  # Name contains the whole query
TOKEN_HIT_SCORE = 20  # Name contains one variant of a token
FUZZY_HIT_SCORE = 10  # A name word is within edit distance of a variant

# Fuzzy matching thresholds
FUZZY_MIN_QUERY_LENGTH = 3  # Query must be longer than this to try fuzzy matching
FUZZY_MIN_TERM_LENGTH = 3  # Words and variants must be longer than this
FUZZY_DISTANCE_RATIO = 0.2  # Allowed distance as a share of the longer term

# Popular (empty query) settings
POPULAR_LIMIT = 4
POPULAR_ID_PREFIX = "popular-book-"
POPULAR_LABEL = "জনপ্রিয় বই"

# Per-category settings: (fetch cap, return cap, id prefix, type label)
BOOK_FETCH_LIMIT = 15
BOOK_RESULT_LIMIT = 6
BOOK_ID_PREFIX = "book-"
BOOK_LABEL = "বই"

AUTHOR_FETCH_LIMIT = 10
AUTHOR_RESULT_LIMIT = 4
AUTHOR_ID_PREFIX = "author-"
AUTHOR_LABEL = "লেখক"

CATEGORY_FETCH_LIMIT = 6
CATEGORY_RESULT_LIMIT = 3
CATEGORY_ID_PREFIX = "cat-"
CATEGORY_LABEL = "ক্যাটাগরি"

# Deep links
BOOK_URL_TEMPLATE = "/book/{slug}"
AUTHOR_URL_TEMPLATE = "/allbooks?authors[]={id}"
CATEGORY_URL_TEMPLATE = "/allbooks?categories[]={id}"
IMAGE_URL_PREFIX = "/storage/"

# Catalog search settings
BOOK_SEARCH_PAGE_SIZE = 24  # Books per page of catalog search results
BOOK_SEARCH_RANKED_VARIANTS = 5  # Variants that take part in result ordering

# Output settings
SNIPPET_CHARS = 60  # Maximum characters of a name in table output
SHOW_SCORES = True  # Show relevance scores in results
RESULT_FORMAT = "table"  # Result format: "table", "list", "json"

# Debug settings
DEBUG = False  # Enable debug mode
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
