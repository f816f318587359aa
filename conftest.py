"""
Shared pytest fixtures.
"""

from datetime import datetime

import pytest

import config
from banglish_search import CatalogRecord, InMemoryCatalog, SuggestionEngine, Tokenizer


def book(id, name, created, **kwargs):
    return CatalogRecord(id=id, name=name, slug=kwargs.pop("slug", f"book-{id}"),
                         created_at=datetime(2025, 12, created), **kwargs)


@pytest.fixture
def catalog():
    books = [
        book(1, "Bangla Sahitya", 1, slug="bangla-sahitya", image="covers/bangla-sahitya.jpg",
             writer="Humayun Ahmed", price=350, original_price=400),
        book(2, "English Grammar", 5, writer="P. C. Das", price=220, original_price=250),
        book(3, "বাংলা ব্যাকরণ", 10, price=180, original_price=200),
        book(4, "আমার বাঙ্লা বই", 12, price=150, original_price=150),
        book(5, "Himu Samagra", 15, writer="Humayun Ahmed", price=900, original_price=1000),
        book(6, "Misir Ali Omnibus", 20, is_active=False, price=850, original_price=950),
        book(7, "কবিতা সমগ্র", 22, price=500, original_price=600),
    ]
    authors = [
        CatalogRecord(id=1, name="Humayun Ahmed"),
        CatalogRecord(id=2, name="জীবনানন্দ দাশ"),
        CatalogRecord(id=3, name="Rabindranath Tagore"),
    ]
    categories = [
        CatalogRecord(id=1, name="Bangla Literature"),
        CatalogRecord(id=2, name="কবিতা"),
        CatalogRecord(id=3, name="Grammar"),
    ]
    return InMemoryCatalog(books, authors, categories)


@pytest.fixture
def engine(catalog):
    return SuggestionEngine(catalog)


@pytest.fixture
def tokenizer():
    return Tokenizer(config)
