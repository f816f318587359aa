import json
from datetime import datetime

import pytest

from banglish_search import CatalogRecord, InMemoryCatalog


def test_find_by_name_is_case_insensitive(catalog):
    found = catalog.find_by_name("category", ["GRAMMAR"], limit=10)
    assert [r.id for r in found] == [3]


def test_find_by_name_matches_any_variant_and_respects_limit(catalog):
    found = catalog.find_by_name("book", ["bangla", "বাঙ্লা", "কবিতা"], limit=2)
    assert [r.id for r in found] == [1, 4]


def test_find_by_name_skips_inactive_books(catalog):
    assert catalog.find_by_name("book", ["omnibus"], limit=5) == []


def test_unknown_category(catalog):
    with pytest.raises(KeyError):
        catalog.find_by_name("publisher", ["x"], limit=1)


def test_latest_active_orders_newest_first():
    books = [
        CatalogRecord(id=1, name="old", created_at=datetime(2025, 1, 1)),
        CatalogRecord(id=2, name="undated"),
        CatalogRecord(id=3, name="new", created_at=datetime(2025, 6, 1)),
        CatalogRecord(id=4, name="hidden", created_at=datetime(2025, 7, 1), is_active=False),
    ]
    catalog = InMemoryCatalog(books=books)
    assert [r.id for r in catalog.latest_active(10)] == [3, 1, 2]
    assert [r.id for r in catalog.latest_active(1)] == [3]


def test_from_json_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "books": [{"id": 9, "name": "বাংলা ব্যাকরণ", "slug": "byakaran", "cover_photo": "c.jpg",
                   "created_at": "2025-12-10T10:00:00", "is_active": True, "price": 180}],
        "authors": [{"id": 2, "name": "Humayun Ahmed"}],
    }, ensure_ascii=False), encoding="utf-8")

    catalog = InMemoryCatalog.from_json_file(path)

    book = catalog.records["book"][0]
    assert book.image == "c.jpg"
    assert book.created_at == datetime(2025, 12, 10, 10, 0)
    assert book.price == 180
    assert catalog.summary() == {"book": 1, "author": 1, "category": 0}


def test_find_books_matches_name_or_writer_newest_first(catalog):
    found = catalog.find_books(["HUMAYUN", "কবিতা"])
    assert [r.id for r in found] == [7, 5, 1]


def test_find_books_skips_inactive(catalog):
    assert catalog.find_books(["misir"]) == []
