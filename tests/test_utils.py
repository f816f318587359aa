import json

import config
from banglish_search import ResultFormatter


def test_payload_for_search(engine):
    formatter = ResultFormatter(config)
    payload = formatter.to_payload(engine.suggest("bangla"))

    assert payload["meta"] == {"variants": ["bangla", "বাঙ্লা"]}
    book, _, category = payload["data"]
    assert book == {
        "id": "book-1",
        "name": "Bangla Sahitya",
        "category": "book",
        "type": "বই",
        "url": "/book/bangla-sahitya",
        "image": "/storage/covers/bangla-sahitya.jpg",
        "relevancy": 70,
        "writer": "Humayun Ahmed",
        "price": 350.0,
        "original_price": 400.0,
    }
    assert "price" not in category
    assert category["relevancy"] == 70


def test_payload_for_popular(engine):
    payload = ResultFormatter(config).to_payload(engine.suggest(""))

    assert "meta" not in payload
    assert len(payload["data"]) == 4
    assert "relevancy" not in payload["data"][0]
    assert "price" not in payload["data"][0]


def test_json_keeps_bengali_text(engine):
    text = ResultFormatter(config).to_json(engine.suggest("kobita"))
    assert "কবিতা সমগ্র" in text
    assert json.loads(text)["data"][0]["id"] == "book-7"


def test_print_results_table(engine, capsys):
    ResultFormatter(config).print_results_table(engine.suggest("bangla"))
    out = capsys.readouterr().out

    assert "=== Suggestions ===" in out
    assert "book-1" in out
    assert "variants used: [bangla, বাঙ্লা]" in out


def test_print_results_simple_without_matches(engine, capsys):
    ResultFormatter(config).print_results_simple(engine.suggest("zzzz"))
    assert "No suggestions found." in capsys.readouterr().out


def test_print_book_results(engine, capsys):
    ResultFormatter(config).print_book_results(engine.search_books("humayun"))
    out = capsys.readouterr().out

    assert "=== Books (2 of 2) ===" in out
    assert "#1  Himu Samagra  by Humayun Ahmed" in out
