#!/usr/bin/env python3
"""
Example usage of the Banglish search engine.

This script demonstrates how to use the suggestion engine programmatically
for various search tasks.
"""

import sys
from pathlib import Path

# Add parent directory to path to import banglish_search
sys.path.append(str(Path(__file__).parent.parent))

from banglish_search import InMemoryCatalog, ResultFormatter, SuggestionEngine, translate
import config


def load_engine():
    catalog = InMemoryCatalog.from_json_file(config.DEFAULT_CATALOG_FILE)
    return SuggestionEngine(catalog)


def transliteration_example():
    """Demonstrate Banglish to Bengali transliteration."""
    print("=== Transliteration Example ===")

    words = ["ami", "bangla", "kobita", "bhalobasha", "chhobi", "shokti"]
    for word in words:
        print(f"  {word:12} -> {translate(word)}")


def expansion_example():
    """Show the variants generated for a few queries."""
    print("\n=== Query Expansion Example ===")

    engine = load_engine()
    for query in ["bangla", "kobita somogro", "Humayun  Ahmed"]:
        print(f"\nQuery: '{query}'")
        for tv in engine.tokenizer.expand_query(query):
            print(f"  {tv.token}: {list(tv.variants)}")


def basic_search_example():
    """Demonstrate basic suggestions."""
    print("\n=== Basic Search Example ===")

    engine = load_engine()
    formatter = ResultFormatter(engine.config)

    for query in ["bangla", "kobita", "humayn ahmed", ""]:
        print(f"\nSearching for: '{query}'")
        formatter.print_results_simple(engine.suggest(query))


def book_search_example():
    """Demonstrate the catalog search."""
    print("\n=== Book Search Example ===")

    engine = load_engine()
    formatter = ResultFormatter(engine.config)
    formatter.print_book_results(engine.search_books("humayun", limit=5))


def custom_config_example():
    """Demonstrate overriding configuration values."""
    print("\n=== Custom Configuration Example ===")

    catalog = InMemoryCatalog.from_json_file(config.DEFAULT_CATALOG_FILE)
    engine = SuggestionEngine(catalog, config_dict={
        "BOOK_RESULT_LIMIT": 2,
        "PHRASE_BONUS": 100,
    })
    formatter = ResultFormatter(engine.config)
    print(formatter.to_json(engine.suggest("bangla")))


def main():
    """Run all examples."""
    transliteration_example()
    expansion_example()
    basic_search_example()
    book_search_example()
    custom_config_example()


if __name__ == "__main__":
    main()
