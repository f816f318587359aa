#!/usr/bin/env python3
"""
Main entry point for the Banglish search engine.

This script provides a command-line interface for the suggestion engine.
"""

import argparse
import logging
import sys

from banglish_search import InMemoryCatalog, QueryTooLongError, ResultFormatter, SuggestionEngine, translate
import config


def main():
    """Main entry point for the suggestion engine."""
    parser = argparse.ArgumentParser(
        description="Bookstore search suggestions with Banglish phonetic matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                    # Start interactive search
  python main.py --catalog ./catalog.json          # Use a custom catalog file
  python main.py --query "bangla"                  # Single query mode
  python main.py --query "" --json                 # Popular books as JSON
  python main.py --search "humayun"                # Catalog search by name or writer
  python main.py --translate "amar sonar bangla"   # Transliterate only
        """
    )

    parser.add_argument(
        "--catalog",
        type=str,
        default=str(config.DEFAULT_CATALOG_FILE),
        help="JSON file with books, authors and categories (default: data/catalog.json)"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Catalog search: list active books whose name or writer matches"
    )

    parser.add_argument(
        "--translate",
        type=str,
        default=None,
        help="Print the Bengali transliteration of the given text and exit"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as the JSON payload served to the frontend"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show engine statistics after loading the catalog"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        help="Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.translate is not None:
        print(translate(args.translate))
        return

    # Load catalog
    try:
        catalog = InMemoryCatalog.from_json_file(args.catalog)
    except (OSError, ValueError, KeyError) as e:
        print(f"Error loading catalog: {e}")
        sys.exit(1)

    overrides = {"RESULT_FORMAT": "json"} if args.json else None
    engine = SuggestionEngine(catalog, config_dict=overrides)
    formatter = ResultFormatter(engine.config)

    if args.stats:
        stats = engine.get_stats()
        print("\n=== Engine Statistics ===")
        for key, value in stats.items():
            print(f"{key}: {value}")

    if args.search is not None:
        formatter.print_book_results(engine.search_books(args.search))
        return

    if args.query is not None:
        # Single query mode
        try:
            formatter.print_results(engine.suggest(args.query))
        except QueryTooLongError as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
        return

    # Interactive mode
    print("\n=== Interactive Search ===")
    print("Type 'exit' or 'quit' to quit. An empty line shows popular books.")

    while True:
        try:
            query = input("Enter search query: ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if query.strip().lower() in ('exit', 'quit'):
            print("Goodbye!")
            break

        try:
            formatter.print_results(engine.suggest(query))
        except QueryTooLongError as e:
            print(f"Error: {e}")


if __name__ == "__main__":
    main()
