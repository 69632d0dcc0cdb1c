"""
Console front-end for the local URL shortener.

This CLI follows this procedure:
- Step 1: Parse CLI arguments and initialize logging
- Step 2: Resolve configuration (defaults <- YAML <- env <- CLI overrides)
- Step 3: Load the snapshot file
- Step 4: Run the requested subcommand, or the interactive menu when none is given

CLI usage:
    $ python -m localshortener
    $ python -m localshortener shorten https://example.com/article/123
    $ python -m localshortener retrieve http://short.rl/q3ZbX0
    $ python -m localshortener --data-file /tmp/urls.json --domain https://sho.rt/ stats
    $ python -m localshortener --config config/dev.yml --log-level DEBUG

Exit codes:
    0: success
    1: shorten/retrieve produced no result
    2: the configuration is malformed
"""

from __future__ import annotations

import sys
import argparse
import dataclasses

from localshortener.exceptions import ConfigurationError
from localshortener.store import MappingStore
from localshortener.utils.config import load_config
from localshortener.utils.logging import initialize_logging


MENU = """
Choose an option:
1. Shorten a URL
2. Retrieve original URL
3. Show statistics
4. Exit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localshortener",
        description="Shorten URLs into 6-character keys and resolve them back, persisted to a local JSON file",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML configuration file (default: $SHORTENER_CONFIG_FILE or config/<APP_ENV>.yml if present)",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="JSON snapshot file overriding the configured one",
    )
    parser.add_argument(
        "--domain",
        default=None,
        help="Short URL domain prefix overriding the configured one (e.g., http://short.rl/)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")
    shorten = subparsers.add_parser("shorten", help="Shorten a URL and print the short URL")
    shorten.add_argument("url", help="Original URL")
    retrieve = subparsers.add_parser("retrieve", help="Print the original URL for a short URL or shortcode")
    retrieve.add_argument("short_url", help="Full short URL or bare shortcode")
    subparsers.add_parser("stats", help="Print the number of stored URLs and shortcodes")

    return parser


def shorten_flow(store: MappingStore, url: str) -> bool:
    if not url.strip():
        print("URL cannot be empty.")
        return False

    shortcode = store.shorten(url)
    if shortcode is None:
        print("Failed to generate a unique short URL. Please try again.")
        return False

    print(f"Short URL: {store.get_full_short_url(shortcode)}")
    return True


def retrieve_flow(store: MappingStore, short_url: str) -> bool:
    if not short_url.strip():
        print("Short URL cannot be empty.")
        return False

    original_url = store.retrieve(store.extract_shortcode(short_url))
    if original_url is None:
        print("Short URL not found.")
        return False

    print(f"Original URL: {original_url}")
    return True


def stats_flow(store: MappingStore) -> bool:
    stats = store.statistics()
    print(f"Total URLs: {stats.total_urls}")
    print(f"Unique short keys: {stats.unique_shortcodes}")
    return True


def run_menu(store: MappingStore) -> None:
    """Interactive loop; saves the store on exit (choice 4 or end of input)."""
    print("URL Shortener Console App")
    try:
        while True:
            print(MENU)
            choice = input("Enter choice: ").strip()
            if choice == "1":
                shorten_flow(store, input("Enter the original URL: "))
            elif choice == "2":
                retrieve_flow(store, input("Enter the short URL: "))
            elif choice == "3":
                stats_flow(store)
            elif choice == "4":
                return
            else:
                print("Invalid choice. Try again.")
    except EOFError:
        print()
    finally:
        store.save()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        int: process exit code.

    Raises:
        FileNotFoundError: when --config points to a missing file.
    """
    args = build_parser().parse_args(argv)
    initialize_logging(args.log_level)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Configuration error [{e.error_code}]: {e}", file=sys.stderr)
        return 2
    overrides = {"data_file": args.data_file, "domain": args.domain}
    config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})

    store = MappingStore.from_config(config)
    store.load()

    if args.command == "shorten":
        ok = shorten_flow(store, args.url)
    elif args.command == "retrieve":
        ok = retrieve_flow(store, args.short_url)
    elif args.command == "stats":
        ok = stats_flow(store)
    else:
        run_menu(store)
        ok = True

    return 0 if ok else 1
