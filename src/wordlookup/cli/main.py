"""
word CLI: look up a word.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from wordlookup.core.cache import CacheStore
from wordlookup.core.display import DisplayOptions, render
from wordlookup.core.entry import ParseError
from wordlookup.core.resolve import Resolver
from wordlookup.core.settings import load_settings
from wordlookup.core.wordsapi import FetchError, WordsApiClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="word", description="Look up a word.")
    parser.add_argument("-a", "--antonym", action="store_true", help="Show antonyms for the word")
    parser.add_argument("-s", "--synonym", action="store_true", help="Show synonyms for the word")
    parser.add_argument("-e", "--hypernym", action="store_true", help="Show hypernyms for the word")
    parser.add_argument("-o", "--hyponym", action="store_true", help="Show hyponyms for the word")
    parser.add_argument("-l", "--holonym", action="store_true", help="Show holonyms for the word")
    parser.add_argument("-A", "--all", action="store_true", help="Show all the nyms")
    parser.add_argument("-j", "--json", action="store_true", help="Output raw json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("word", help="The word to look up")
    parser.add_argument("token", nargs="?", help="API token, from settings if not present")
    return parser


def configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def run(args) -> int:
    options = DisplayOptions.from_args(args)
    try:
        settings = load_settings(args.token)
    except ValueError as e:
        # ValidationError and TOMLDecodeError are both ValueErrors
        print(f"✗ Invalid settings: {e}")
        return 1

    store = CacheStore(settings.cache_dir)
    client = WordsApiClient(settings.token, base_url=settings.api_url, timeout=settings.timeout)
    resolver = Resolver(store, client.look_up)

    try:
        word_json = resolver.resolve(args.word)
    except (FetchError, ValueError) as e:
        print(f"✗ Could not load word json: {e}")
        return 1

    try:
        print(render(word_json, options))
    except ParseError as e:
        print(f"✗ Could not parse word json: {e}")
        return 1
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
