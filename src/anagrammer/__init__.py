"""Anagram finder.

Finds every way to rearrange the letters of a phrase into a sequence of dictionary
words, optionally bounding the number of words and the number of letters per word.
Searches an index of words grouped by their sorted letters, backtracking over the
letters still unused.
"""

import argparse
import sys

from .config import config
from .errors import AnagramError
from .query import Query
from .runner import run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Find anagrams of the given string")
    parser.add_argument("string", help="String to generate anagrams of")
    parser.add_argument(
        "-w", "--min-words", type=int, default=0,
        help="The minimum number of words in the generated anagrams",
    )
    parser.add_argument(
        "-W", "--max-words", type=int, default=None,
        help="The maximum number of words in the generated anagrams",
    )
    parser.add_argument(
        "-l", "--min-letters", type=int, default=0,
        help="The minimum number of letters per word in the generated anagrams",
    )
    parser.add_argument(
        "-L", "--max-letters", type=int, default=None,
        help="The maximum number of letters per word in the generated anagrams",
    )
    parser.add_argument(
        "-f", "--dictionary", default=None,
        help="The path of the word list (default: bundled English word list)",
    )
    parser.add_argument(
        "--ascii-only", action="store_true", default=None,
        help="Reject non-ASCII input instead of folding Unicode text",
    )
    parser.add_argument(
        "--allow-repeats", action="store_true", default=None,
        help="Allow the same word to appear more than once in an anagram",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the anagram finder."""
    args = parse_args(argv)

    # Command-line flags override the configured settings for this run only
    overrides = {
        "word_list_path": args.dictionary,
        "ascii_only": args.ascii_only,
        "allow_repeated_words": args.allow_repeats,
    }
    settings = config.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    query = Query(
        phrase=args.string,
        min_words=args.min_words,
        max_words=args.max_words,
        min_letters=args.min_letters,
        max_letters=args.max_letters,
    )

    try:
        run(query, settings=settings)
    except AnagramError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Search interrupted by user.", file=sys.stderr)
        sys.exit(1)
