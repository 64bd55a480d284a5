#!/usr/bin/env python3
"""
Word Predictor

Loads a word list into a case-insensitive prefix trie and answers prefix
queries from the terminal: the words that start with the prefix and the
characters that may come next.

Usage:
    wordpredictor car            one-shot query
    wordpredictor --dict words   interactive prompt over your own list
"""

from __future__ import annotations

import argparse
import logging

from wordpredictor.cli import run_interactive, run_query
from wordpredictor.constants import MAX_DISPLAYED_WORDS
from wordpredictor.dictionary import Dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordpredictor")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Word Predictor -- prefix completion over a word list",
    )
    parser.add_argument("prefix", nargs="?", default=None,
                        help="Prefix to complete (omit for interactive mode)")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--limit", type=int, default=MAX_DISPLAYED_WORDS,
                        help="Maximum number of words to print per query")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.limit < 1:
        parser.error("--limit must be at least 1")

    dictionary = Dictionary(args.dict)

    if args.prefix is not None:
        run_query(dictionary, args.prefix, args.limit)
    else:
        run_interactive(dictionary, args.limit)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
