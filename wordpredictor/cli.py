"""CLI / terminal mode for the word predictor."""

from __future__ import annotations

import time

from wordpredictor.constants import MAX_DISPLAYED_WORDS
from wordpredictor.dictionary import Dictionary


def print_prediction(dictionary: Dictionary, prefix: str, limit: int = MAX_DISPLAYED_WORDS) -> int:
    """Print the words and next characters for ``prefix``; return the word count."""
    t0 = time.time()
    prediction = dictionary.predict(prefix)
    elapsed = time.time() - t0

    words = sorted(prediction.words())
    next_chars = sorted(prediction.next_chars())

    print(f"Found {len(words)} words for {prefix!r} in {elapsed * 1000:.2f}ms.")
    if not words:
        print("  No stored word starts with that prefix.")
        return 0

    for word in words[:limit]:
        print(f"  {word}")
    if len(words) > limit:
        print(f"  ... and {len(words) - limit} more")
    if next_chars:
        print(f"Next: {' '.join(next_chars)}")
    return len(words)


def run_query(dictionary: Dictionary, prefix: str, limit: int = MAX_DISPLAYED_WORDS) -> None:
    """One-shot mode: answer a single prefix and return."""
    print_prediction(dictionary, prefix, limit)


def run_interactive(dictionary: Dictionary, limit: int = MAX_DISPLAYED_WORDS) -> None:
    """Read prefixes from the terminal until :quit or EOF."""
    print("\n" + "=" * 60)
    print("  WORD PREDICTOR -- Interactive Mode")
    print("=" * 60)
    print()
    print("Commands:")
    print("  PREFIX                -- list words starting with PREFIX")
    print("  :add WORD [WORD ...]  -- add words to the dictionary")
    print("  :help                 -- show this list")
    print("  :quit                 -- leave")
    print()

    while True:
        try:
            inp = input("  prefix> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = inp.lower()
        if cmd in (":quit", ":q"):
            break
        if cmd == ":help":
            print("  PREFIX | :add WORD... | :quit")
            continue
        parts = inp.split()
        if parts and parts[0].lower() == ":add":
            words = parts[1:]
            if not words:
                print("  Format: :add WORD [WORD ...]")
                continue
            dictionary.add_words(words)
            print(f"  Added {len(words)} word(s); {len(dictionary):,} stored.")
            continue
        if cmd.startswith(":"):
            print(f"  Unknown command {inp!r}.  Try :help")
            continue

        print_prediction(dictionary, inp, limit)
