"""Word list loader backed by a prediction trie."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from wordpredictor.constants import (
    BUILTIN_WORDS,
    DEFAULT_SEARCH_PATHS,
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
)
from wordpredictor.prediction import WordPrediction
from wordpredictor.trie import WordTrie

log = logging.getLogger("wordpredictor")


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield the usable words in ``lines``, skipping blanks and # comments."""
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            continue
        if any(ch.isspace() for ch in word):
            continue
        yield word


class Dictionary:
    """Word list loaded from the first usable file, with prefix prediction."""

    def __init__(
        self,
        dict_path: str | None = None,
        *,
        search_paths: Iterable[str] | None = None,
        use_builtin: bool = True,
    ):
        self.trie = WordTrie()
        self.source: str | None = None
        self.word_count = 0
        self._load(dict_path, DEFAULT_SEARCH_PATHS if search_paths is None else search_paths, use_builtin)

    def _load(self, dict_path: str | None, search_paths: Iterable[str], use_builtin: bool) -> None:
        candidates: list[str] = []
        if dict_path:
            candidates.append(dict_path)
        candidates.extend(search_paths)

        for path in candidates:
            if not os.path.isfile(path):
                log.debug("No word list at %s", path)
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    words = list(iter_words(f))
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read %s: %s", path, exc)
                continue
            self.add_words(words)
            if self.word_count:
                self.source = path
                log.info("Loaded %s words from %s", f"{self.word_count:,}", path)
                return

        if not use_builtin:
            log.warning("No word list found -- starting with an empty dictionary.")
            return
        log.warning("No word list found -- using built-in minimal word list.")
        log.warning("Pass --dict or save a list as words.txt for better predictions.")
        self.add_words(BUILTIN_WORDS)

    def add_words(self, words: Iterable[str]) -> None:
        for word in words:
            new = word not in self.trie
            self.trie.insert(word)
            if word and new:
                self.word_count += 1

    def predict(self, prefix: str) -> WordPrediction:
        return self.trie.predict(prefix)

    def is_valid(self, word: str) -> bool:
        return word in self.trie

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return self.word_count
