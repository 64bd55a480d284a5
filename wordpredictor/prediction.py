"""Prediction result returned by a prefix query."""

from __future__ import annotations

from collections.abc import Iterable


class WordPrediction:
    """Words sharing a prefix plus the characters that may follow the prefix.

    Both collections are unordered. The value is read-only once built.
    """

    __slots__ = ("_words", "_next_chars")

    def __init__(self, words: Iterable[str], next_chars: Iterable[str]):
        object.__setattr__(self, "_words", tuple(words))
        object.__setattr__(self, "_next_chars", frozenset(next_chars))

    @classmethod
    def empty(cls) -> WordPrediction:
        return cls((), ())

    def words(self) -> tuple[str, ...]:
        return self._words

    def next_chars(self) -> frozenset[str]:
        return self._next_chars

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __bool__(self) -> bool:
        return bool(self._words or self._next_chars)

    def __repr__(self) -> str:
        return (
            f"WordPrediction(words={len(self._words)}, "
            f"next_chars={''.join(sorted(self._next_chars))!r})"
        )
