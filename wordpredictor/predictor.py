"""Interface shared by word predictors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordpredictor.prediction import WordPrediction


class WordPredictor(ABC):
    """Something that stores words and predicts them from a prefix."""

    @abstractmethod
    def insert(self, word: str) -> None:
        """Store ``word``. Inserting the empty string does nothing."""

    @abstractmethod
    def insert_all(self, words: Iterable[str]) -> None:
        """Store every word in ``words``, one at a time."""

    @abstractmethod
    def predict(self, prefix: str) -> WordPrediction:
        """Stored words beginning with ``prefix`` and their next characters."""
