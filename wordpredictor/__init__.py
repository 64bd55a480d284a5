"""Word Predictor — case-insensitive prefix trie."""

from wordpredictor.errors import InvalidArgument
from wordpredictor.prediction import WordPrediction
from wordpredictor.predictor import WordPredictor
from wordpredictor.trie import TrieNode, WordTrie
from wordpredictor.dictionary import Dictionary

__all__ = [
    "Dictionary",
    "InvalidArgument",
    "TrieNode",
    "WordPrediction",
    "WordPredictor",
    "WordTrie",
]
