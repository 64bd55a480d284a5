"""Defaults for word-list loading and the terminal front-end."""

import os

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 64

# Tried in order; the first file yielding at least one word wins.
DEFAULT_SEARCH_PATHS = (
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
)

MAX_DISPLAYED_WORDS = 20

BUILTIN_WORDS = (
    "a", "about", "after", "again", "all", "also", "an", "and", "any", "are",
    "art", "arts", "as", "at", "back", "be", "because", "been", "but", "by",
    "call", "can", "car", "carbon", "card", "care", "cart", "come", "could",
    "day", "do", "dog", "even", "first", "for", "from", "get", "give", "go",
    "good", "have", "he", "hello", "her", "here", "him", "his", "how", "i",
    "if", "in", "into", "it", "its", "just", "know", "like", "look", "make",
    "me", "more", "most", "my", "new", "no", "not", "now", "of", "on", "one",
    "only", "or", "other", "our", "out", "over", "people", "say", "see",
    "she", "so", "some", "take", "than", "that", "the", "their", "them",
    "then", "there", "these", "they", "think", "this", "time", "to", "two",
    "up", "us", "use", "want", "way", "we", "well", "what", "when", "which",
    "who", "will", "with", "word", "work", "world", "would", "year", "you",
    "your",
)
