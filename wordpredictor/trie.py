"""Case-insensitive prefix trie that predicts words and next characters."""

from __future__ import annotations

from collections.abc import Iterable

from wordpredictor.errors import InvalidArgument
from wordpredictor.prediction import WordPrediction
from wordpredictor.predictor import WordPredictor


def _fold(s: object, what: str) -> str:
    if s is None:
        raise InvalidArgument(f"{what} must be a string, not None")
    if not isinstance(s, str):
        raise InvalidArgument(f"{what} must be a string, not {type(s).__name__}")
    # str.lower() applies the Unicode default case mapping, independent of locale.
    return s.lower()


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("character", "children", "is_terminal", "parent")

    def __init__(self, character: str | None = None, parent: TrieNode | None = None):
        self.character = character  # None on the root
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.parent = parent

    def spelled(self) -> str:
        """The string spelled by the path from the root down to this node."""
        chars: list[str] = []
        node: TrieNode | None = self
        while node is not None and node.parent is not None:
            chars.append(node.character)
            node = node.parent
        return "".join(reversed(chars))

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"<TrieNode {self.spelled()!r}{mark} children={sorted(self.children)}>"


class WordTrie(WordPredictor):
    """Prefix trie for word prediction.

    Every word is folded to lower case on the way in, and so is every
    query prefix, so lookups are case-insensitive. Words come back in no
    particular order.
    """

    def __init__(self):
        self.root = TrieNode()

    @property
    def is_empty(self) -> bool:
        return not self.root.children

    def insert(self, word: str) -> None:
        node = self.root
        folded = _fold(word, "word")
        if not folded:
            # The root is never terminal, so "" is never reported as a word.
            return
        for ch in folded:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch, node)
                node.children[ch] = child
            node = child
        node.is_terminal = True

    def insert_all(self, words: Iterable[str]) -> None:
        if words is None:
            raise InvalidArgument("words must be an iterable of strings, not None")
        for word in words:
            self.insert(word)

    def predict(self, prefix: str) -> WordPrediction:
        """Words starting with ``prefix`` and the characters that can follow it."""
        folded = _fold(prefix, "prefix")
        anchor = self._walk(folded)
        if anchor is None:
            return WordPrediction.empty()
        return WordPrediction(self._collect(anchor, folded), anchor.children.keys())

    def is_word(self, word: str) -> bool:
        node = self._walk(_fold(word, "word"))
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(_fold(prefix, "prefix")) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(anchor: TrieNode, prefix: str) -> list[str]:
        # Depth-first over child iterators. One shared buffer holds the
        # spelled string: pushed on descent, popped on ascent.
        words: list[str] = [prefix] if anchor.is_terminal else []
        buf = list(prefix)
        stack = [iter(anchor.children.items())]
        while stack:
            for ch, child in stack[-1]:
                buf.append(ch)
                if child.is_terminal:
                    words.append("".join(buf))
                stack.append(iter(child.children.items()))
                break
            else:
                stack.pop()
                if stack:
                    buf.pop()
        return words
