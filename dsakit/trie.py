"""Prefix tries, suffix tries and a binary trie for maximum XOR queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

__all__ = ["Trie", "SuffixTrie", "XorTrie", "max_xor_pair", "document_search"]

_BITS = 32


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A character trie of whole words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Tell whether word was inserted."""
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def _matches_from(self, text: str, start: int) -> Iterable[str]:
        node = self._root
        for end in range(start, len(text)):
            child = node.children.get(text[end])
            if child is None:
                return
            node = child
            if node.terminal:
                yield text[start:end + 1]


class SuffixTrie:
    """A trie holding every non-empty suffix of the inserted words."""

    def __init__(self) -> None:
        self._trie = Trie()

    def insert(self, word: str) -> None:
        """Add every non-empty suffix of word."""
        for start in range(len(word)):
            self._trie.insert(word[start:])

    def search(self, word: str) -> bool:
        """Tell whether word is a suffix of some inserted word."""
        return self._trie.search(word)


class _XorNode:
    __slots__ = ("children",)

    def __init__(self) -> None:
        self.children: list[_XorNode | None] = [None, None]


def _check_value(value: int) -> None:
    if not 0 <= value < 1 << _BITS:
        raise ValueError(f"value {value} is not an unsigned {_BITS}-bit integer")


class XorTrie:
    """A binary trie of 32-bit unsigned integers."""

    def __init__(self) -> None:
        self._root = _XorNode()
        self._empty = True

    def insert(self, value: int) -> None:
        """Add value to the trie."""
        _check_value(value)
        node = self._root
        for shift in range(_BITS - 1, -1, -1):
            bit = (value >> shift) & 1
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _XorNode()
            node = child
        self._empty = False

    def max_xor_with(self, value: int) -> int:
        """Return the largest value ^ x over the inserted values x."""
        _check_value(value)
        if self._empty:
            raise ValueError("the trie holds no values")
        node = self._root
        result = 0
        for shift in range(_BITS - 1, -1, -1):
            bit = (value >> shift) & 1
            wanted = node.children[1 - bit]
            if wanted is not None:
                node = wanted
                result |= 1 << shift
            else:
                node = node.children[bit]  # type: ignore[assignment]
        return result


def max_xor_pair(values: Sequence[int]) -> int:
    """Return the largest XOR of two values from the sequence; 0 when it is empty."""
    trie = XorTrie()
    for value in values:
        trie.insert(value)
    return max((trie.max_xor_with(value) for value in values), default=0)


def document_search(document: str, words: Iterable[str]) -> list[str]:
    """Return the words, in the given order, that occur somewhere in document."""
    wanted = list(words)
    trie = Trie()
    for word in wanted:
        trie.insert(word)
    found = {
        match
        for start in range(len(document))
        for match in trie._matches_from(document, start)
    }
    return [word for word in wanted if word in found]