"""A character trie of string keys and a forgiving incremental searcher over it."""

from __future__ import annotations

from bisect import insort
from typing import Callable, Iterable, Iterator

LookalikeFn = Callable[[str], Iterable[str]]


class SearchTree:
    """A tree that associates string keys with integer indices."""

    __slots__ = ("_children", "_keys", "_end")

    def __init__(self) -> None:
        self._children: dict[str, SearchTree] = {}
        self._keys: list[str] = []
        self._end: int | None = None

    @classmethod
    def from_items(cls, items: Iterable[tuple[int, str]]) -> SearchTree:
        """Build a tree from ``(index, key)`` pairs."""
        tree = cls()
        for index, key in items:
            tree.push(key, index)
        return tree

    def get(self, ch: str) -> SearchTree | None:
        """Return the immediate child for ``ch``, or None if there is none."""
        return self._children.get(ch)

    def push(self, key: str, index: int) -> None:
        """Add ``key`` to the tree, associating it with ``index``."""
        node = self
        for ch in key:
            child = node._children.get(ch)
            if child is None:
                child = SearchTree()
                node._children[ch] = child
                insort(node._keys, ch)
            node = child
        node._end = index

    def indices(self) -> Iterator[int]:
        """Yield the indices of all keys reachable from this node.

        A node's own index comes before those below it, and children are
        visited in character order.
        """
        stack: list[SearchTree] = [self]
        while stack:
            node = stack.pop()
            if node._end is not None:
                yield node._end
            stack.extend(node._children[ch] for ch in reversed(node._keys))


class Searcher:
    """State of a search through a :class:`SearchTree`.

    ``lookalikes`` maps a typed character to the characters it may have
    been meant as, besides itself.
    """

    def __init__(self, root: SearchTree, lookalikes: LookalikeFn) -> None:
        self._root = root
        self._lookalikes = lookalikes
        self._input = ""
        self._considered: list[SearchTree] = [root]

    @property
    def root(self) -> SearchTree:
        """The root of the searched tree."""
        return self._root

    @property
    def input(self) -> str:
        """The text typed so far."""
        return self._input

    def _advance(self, ch: str) -> None:
        options = [ch, *self._lookalikes(ch)]
        new = [
            child
            for node in self._considered
            for option in options
            if (child := node.get(option)) is not None
        ]
        if new:
            self._considered = new

    def push(self, ch: str) -> None:
        """Append a character to the searched text."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self._input += ch
        self._advance(ch)

    def extend(self, chars: Iterable[str]) -> None:
        """Append every character of ``chars`` to the searched text."""
        for ch in chars:
            self.push(ch)

    def pop(self) -> None:
        """Remove the last character of the searched text, if any."""
        if not self._input:
            return
        self._input = self._input[:-1]
        self._considered = [self._root]
        for ch in self._input:
            self._advance(ch)

    def candidates(self) -> Iterator[int]:
        """Yield the indices of every key the current input could refer to."""
        for node in self._considered:
            yield from node.indices()