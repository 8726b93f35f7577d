# trie.py
# Prefix tree for exact lookup and frequency-ranked autocompletion.
# Children are kept in a sorted list and located with binary search,
# so every level costs O(log k) comparisons for k children.

from __future__ import annotations
from bisect import bisect_left
from collections import deque
from operator import attrgetter
from typing import Iterator, List, Optional, TextIO, Tuple

Entry = str
Count = int
Candidate = Tuple[Entry, Count]

_by_key = attrgetter("key")


class TrieNode:
    """
    A single node in the Trie.
    children: TrieNodes sorted ascending by key, unique per key
    key: the character on the edge into this node (None for the root)
    value: the full entry ending here, set once it has been inserted
    count: how many times that entry was inserted (0 = just a prefix)
    """

    __slots__ = ("children", "key", "value", "count")

    def __init__(self, key: Optional[str] = None) -> None:
        self.children: List[TrieNode] = []
        self.key = key
        self.value: Optional[str] = None
        self.count = 0

    def find(self, ch: str) -> Optional["TrieNode"]:
        """Binary search for the child keyed by `ch`."""
        i = bisect_left(self.children, ch, key=_by_key)
        if i < len(self.children) and self.children[i].key == ch:
            return self.children[i]
        return None

    def find_or_add(self, ch: str) -> "TrieNode":
        """Return the child keyed by `ch`, creating it in sorted position if missing."""
        i = bisect_left(self.children, ch, key=_by_key)
        if i < len(self.children) and self.children[i].key == ch:
            return self.children[i]
        child = TrieNode(ch)
        self.children.insert(i, child)
        return child

    def __repr__(self) -> str:
        return f"TrieNode(key={self.key!r}, count={self.count}, children={len(self.children)})"


class Trie:
    """
    Trie storing strings with insertion counts, used by the AutoCompleter for:
     - exact membership checks (exists / `in`)
     - prefix suggestions ranked by count, then lexicographically
     - a breadth-first dump of stored characters for debugging
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, s: str) -> None:
        """
        Insert `s` into the trie, creating nodes along the path as needed.
        Repeated inserts bump the terminal count. The empty string is a
        valid entry and is stored on the root.
        """
        node = self._root
        for ch in s:
            node = node.find_or_add(ch)
        if node.count == 0:
            self._size += 1
        node.count += 1
        node.value = s

    # lookups -------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.find(ch)
            if node is None:
                return None
        return node

    def exists(self, s: str) -> bool:
        """True only if `s` itself was inserted, not merely a prefix of an entry."""
        node = self._walk(s)
        return node is not None and node.count > 0

    def count(self, s: str) -> int:
        """Insertion count of `s` (0 if it is not a stored entry)."""
        node = self._walk(s)
        return node.count if node is not None else 0

    # search/traversal ----------------------------------------------
    def search_with_counts(self, prefix: str = "", limit: Optional[int] = None) -> List[Candidate]:
        """
        Return every entry starting with `prefix` (itself included) as
        (entry, count) pairs sorted by
         - higher count first
         - lexicographically second
        `limit` truncates the ranked list; None returns everything.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        node = self._walk(prefix)
        if node is None:
            return []

        out: List[Candidate] = []
        stack = [node]
        while stack:
            cur = stack.pop()
            stack.extend(cur.children)
            if cur.count > 0:
                out.append((cur.value, cur.count))

        out.sort(key=lambda t: (-t[1], t[0]))
        if limit is not None:
            del out[limit:]
        return out

    def search(self, prefix: str = "", limit: Optional[int] = None) -> List[Entry]:
        """Ranked entries under `prefix`, without counts."""
        return [value for value, _ in self.search_with_counts(prefix, limit)]

    # convenience/debugging -----------------------------------------
    def levels(self) -> List[List[str]]:
        """
        Keys grouped by breadth-first level, root excluded.
        Only nodes that have children are expanded into the next level.
        """
        out: List[List[str]] = []
        queue = deque([self._root])
        while queue:
            level: List[str] = []
            for _ in range(len(queue)):
                node = queue.popleft()
                for child in node.children:
                    level.append(child.key)
                    if child.children:
                        queue.append(child)
            if level:
                out.append(level)
        return out

    def display(self, stream: Optional[TextIO] = None) -> str:
        """
        Render the trie one level per line, keys separated by spaces.
        If `stream` is given the text is written to it as well; write
        errors from the stream are not caught.
        """
        text = "\n".join(" ".join(level) for level in self.levels())
        if stream is not None:
            stream.write(text)
        return text

    def __str__(self) -> str:
        return self.display()

    def __contains__(self, s: object) -> bool:
        return isinstance(s, str) and self.exists(s)

    def __len__(self) -> int:
        """Number of distinct stored entries."""
        return self._size

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.search(""))
