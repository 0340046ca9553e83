"""Character trie with bounded Levenshtein search."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple


class _Node:
    __slots__ = ("children", "key")

    def __init__(self) -> None:
        self.children: Dict[str, _Node] = {}
        # full stored string for terminal nodes
        self.key: Optional[str] = None


class SpellTrie:
    """Set of strings searchable by edit distance.

    ``find_approx`` walks the trie once, depth first, keeping one row of the
    Levenshtein table per node: row ``j`` holds the distance between the
    node's prefix and ``query[:j]``. Rows only grow along a path, so a
    subtree is skipped as soon as its row minimum is above the limit.
    """

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def insert(self, key: str) -> bool:
        """Add ``key``; return False if it was already present."""
        node = self._root
        for ch in key:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = _Node()
            node = nxt
        if node.key is not None:
            return False
        node.key = key
        self._size += 1
        return True

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node = self._root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.key is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.key is not None:
                yield node.key
            stack.extend(node.children[ch] for ch in sorted(node.children, reverse=True))

    def find_approx(self, query: str, max_distance: int) -> Dict[str, int]:
        """Stored strings within ``max_distance`` edits of ``query``.

        Returns a mapping of matched string to its distance. Substitution,
        insertion and deletion each cost 1; transpositions cost 2.
        """
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")

        n = len(query)
        matches: Dict[str, int] = {}
        first_row = list(range(n + 1))
        if self._root.key is not None and first_row[n] <= max_distance:
            matches[self._root.key] = first_row[n]

        stack: List[Tuple[_Node, List[int]]] = [(self._root, first_row)]
        while stack:
            node, prev = stack.pop()
            for ch, child in node.children.items():
                row = [prev[0] + 1]
                for j in range(1, n + 1):
                    cost = 0 if query[j - 1] == ch else 1
                    row.append(min(row[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))

                if child.key is not None and row[n] <= max_distance:
                    matches[child.key] = row[n]
                if child.children and min(row) <= max_distance:
                    stack.append((child, row))
        return matches
