"""Ordered Map — AVL-balanced sorted map keyed by str.

Invariants:
    - In-order traversal yields keys in strictly ascending order (no duplicates)
    - Every node's subtree heights differ by at most 1 after each set()
    - set() and get() are O(log n); a bounded scan is O(log n + k)
    - Range bounds: start is inclusive, end is exclusive, "" means unbounded

Design Decisions:
    - Generic over the value type: one map per stored record type, no casts on read
    - Iterative in-order scan with an explicit stack: no recursion depth limit on
      long scans, and subtrees left of `start` are pruned instead of walked
    - No delete: profiles are overwritten and posts are append-only
    - Not thread-safe; callers serialize access (see services.blog_service)
"""

from typing import Callable, Generic, Iterator, TypeVar

V = TypeVar("V")


class _Node(Generic[V]):
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: str, value: V):
        self.key = key
        self.value = value
        self.left: _Node[V] | None = None
        self.right: _Node[V] | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance_factor(node)
    if balance > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class OrderedMap(Generic[V]):
    """Sorted associative container: point lookup plus bounded range iteration."""

    def __init__(self) -> None:
        self._root: _Node[V] | None = None
        self._size = 0

    def set(self, key: str, value: V) -> bool:
        """Insert or overwrite. Returns True if the key already existed."""
        self._root, replaced = self._insert(self._root, key, value)
        if not replaced:
            self._size += 1
        return replaced

    def _insert(
        self, node: _Node[V] | None, key: str, value: V,
    ) -> tuple[_Node[V], bool]:
        if node is None:
            return _Node(key, value), False
        if key == node.key:
            node.value = value
            return node, True
        if key < node.key:
            node.left, replaced = self._insert(node.left, key, value)
        else:
            node.right, replaced = self._insert(node.right, key, value)
        if replaced:
            # Shape unchanged on overwrite
            return node, True
        return _rebalance(node), False

    def get(self, key: str) -> tuple[V | None, bool]:
        """Point lookup. (None, False) when absent."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node.value, True
            node = node.left if key < node.key else node.right
        return None, False

    def has(self, key: str) -> bool:
        return self.get(key)[1]

    def items(self, start: str = "", end: str = "") -> Iterator[tuple[str, V]]:
        """Yield (key, value) with start <= key < end in ascending order."""
        stack: list[_Node[V]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                if start and node.key < start:
                    node = node.right
                else:
                    stack.append(node)
                    node = node.left
            if not stack:
                return
            node = stack.pop()
            if end and node.key >= end:
                return
            yield node.key, node.value
            node = node.right

    def iterate(
        self, start: str, end: str, visit: Callable[[str, V], bool],
    ) -> bool:
        """Visit entries in range; stop as soon as visit returns True.

        Returns True if iteration was stopped by the visitor.
        """
        for key, value in self.items(start, end):
            if visit(key, value):
                return True
        return False

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)
