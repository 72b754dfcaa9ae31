"""Implicit treap: a sequence with range reverse, affine update and sum."""

from __future__ import annotations

import random
from typing import Iterable, Iterator

MOD = 998_244_353


class _Node:
    __slots__ = ("val", "total", "size", "priority", "left", "right", "rev", "mul", "add")

    def __init__(self, val: int) -> None:
        self.val = val
        self.total = val
        self.size = 1
        self.priority = random.random()
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.rev = False
        self.mul = 1
        self.add = 0


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _total(node: _Node | None) -> int:
    return node.total if node else 0


class ImplicitTreap:
    """A sequence of integers kept modulo ``mod`` (exact when ``mod`` is None).

    Ranges are 0-based and half-open: ``[left, right)``.
    """

    def __init__(self, values: Iterable[int] = (), mod: int | None = MOD) -> None:
        if mod is not None and mod <= 0:
            raise ValueError("mod must be positive")
        self._mod = mod
        self._root: _Node | None = None
        for v in values:
            self._root = self._merge(self._root, _Node(self._reduce(v)))

    def _reduce(self, x: int) -> int:
        return x if self._mod is None else x % self._mod

    def _apply(self, node: _Node, w: int, b: int) -> None:
        node.val = self._reduce(w * node.val + b)
        node.total = self._reduce(w * node.total + b * node.size)
        node.mul = self._reduce(node.mul * w)
        node.add = self._reduce(node.add * w + b)

    def _push(self, node: _Node) -> None:
        if node.rev:
            node.rev = False
            node.left, node.right = node.right, node.left
            for child in (node.left, node.right):
                if child:
                    child.rev = not child.rev
        if node.mul != 1 or node.add != 0:
            for child in (node.left, node.right):
                if child:
                    self._apply(child, node.mul, node.add)
            node.mul, node.add = 1, 0

    def _pull(self, node: _Node) -> None:
        node.size = 1 + _size(node.left) + _size(node.right)
        node.total = self._reduce(_total(node.left) + _total(node.right) + node.val)

    def _merge(self, a: _Node | None, b: _Node | None) -> _Node | None:
        if a is None:
            return b
        if b is None:
            return a
        if a.priority > b.priority:
            self._push(a)
            a.right = self._merge(a.right, b)
            self._pull(a)
            return a
        self._push(b)
        b.left = self._merge(a, b.left)
        self._pull(b)
        return b

    def _split(self, node: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
        """Split into the first ``k`` elements and the rest."""
        if node is None:
            return None, None
        self._push(node)
        left_size = _size(node.left)
        if k > left_size:
            rest, right = self._split(node.right, k - left_size - 1)
            node.right = rest
            self._pull(node)
            return node, right
        left, rest = self._split(node.left, k)
        node.left = rest
        self._pull(node)
        return left, node

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right <= len(self):
            raise IndexError(f"invalid range [{left}, {right})")

    def _cut(self, left: int, right: int) -> tuple[_Node | None, _Node | None, _Node | None]:
        head, rest = self._split(self._root, left)
        middle, tail = self._split(rest, right - left)
        return head, middle, tail

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} out of range")
        head, tail = self._split(self._root, index)
        self._root = self._merge(self._merge(head, _Node(self._reduce(value))), tail)

    def delete(self, index: int) -> None:
        """Remove the element at ``index``."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")
        head, _, tail = self._cut(index, index + 1)
        self._root = self._merge(head, tail)

    def reverse(self, left: int, right: int) -> None:
        """Reverse the order of the elements in ``[left, right)``."""
        self._check_range(left, right)
        head, middle, tail = self._cut(left, right)
        if middle:
            middle.rev = not middle.rev
        self._root = self._merge(self._merge(head, middle), tail)

    def apply_affine(self, left: int, right: int, w: int, b: int) -> None:
        """Replace every ``a`` in ``[left, right)`` by ``w * a + b``."""
        self._check_range(left, right)
        head, middle, tail = self._cut(left, right)
        if middle:
            self._apply(middle, self._reduce(w), self._reduce(b))
        self._root = self._merge(self._merge(head, middle), tail)

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the elements in ``[left, right)``, reduced modulo ``mod``."""
        self._check_range(left, right)
        if left == right:
            raise ValueError("empty range")
        head, middle, tail = self._cut(left, right)
        result = _total(middle)
        self._root = self._merge(self._merge(head, middle), tail)
        return result

    def move_to_end(self, left: int, right: int) -> None:
        """Cut the elements of ``[left, right)`` out and append them at the end."""
        self._check_range(left, right)
        head, middle, tail = self._cut(left, right)
        self._root = self._merge(self._merge(head, tail), middle)

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                self._push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right