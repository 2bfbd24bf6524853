"""An ordered skip list with a user-supplied comparator."""

import itertools
import random

from ekit.errors import IndexOutOfRangeError

FACTOR_P = 0.25
MAX_LEVEL = 32
_LEVEL_THRESHOLD = int(FACTOR_P * 0xFFFF)


class EmptySkipListError(LookupError):
    """The skip list holds no elements."""

    def __init__(self, message="跳表为空"):
        super().__init__(message)


class _Node:
    __slots__ = ("value", "forward")

    def __init__(self, value, level):
        self.value = value
        self.forward = [None] * level


class SkipList:
    """Sorted multiset ordered by ``compare(a, b)`` returning <0, 0 or >0."""

    def __init__(self, compare, items=()):
        self._compare = compare
        self._header = _Node(None, MAX_LEVEL)
        self._level = 1
        self._size = 0
        for item in items:
            self.insert(item)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._header.forward[0]
        while node is not None:
            yield node.value
            node = node.forward[0]

    def as_list(self):
        """Return the elements in ascending order."""
        return list(self)

    def _random_level(self):
        level = 1
        while random.getrandbits(16) < _LEVEL_THRESHOLD:
            level += 1
        return min(level, MAX_LEVEL)

    def _traverse(self, value):
        update = [None] * MAX_LEVEL
        current = self._header
        for i in range(self._level - 1, -1, -1):
            while (nxt := current.forward[i]) is not None and self._compare(nxt.value, value) < 0:
                current = nxt
            update[i] = current
        return current, update

    def insert(self, value):
        """Insert ``value``; equal values are kept side by side."""
        _, update = self._traverse(value)
        level = self._random_level()
        if level > self._level:
            for i in range(self._level, level):
                update[i] = self._header
            self._level = level
        node = _Node(value, level)
        for i in range(level):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._size += 1

    def search(self, target):
        """Return whether an element equal to ``target`` is present."""
        current, _ = self._traverse(target)
        node = current.forward[0]
        return node is not None and self._compare(node.value, target) == 0

    def delete(self, target):
        """Remove one element equal to ``target`` if present; returns True."""
        current, update = self._traverse(target)
        node = current.forward[0]
        if node is None or self._compare(node.value, target) != 0:
            return True
        for i in range(self._level):
            if update[i].forward[i] is not node:
                break
            update[i].forward[i] = node.forward[i]
        while self._level > 1 and self._header.forward[self._level - 1] is None:
            self._level -= 1
        self._size -= 1
        return True

    def peek(self):
        """Return the smallest element."""
        node = self._header.forward[0]
        if node is None:
            raise EmptySkipListError()
        return node.value

    def get(self, index):
        """Return the element at position ``index`` in ascending order."""
        if not 0 <= index < self._size:
            raise IndexOutOfRangeError(self._size, index)
        return next(itertools.islice(self, index, None))