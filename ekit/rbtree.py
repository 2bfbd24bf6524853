"""A red-black tree map ordered by a user-supplied comparator."""

from enum import Enum


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class DuplicateKeyError(KeyError):
    """The key is already present in the tree."""

    def __init__(self, message="ekit: RBTree不能添加重复节点Key"):
        super().__init__(message)

    def __str__(self):
        return self.args[0]


class KeyNotFoundError(KeyError):
    """The key is not present in the tree."""

    def __init__(self, message="ekit: RBTree不存在节点Key"):
        super().__init__(message)

    def __str__(self):
        return self.args[0]


class _Node:
    __slots__ = ("key", "value", "color", "left", "right", "parent")

    def __init__(self, key, value, color=Color.RED, parent=None):
        self.key = key
        self.value = value
        self.color = color
        self.left = None
        self.right = None
        self.parent = parent


# The helpers below treat a missing node (None) as a black leaf.

def _color(node):
    return Color.BLACK if node is None else node.color


def _set_color(node, color):
    if node is not None:
        node.color = color


def _parent(node):
    return None if node is None else node.parent


def _left(node):
    return None if node is None else node.left


def _right(node):
    return None if node is None else node.right


def _grandparent(node):
    return _parent(_parent(node))


def _brother(node):
    if node is None:
        return None
    parent = _parent(node)
    if node is _left(parent):
        return _right(parent)
    return _left(parent)


def _uncle(node):
    if node is None:
        return None
    return _brother(_parent(node))


class RBTree:
    """Map with unique keys kept ordered by ``compare(a, b)`` (<0, 0, >0)."""

    def __init__(self, compare):
        self._compare = compare
        self._root = None
        self._size = 0

    def __len__(self):
        return self._size

    def add(self, key, value):
        """Insert a new key; raise DuplicateKeyError if it already exists."""
        self._add_node(key, value)

    def delete(self, key):
        """Remove ``key``; return ``(value, True)``, or ``(None, False)`` if absent."""
        node = self._find_node(key)
        if node is None:
            return None, False
        value = node.value
        self._delete_node(node)
        return value, True

    def find(self, key):
        """Return the value stored under ``key``."""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError()
        return node.value

    def set(self, key, value):
        """Replace the value of an existing ``key``."""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError()
        node.value = value

    def key_values(self):
        """Return the keys and values in key order, as two lists."""
        keys, values = [], []
        for node in self._in_order():
            keys.append(node.key)
            values.append(node.value)
        return keys, values

    def _in_order(self):
        stack = []
        current = self._root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def _add_node(self, key, value):
        if self._root is None:
            self._root = _Node(key, value)
            fix_node = self._root
        else:
            current = self._root
            parent = None
            cmp = 0
            while current is not None:
                parent = current
                cmp = self._compare(key, current.key)
                if cmp < 0:
                    current = current.left
                elif cmp > 0:
                    current = current.right
                else:
                    raise DuplicateKeyError()
            fix_node = _Node(key, value, parent=parent)
            if cmp < 0:
                parent.left = fix_node
            else:
                parent.right = fix_node
        self._size += 1
        self._fix_after_add(fix_node)

    def _delete_node(self, target):
        node = target
        if node.left is not None and node.right is not None:
            successor = self._find_successor(node)
            node.key = successor.key
            node.value = successor.value
            node = successor
        replacement = node.left if node.left is not None else node.right
        if replacement is not None:
            replacement.parent = node.parent
            if node.parent is None:
                self._root = replacement
            elif node is node.parent.left:
                node.parent.left = replacement
            else:
                node.parent.right = replacement
            node.left = node.right = node.parent = None
            if _color(node) is Color.BLACK:
                self._fix_after_delete(replacement)
        elif node.parent is None:
            self._root = None
        else:
            if _color(node) is Color.BLACK:
                self._fix_after_delete(node)
            if node.parent is not None:
                if node is node.parent.left:
                    node.parent.left = None
                elif node is node.parent.right:
                    node.parent.right = None
                node.parent = None
        self._size -= 1

    def _find_successor(self, node):
        if node is None:
            return None
        if node.right is not None:
            current = node.right
            while current.left is not None:
                current = current.left
            return current
        parent = node.parent
        child = node
        while parent is not None and child is parent.right:
            child = parent
            parent = parent.parent
        return parent

    def _find_node(self, key):
        node = self._root
        while node is not None:
            cmp = self._compare(key, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    def _fix_after_add(self, x):
        x.color = Color.RED
        while x is not None and x is not self._root and _color(_parent(x)) is Color.RED:
            uncle = _uncle(x)
            if _color(uncle) is Color.RED:
                x = self._fix_uncle_red(x, uncle)
            elif _parent(x) is _left(_grandparent(x)):
                x = self._fix_add_left_black(x)
            else:
                x = self._fix_add_right_black(x)
        _set_color(self._root, Color.BLACK)

    def _fix_uncle_red(self, x, uncle):
        _set_color(_parent(x), Color.BLACK)
        _set_color(uncle, Color.BLACK)
        _set_color(_grandparent(x), Color.RED)
        return _grandparent(x)

    def _fix_add_left_black(self, x):
        if x is _right(_parent(x)):
            x = _parent(x)
            self._rotate_left(x)
        _set_color(_parent(x), Color.BLACK)
        _set_color(_grandparent(x), Color.RED)
        self._rotate_right(_grandparent(x))
        return x

    def _fix_add_right_black(self, x):
        if x is _left(_parent(x)):
            x = _parent(x)
            self._rotate_right(x)
        _set_color(_parent(x), Color.BLACK)
        _set_color(_grandparent(x), Color.RED)
        self._rotate_left(_grandparent(x))
        return x

    def _fix_after_delete(self, x):
        while x is not self._root and _color(x) is Color.BLACK:
            if x is _left(x.parent):
                x = self._fix_after_delete_left(x)
            else:
                x = self._fix_after_delete_right(x)
        _set_color(x, Color.BLACK)

    def _fix_after_delete_left(self, x):
        sib = _right(_parent(x))
        if _color(sib) is Color.RED:
            _set_color(sib, Color.BLACK)
            _set_color(_parent(sib), Color.RED)
            self._rotate_left(_parent(x))
            sib = _right(_parent(x))
        if _color(_left(sib)) is Color.BLACK and _color(_right(sib)) is Color.BLACK:
            _set_color(sib, Color.RED)
            return _parent(x)
        if _color(_right(sib)) is Color.BLACK:
            _set_color(_left(sib), Color.BLACK)
            _set_color(sib, Color.RED)
            self._rotate_right(sib)
            sib = _right(_parent(x))
        _set_color(sib, _color(_parent(x)))
        _set_color(_parent(x), Color.BLACK)
        _set_color(_right(sib), Color.BLACK)
        self._rotate_left(_parent(x))
        return self._root

    def _fix_after_delete_right(self, x):
        sib = _left(_parent(x))
        if _color(sib) is Color.RED:
            _set_color(sib, Color.BLACK)
            _set_color(_parent(x), Color.RED)
            self._rotate_right(_parent(x))
            sib = _brother(x)
        if _color(_right(sib)) is Color.BLACK and _color(_left(sib)) is Color.BLACK:
            _set_color(sib, Color.RED)
            return _parent(x)
        if _color(_left(sib)) is Color.BLACK:
            _set_color(_right(sib), Color.BLACK)
            _set_color(sib, Color.RED)
            self._rotate_left(sib)
            sib = _left(_parent(x))
        _set_color(sib, _color(_parent(x)))
        _set_color(_parent(x), Color.BLACK)
        _set_color(_left(sib), Color.BLACK)
        self._rotate_right(_parent(x))
        return self._root

    def _rotate_left(self, node):
        if node is None or node.right is None:
            return
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node.parent.left is node:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node):
        if node is None or node.left is None:
            return
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node.parent.right is node:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot