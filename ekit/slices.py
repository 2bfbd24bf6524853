"""Index-checked list helpers."""

from ekit.errors import IndexOutOfRangeError


def add(src, element, index):
    """Return a new list with ``element`` inserted before position ``index``.

    ``index`` must name an existing position.
    """
    length = len(src)
    if not 0 <= index < length:
        raise IndexOutOfRangeError(length, index)
    return [*src[:index], element, *src[index:]]


def delete(src, index):
    """Return a new list without position ``index`` and the removed element."""
    length = len(src)
    if not 0 <= index < length:
        raise IndexOutOfRangeError(length, index)
    return [*src[:index], *src[index + 1:]], src[index]


def calculate_capacity(capacity, length):
    """Return the shrunk capacity for a buffer and whether it changed."""
    if capacity <= 64:
        return capacity, False
    if capacity > 2048 and capacity // length >= 2:
        return int(capacity * 0.625), True
    if capacity <= 2048 and capacity // length >= 4:
        return capacity // 2, True
    return capacity, False