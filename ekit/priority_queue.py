"""A min-heap priority queue, optionally bounded."""


class EmptyQueueError(IndexError):
    """The queue holds no elements."""

    def __init__(self, message="ekit: 队列为空"):
        super().__init__(message)


class OutOfCapacityError(Exception):
    """A bounded queue is full."""

    def __init__(self, message="ekit: 超出最大容量限制"):
        super().__init__(message)


class PriorityQueue:
    """Priority queue ordered by ``compare(a, b)`` returning <0, 0 or >0.

    A capacity of zero or less makes the queue unbounded.
    """

    def __init__(self, capacity, compare):
        self._capacity = capacity if capacity > 0 else 0
        self._compare = compare
        self._items = []

    def __len__(self):
        return len(self._items)

    def cap(self):
        """Return the capacity, or 0 for an unbounded queue."""
        return self._capacity

    def is_boundless(self):
        return self._capacity <= 0

    def _is_full(self):
        return self._capacity > 0 and len(self._items) == self._capacity

    def peek(self):
        """Return the smallest element without removing it."""
        if not self._items:
            raise EmptyQueueError()
        return self._items[0]

    def enqueue(self, item):
        """Add ``item``; raise OutOfCapacityError if the queue is full."""
        if self._is_full():
            raise OutOfCapacityError()
        items = self._items
        items.append(item)
        node = len(items) - 1
        while node > 0:
            parent = (node - 1) // 2
            if self._compare(items[node], items[parent]) >= 0:
                break
            items[node], items[parent] = items[parent], items[node]
            node = parent

    def dequeue(self):
        """Remove and return the smallest element."""
        if not self._items:
            raise EmptyQueueError()
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def _sift_down(self, index):
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._compare(items[child], items[smallest]) < 0:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest