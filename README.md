# ekit

A small toolkit of generic building blocks:

- `ekit.priority_queue.PriorityQueue`: a min-heap priority queue. It is bounded when
  `capacity > 0` and unbounded otherwise.
- `ekit.skip_list.SkipList`: an ordered skip list driven by a comparator.
- `ekit.rbtree.RBTree`: a red-black tree map with unique keys.
- `ekit.slices`: `add`, `delete` and `calculate_capacity` helpers for lists.
- `ekit.option`: `apply` and `apply_err` for the functional-options pattern.
- `ekit.pure_copier.copy_to` and `ekit.reflect_copier.ReflectCopier`: copy matching
  public fields from one object to another. They support ignored fields
  (`ekit.copier_options.ignore_fields`) and per-field converters
  (`ekit.copier_options.convert_field`, `ekit.converter`).

A comparator is a callable `compare(a, b)`. It returns a negative number when
`a < b`, zero when they are equal and a positive number otherwise.

## Install

    pip install .

## Examples

```python
from ekit.priority_queue import PriorityQueue

def compare(a, b):
    return (a > b) - (a < b)

q = PriorityQueue(0, compare)
for n in [6, 5, 4, 3, 2, 1]:
    q.enqueue(n)
print(q.dequeue())  # 1
```

```python
from ekit.skip_list import SkipList

sl = SkipList(compare, [3, 1, 2])
print(sl.as_list())   # [1, 2, 3]
print(sl.search(2))   # True
```

```python
from ekit.rbtree import RBTree

tree = RBTree(compare)
tree.add(1, "one")
tree.add(2, "two")
print(tree.find(2))       # "two"
print(tree.key_values())  # ([1, 2], ["one", "two"])
```

Errors are raised as exceptions. Examples are `EmptyQueueError`,
`OutOfCapacityError`, `DuplicateKeyError`, `KeyNotFoundError` and
`IndexOutOfRangeError`.

## Tests

    pip install .[test]
    pytest