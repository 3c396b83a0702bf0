# circlist

A circular doubly linked list of values. You can insert and delete at
either end, at a 1-based position, or next to a given value.

## Installing

```
pip install .
```

## Using the list

```python
from circlist.linkedlist import CircularList

items = CircularList([5, 4, 3, 2, 1])
len(items)              # 5
list(items)             # [5, 4, 3, 2, 1]
list(reversed(items))   # [1, 2, 3, 4, 5]
items                   # CircularList([5, 4, 3, 2, 1])

items.push_front(0)     # [0, 5, 4, 3, 2, 1]
items.push_back(9)      # [0, 5, 4, 3, 2, 1, 9]
items.pop_front()       # returns 0
items.pop_back()        # returns 9

items.insert_at(100, 2)        # [5, 100, 4, 3, 2, 1]
items.insert_before(7, 3)      # [5, 100, 4, 7, 3, 2, 1]
items.insert_after(8, 3)       # [5, 100, 4, 7, 3, 8, 2, 1]
items.delete_at(1)             # returns 5
items.remove(3)                # [100, 4, 7, 8, 2, 1]

print(items.render())
# 100 <-> 4 <-> 7 <-> 8 <-> 2 <-> 1 <-> (Head->next)
```

`render()` returns the values joined by `<->` on a single line. The line
ends with `(Head->next)`, which marks where the list wraps back to its
first value. For an empty list, `render()` returns an empty string.

### Positions and errors

Positions are 1-based. `insert_at(data, position)` puts the new value at
`position` and moves the old value there one place along. `position`
must name an existing element, from 1 to `len(list)`. To add a value at
the end, use `push_back`.

An operation that cannot be done raises an exception and leaves the list
unchanged:

- `IndexError` for a position outside 1 to `len(list)` in `insert_at` or
  `delete_at`, and for `pop_front` or `pop_back` on an empty list.
- `ValueError` when `insert_before`, `insert_after` or `remove` is given
  a value that is not in the list.

The value-based operations act on the first element equal to the target.

### Nodes

Each element is held in a `Node`, which has `data`, `prev` and `next`.
A node that is on its own links to itself, and the last node of a list
links back to the first.

## Demo

```
circlist-demo
```

This appends 5, 4, 3, 2 and 1 at the tail, removes the value 3, and
prints the result:

```
5 <-> 4 <-> 2 <-> 1 <-> (Head->next)
```

The command takes no options beyond `--help`. Within Python, you can
get the same list from `circlist.demo.build_demo_list()`.