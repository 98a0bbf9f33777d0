# labstructs

Small, dependency-free containers written from first principles, plus a few
exercises that use them.

## Containers

### `labstructs.vector.Vector`

A dynamic array whose size changes only through `resize`.

- `Vector(items=(), fill=None)` starts with the given items.
- `resize(size)` shrinks (dropping trailing elements) or grows (new slots hold
  `fill`). A negative size raises `ValueError`.
- `v[i]` and `v[i] = x` accept only indices `0 <= i < len(v)`; anything else,
  negative indices included, raises `IndexError`.
- `len()`, iteration and `copy()` (an independent vector with the same `fill`).

### `labstructs.linked_list.LinkedList`

A doubly linked list of `ListItem` nodes. Each `ListItem` has `data`, `next`
and `prev`.

- `insert(data)` puts a new item at the head and returns it.
- `insert_after(item, data)` puts a new item right after `item` and returns it.
- `erase_first()` removes the head and returns the new head (or `None`).
- `erase_next(item)` removes the item after `item` and returns the item that
  now follows `item` (or `None`).
- `first()` returns the head item or `None`.
- Iteration yields the data values; `len()` and `copy()` are supported.
- Passing an item from another list to `insert_after` or `erase_next` raises
  `ValueError`.

### `labstructs.stack.Stack`

Last-in, first-out, kept at the head of a `LinkedList`.

- `push(data)`, `top()` and `pop()` (which returns the removed value).
- `top()` and `pop()` on an empty stack raise `IndexError`.
- An empty stack is falsy; `len()` and `copy()` are supported.

### `labstructs.fifo.Queue`

First-in, first-out, kept in a ring buffer (a `Vector`) that starts with room
for two elements and doubles when full.

- `insert(data)`, `front()` and `remove()` (which returns the removed value).
- `front()` and `remove()` on an empty queue raise `IndexError`.
- An empty queue is falsy; `len()`, iteration (front to rear) and `copy()` are
  supported.

```python
from labstructs.stack import Stack
from labstructs.fifo import Queue

stack = Stack([1, 2])
stack.push(3)
stack.top()      # 3
stack.pop()      # 3

queue = Queue()
queue.insert("1")
queue.insert("2")
queue.front()    # "1"
queue.remove()   # "1"
```

## Reaction chains

`labstructs.reactions` finds every substance reachable from a starting
substance, given reactions written as `A->B`.

- `parse_reaction("A->B")` returns `("A", "B")`; text without `->` raises
  `ValueError`.
- `build_reactions(lines)` maps each substance to the set of its products; a
  line may hold several whitespace-separated reactions.
- `reachable(start, reactions)` returns the reachable substances in
  breadth-first order, products of one substance taken in sorted order. The
  start itself is never included.

On the command line, `labstructs-reactions [FILE]` reads the start substance
followed by the reactions from `FILE` or standard input, and prints the
reachable substances on one line, each followed by a space:

```
$ echo "H2O H2O->H2 H2->H" | labstructs-reactions
H2 H 
```

A reaction without `->` is reported on standard error with exit status 1.

## Practice exercises

`labstructs.practice` holds three short exercises:

- `prepend_all(values)` inserts each value at the front in turn and returns the
  resulting order (so the input comes back reversed).
- `lookup(definitions, queries)` yields, for each query, its definition from
  the `(word, definition)` pairs, or `"Not found"`. The first definition of a
  repeated word wins.
- `below(values, threshold)` returns the values smaller than `threshold`, in
  their original order.

They are available through `labstructs-practice`, which reads
whitespace-separated input from a file or standard input:

```
$ echo "3 1 2 3" | labstructs-practice prepend
3 2 1 
$ echo "2 cat animal sun star sun moon" | labstructs-practice lookup
star
Not found
$ echo "4 5 1 7 2 4" | labstructs-practice below
1 2 
```

- `prepend`: a count N, then N integers.
- `lookup`: a count N, then N word/definition pairs, then any number of queries.
- `below`: a count N, then N integers, then the threshold.

Malformed or truncated input is reported on standard error with exit status 1.

## Tests

```
pip install -e .[test]
pytest
```