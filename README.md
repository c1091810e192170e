# dsakit

Classic data structures and algorithms in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

`bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`,
`quick_sort` (Lomuto partition, last element as pivot) and `heap_sort`.
Each takes any iterable and returns a new ascending list; the input is left
untouched.

### `dsakit.searching`

- `linear_search(values, key)` returns the index of the first match, or
  `None`.
- `binary_search(values, key)` searches an ascending sequence and returns an
  index of `key`, or `None`.
- `find_pivot(values)` returns the index of the largest item of a rotated
  sorted sequence, or `None` when no rotation point is found.
- `find_min(values)` returns the smallest item of a rotated sorted sequence.
- `find_floor(values, x)` and `find_ceil(values, x)` work on an ascending
  sequence. Below the first item both return the first item; above the last
  item `find_floor` returns the last item and `find_ceil` returns `None`.
- `find_peak(values)` returns the index of an item not smaller than its
  neighbours.

`find_min`, `find_floor` and `find_ceil` raise `ValueError` on an empty
sequence.

### `dsakit.arrays`

- `student_totals(marks)` takes rows of five subject marks and returns a
  `(total, average)` pair per student; the average is the total divided by
  five, truncated toward zero. A row without exactly five marks raises
  `ValueError`.
- `delete_at(values, pos)` and `insert_at(values, pos, value)` edit a
  fixed-size array: deletion shifts the rest left and fills the last slot
  with `0`; insertion shifts the rest right and drops the last item. An
  out-of-range position raises `IndexError`.
- `shift_in_front(values, item)` puts `item` first, dropping the last item;
  `replace_last(values, item)` sets the last slot.
- `ShrinkingArray` holds at most 100 elements and supports `delete_first()`
  and `delete_last()`; deleting from an empty array raises `IndexError`.

### `dsakit.sparse`

`Element(row, col, value)` and `SparseMatrix`, which keeps its entries in
row-major order. `a.add(b)` or `a + b` returns the sum, dropping entries that
add up to zero. `format()` renders one `(row, col) = value` line per entry.

### `dsakit.linked_list`

A singly linked `Node` and functions that take and return head nodes
(`None` is the empty list): `from_iterable`, `to_list`, `insert_front`,
`delete_front`, `append`, `delete_last`, `insert_at`, `delete_at`
(1-based positions), `search` (returns every 1-based position holding the
value), `reverse`, `reverse_between`, `find_middle`, `merge_sorted`,
`is_palindrome` (leaves the list intact), `nth_from_end`, `find_merge_node`
and `remove_cycle`.

### `dsakit.circular_list` and `dsakit.doubly_list`

`CircularList` and `DoublyLinkedList`, both built from an iterable, with
`prepend`, `append`, iteration, `len()` and `format()`, which gives
`List: 3 1 2 4` or `List is empty.`. `DoublyLinkedList` also supports
`reversed()`.

### `dsakit.binary_tree`

`TreeNode(data, left, right)` with `preorder`, `inorder`, `postorder`,
`height`, `diameter` (counted in nodes), `lowest_common_ancestor`, and
`top_view`, `bottom_view`, `left_view` and `right_view`.

### `dsakit.traversal_convert`

`preorder_to_postorder` and `postorder_to_preorder` for binary search
trees.

### `dsakit.stacks`

`ArrayStack(capacity=100)` and the unbounded `LinkedStack`, both with
`push`, `pop`, `peek`, `is_empty` and `len()`; `ArrayStack` also has
`is_full()`. Popping or peeking an empty stack, or pushing onto a full
`ArrayStack`, raises `StackError`. `is_balanced(text)` checks that `()[]{}`
nest and pair up, and `next_greater(nums)` gives each item's next larger
item to its right, or `-1`.

## Examples

```python
from dsakit.sorting import quick_sort
from dsakit.searching import find_min
from dsakit.stacks import ArrayStack, is_balanced, next_greater
from dsakit import linked_list

quick_sort([5, 2, 8, 1, 9, 3])          # [1, 2, 3, 5, 8, 9]
find_min([5, 6, 1, 2, 3, 4])            # 1

stack = ArrayStack(100)
stack.push(1)
stack.push(2)
stack.pop()                             # 2

is_balanced("(){}[]")                   # True
is_balanced("([)]")                     # False
next_greater([4, 5, 2, 10])             # [5, 10, 10, -1]

head = linked_list.from_iterable([1, 2, 3, 4, 5])
linked_list.to_list(linked_list.reverse_between(head, 2, 4))  # [1, 4, 3, 2, 5]
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus or prompts: functions take their input as arguments and return their
results rather than reading from or printing to the terminal.