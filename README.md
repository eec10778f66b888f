# dsakit

A small collection of classic algorithms and data structures, written plainly so that each one is easy to read and easy to check.

## What is inside

- `dsakit.sorting`: `bubble_sort`, `insertion_sort` and `selection_sort`. Each takes any iterable and returns a new list in ascending order; the input is left untouched.
- `dsakit.searching`:
  - `binary_search(values, key)` searches an ascending sequence by halving; `linear_search(values, key)` scans front to back. Both return a `SearchResult` with `index` (`None` when the key is absent), `steps` (the number of probes) and a `found` property.
  - `maximum(values)` returns the largest item and raises `ValueError` for an empty input.
- `dsakit.sequences`:
  - `factorial_iterative(n)` and `factorial_recursive(n)`.
  - `fibonacci_iterative(n)` and `fibonacci_recursive(n)` give the number at position `n`, with F(0) = 0 and F(1) = 1.
  - `fibonacci_series(count)` and `fibonacci_series_recursive(count)` give the first `count` terms, or an empty list when `count` is not positive.
  - The factorial and position functions raise `ValueError` for a negative argument.
- `dsakit.linked_list.LinkedList`: a singly linked list that keeps both ends and its size.
  - It can be built from an iterable and supports `append`, `prepend` and `insert(index, value)` for `0 <= index <= len`.
  - It supports indexing with non-negative indices, and `pop_front`, `pop_back` and `remove_at(index)`, each of which returns the removed value.
  - It supports `len()`, iteration and a `5 -> 10 -> NULL` style `str()`.
  - A bad index or removal from an empty list raises `IndexError`.
- `dsakit.singly_list.SinglyLinkedList`: a list that keeps only its first node.
  - `insert_front` and `insert_end` add a value at either end.
  - `insert_after(info, value)` returns `False` when `info` is not in the list.
  - `delete_front` and `delete_end` return the removed value and raise `IndexError("List is empty")` on an empty list.
  - It supports iteration and `len()`.
  - `display()` returns the values separated by spaces, or `List is empty`.
  - `run_menu(lines, out)` drives the list from a numbered menu, as described below.

## Installing

```
pip install .
```

Install with the `test` extra (`pip install .[test]`) to run the test suite with pytest.

## Using it from Python

```python
from dsakit.sorting import insertion_sort
from dsakit.searching import binary_search
from dsakit.linked_list import LinkedList

data = insertion_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
result = binary_search(data, 9)
print(result.index, result.steps)          # 3 3

items = LinkedList([10, 20, 30])
items.prepend(5)
items.insert(2, 15)
print(items)                               # 5 -> 10 -> 15 -> 20 -> 30 -> NULL
```

## Command line

`dsakit` runs the array algorithms on integers given as arguments:

```
dsakit sort --algorithm insertion 5 2 9 1    # bubble (default), insertion or selection
dsakit binary-search --key 9 1 2 5 9         # prints the index or "Not found", then the steps
dsakit linear-search --key 9 5 2 9 1         # prints the index or a not-present message, then the steps
dsakit maximum 5 2 9 1                       # between 1 and 100 values, otherwise exit status 1
dsakit factorial 5
dsakit fibonacci 10                          # the first 10 terms
dsakit fibonacci-at 10                       # the term at position 10
```

`dsakit-list` runs a menu over a `SinglyLinkedList`, reading whitespace-separated integers from standard input: a choice, then any values that choice needs.

- `1`: insert a value at the front.
- `2`: insert a value at the end.
- `3`: insert a value after the first node holding a given value (give the existing value, then the new one).
- `4`: delete the front node.
- `5`: delete the end node.
- `6`: display the list.
- `0`: quit.

The menu also stops at the end of input or at the first word that is not an integer. Deleting from an empty list prints `List is empty`. Nothing is saved between runs.