# dsapractice

Small practice exercises and a few classic data structures, written as plain
Python functions and classes. No third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `dsapractice.basics`

Checks and classifications on integers and single characters. Functions that
take a character raise `ValueError` unless given a string of length one.

| Function | Returns |
| --- | --- |
| `sign_label(n)` | `"Positive"`, `"Zero"` or `"Negative"` |
| `is_odd(num)` | `True` when the truncated remainder by 2 is 1 (so negative odd numbers give `False`) |
| `is_divisible_by_5(num)` | whether `num` is a multiple of 5 |
| `is_divisible_by_3_and_5(num)` | whether `num` is a multiple of both 3 and 5 |
| `is_leap_year(year)` | Gregorian leap-year test |
| `greater(a, b)` / `greatest_of_three(a, b, c)` | the largest value |
| `add(a, b)` | the sum |
| `temperature_range(temp)` | `"Cold"` below 15, `"Warm"` below 35, else `"Hot"` |
| `is_vowel(ch)` | whether `ch` is a vowel, ignoring case |
| `char_type(ch)` | `"Uppercase"`, `"Lowercase"`, `"Digit"` or `"Special character"` (ASCII) |
| `is_triangle(a, b, c)` | strict triangle inequality |
| `triangle_type(a, b, c)` | `"Equilateral Triangle"`, `"Isosceles Triangle"` or `"Scalene Triangle"`; `ValueError` if not a triangle |
| `grade(marks)` | `"A"` (90+), `"B"` (80+), `"C"` (70+), `"D"` (60+), `"E"` (50+), else `"F"` |
| `is_multiple(a, b)` | whether either number divides the other; `ZeroDivisionError` if either is 0 |
| `greeting(hour)` | `"Good Morning"`, `"Good Afternoon"`, `"Good Evening"` or `"Good Night"` for 0–23; `ValueError` otherwise |
| `can_vote(age)` | `True` for 18 and over |
| `parity_report(a, b)` | a sentence saying which of the two numbers are even |
| `alphabet_half(ch)` | `"a-m"` or `"n-z"` for a lower-case letter; `ValueError` otherwise |
| `weekday_name(num)` | day name for 1–7, 1 being Sunday; `ValueError` otherwise |
| `days_in_month(num)` | days in month 1–12, ignoring leap years; `ValueError` otherwise |
| `month_name(num)` | English month name for 1–12; `ValueError` otherwise |

```python
from dsapractice.basics import is_leap_year, greater, triangle_type

is_leap_year(2000)        # True
is_leap_year(1900)        # False
greater(3, 7)             # 7
triangle_type(3, 4, 5)    # "Scalene Triangle"
```

## `dsapractice.binary_tree`

A `Node` dataclass (`data`, `left`, `right`) and:

- `build_tree(values)` – build from a pre-order sequence, `-1` marking a
  missing child; returns `None` if the first value is `-1`.
- `build_from_level_order(values)` – build from a level-order sequence; the
  first value is always the root and `-1` marks a missing child.
- `level_order(root)` – a list of levels, each a list of values.
- `inorder(root)`, `preorder(root)`, `postorder(root)` – lists of values.

Both builders raise `ValueError` when the values run out before the tree is
complete.

```python
from dsapractice.binary_tree import build_from_level_order, inorder, level_order

root = build_from_level_order([1, 3, 5, 7, 11, 17, -1, -1, -1, -1, -1, -1, -1])
level_order(root)   # [[1], [3, 5], [7, 11, 17]]
inorder(root)       # [7, 3, 11, 1, 17, 5]
```

## `dsapractice.linked_list`

`LinkedList` is a singly linked list of values; positions count from 1.

- `LinkedList(values=())` – optionally filled from an iterable.
- `insert_at_head(data)`, `insert_at_tail(data)`.
- `insert_at_position(position, data)` – position 1 to `len + 1`.
- `delete(position)` – removes and returns the value at `position`.
- `search(data)` – position of the first match, or `None`.
- `head` and `tail` properties – first and last value; `IndexError` when empty.
- Supports `len()`, iteration, and `str()` in the form `1->2->NULL`.

Out-of-range positions raise `IndexError`.

```python
from dsapractice.linked_list import LinkedList

items = LinkedList()
items.insert_at_head(10)
items.insert_at_tail(12)
items.insert_at_position(2, 11)
items.search(11)    # 2
str(items)          # "10->11->12->NULL"
```

## `dsapractice.graph`

`Graph` keeps adjacency lists keyed by node.

- `add_edge(u, v, directed=False)` – adds `u -> v`, and `v -> u` unless directed.
- `neighbours(node)` – the nodes one edge away, in insertion order.
- `format_adjacency()` – the whole list as text, one node per line.
- Supports `in`, iteration over nodes and `len()`.

```python
from dsapractice.graph import Graph

g = Graph()
g.add_edge(1, 2)
g.add_edge(2, 3)
g.neighbours(2)     # [1, 3]
print(g.format_adjacency())
```

## Command line

```
dsapractice-tree
```

reads whitespace-separated integers from standard input as a level-order tree,
`-1` standing for a missing child, and prints the level-order, in-order,
pre-order and post-order traversals. It exits with status 1 and an error
message if the input is not integers or ends before the tree is complete.

## Limits

The basics, linked list and graph are library code only; the single command
is the tree printer above. There is no interactive prompting and nothing is
stored between runs.