# dequeemu

A small emulator of a double-ended queue of strings. It is meant for learning
how deque operations, iterators and common algorithms behave.

The emulator keeps a deque together with an iterator. The iterator points
either at one of the elements or past the last one, which is shown as `end`.
After each action the emulator shows the new contents, the size, the
position of the iterator and the element under it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the emulator

```
dequeemu [--seed N]
```

The command first prints the state of the empty deque. It then reads
commands from standard input, one per line. After each action it prints the
state again:

```
size: 3
> 0: apple
  1: fig
  2: pear
  end
element: apple
count:
enabled: edit erase inc pop_back pop_front
```

The `>` marks the row the iterator is on. The `enabled` line lists the
actions that would have an effect at this position.

`--seed N` seeds the generator that `shuffle` uses. Without it a fixed
default seed is used, so shuffles are repeatable from run to run.

### Fields

The emulator has three text fields. These commands set a field and print
nothing:

| command        | field                                                  |
|----------------|--------------------------------------------------------|
| `text VALUE`   | element text, used by push, insert, edit, find and bounds |
| `size VALUE`   | size, used by `resize`                                 |
| `query VALUE`  | value counted by `count`                               |

Two things to keep in mind. The element text is replaced by the element under
the iterator every time the iterator moves, and it is cleared when the
iterator is at `end`. The size field is reset to the current size after every
change to the contents. So set a field just before the action that reads it.

### Actions

* `tea`, `cakes`: replace the contents with a sample list of ten teas or ten
  cakes.
* `push_back`, `push_front`: add the element text at one end.
* `pop_back`, `pop_front`: remove an element from one end, if there is one.
* `clear`: remove all elements.
* `resize`: change the length to the number in the size field. New elements
  are empty strings. A size of 1000 or more is ignored. A negative size is
  reported as an error. Text that is not a number counts as 0.
* `insert`: insert the element text before the iterator.
* `edit`: replace the element under the iterator with the element text.
* `erase`: remove the element under the iterator.
* `inc`, `dec`: move the iterator forward or back by one.
* `begin`, `end`: move the iterator to the first element or to `end`.
* `row N`: move the iterator to row `N`. The row is clamped to the valid
  range, and the last row is `end`.
* `count`: count the elements equal to the query field and show the result
  on the `count` line.
* `find`: move the iterator to the first element equal to the element text,
  or to `end` if there is none.
* `min`, `max`: move the iterator to the first smallest or first largest
  element.
* `sort`: merge sort the elements.
* `sort_ci`: merge sort the elements, ignoring the case of ASCII letters.
* `unique`: remove adjacent duplicates. This does nothing unless the deque is
  sorted.
* `shuffle`, `reverse`: shuffle or reverse the elements.
* `lower_bound`, `upper_bound`: on a sorted deque, move the iterator to the
  first element not less than, or greater than, the element text. On an
  unsorted deque they do nothing.
* `show`: print the state without changing it.
* `quit` or `exit`: stop. The emulator also stops at the end of input.

After most changes to the contents the iterator goes back to the first
element. `shuffle`, `reverse` and `edit` leave it where it is. An unknown
command prints `unknown command: NAME`.

## Using it from Python

`dequeemu.emulator.DequeEmulator` holds the state. It has one method for each
action above, for example `push_back()`, `select_row(row)`, `lower_bound()`
and `merge_sort_ignore_case()`. The fields are plain attributes:
`element_text`, `size_text` and `count_query`. `count_text` holds the last
count. `set_random(rng)` gives it a `random.Random` to use for shuffling.

`view()` returns a frozen `ViewState` that describes what should be shown:
`rows`, `current_row`, `size_text`, `element_text`, `count_text` and the
`can_*` flags for the actions. The underlying `DequeModel`, with its `items`
and `position`, is available as `emulator.model`.

```python
from dequeemu.cli import render
from dequeemu.emulator import DequeEmulator

emu = DequeEmulator()
emu.element_text = "pear"
emu.push_back()
emu.element_text = "apple"
emu.push_front()
print(render(emu))
```

`dequeemu.cli.run_commands(emulator, lines, out)` runs command lines like
the ones above against an emulator and writes the output to `out`.

The sorting routine is also available on its own:

```python
import operator

from dequeemu.algo import case_insensitive_less, merge_sort

print(merge_sort(["pear", "apple", "fig"], operator.lt))
# ['apple', 'fig', 'pear']

print(merge_sort(["b", "A", "c"], case_insensitive_less))
# ['A', 'b', 'c']
```

`merge(first, second, less)` merges two runs that are already sorted by the
same ordering function. When two elements compare equal, the element from
`second` comes first.

## What it does not do

There is no graphical window. The emulator is driven through the line-based
command described above, or from Python code. It does not save the deque
between runs.