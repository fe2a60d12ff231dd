"""An interactive deque emulator: the state and actions behind the window."""

from __future__ import annotations

import bisect
import operator
import random
import re
from dataclasses import dataclass
from itertools import groupby

from dequeemu.algo import case_insensitive_less, merge_sort
from dequeemu.model import DequeModel

MAX_LENGTH = 1000
_DEFAULT_SEED = 5489
_INT_RE = re.compile(r"\s*([+-]?\d+)\s*")

TEA = (
    "Чай Лунцзин",
    "Эрл Грей",
    "Сенча",
    "Пуэр",
    "Дарджилинг",
    "Ассам",
    "Матча",
    "Ганпаудер",
    "Оолонг",
    "Лапсанг Сушонг",
)

CAKES = (
    "Красный бархат",
    "Наполеон",
    "Медовик",
    "Тирамису",
    "Прага",
    "Чизкейк",
    "Захер",
    "Эстерхази",
    "Морковный торт",
    "Чёрный лес",
)


def _parse_int(text: str) -> int:
    """Parse a 32-bit integer; anything unparsable gives 0."""
    match = _INT_RE.fullmatch(text)
    if not match:
        return 0
    value = int(match.group(1))
    if not -(2**31) <= value < 2**31:
        return 0
    return value


def _is_sorted(items: list[str]) -> bool:
    return all(not b < a for a, b in zip(items, items[1:]))


@dataclass(frozen=True)
class ViewState:
    """What the window shows: list rows, fields and enabled buttons."""

    rows: tuple[str, ...]
    current_row: int
    size_text: str
    element_text: str
    count_text: str
    can_edit: bool
    can_erase: bool
    can_increment: bool
    can_decrement: bool
    can_pop_back: bool
    can_pop_front: bool


class DequeEmulator:
    """Holds a deque of strings, an iterator and the window's text fields.

    ``element_text``, ``size_text`` and ``count_query`` are the editable
    fields that the actions read; ``count_text`` is the count label.
    """

    def __init__(self) -> None:
        self.model = DequeModel()
        self.element_text = ""
        self.size_text = ""
        self.count_query = ""
        self.count_text = ""
        self._random = random.Random(_DEFAULT_SEED)
        self._apply_model()

    # -- refresh -----------------------------------------------------------

    def _apply_model(self) -> None:
        self.size_text = str(len(self.model.items))
        if not self.model.items:
            self.model.position = 0
        self._apply_iterator()

    def _apply_iterator(self) -> None:
        if self.model.at_end():
            self.element_text = ""
        else:
            self.element_text = self.model.current()

    def view(self) -> ViewState:
        """Return a snapshot of what the window displays."""
        model = self.model
        rows = tuple(f"{i}: {item}" for i, item in enumerate(model.items)) + ("end",)
        at_end = model.at_end()
        non_empty = bool(model.items)
        return ViewState(
            rows=rows,
            current_row=model.position,
            size_text=self.size_text,
            element_text=self.element_text,
            count_text=self.count_text,
            can_edit=not at_end,
            can_erase=not at_end,
            can_increment=not at_end,
            can_decrement=not model.at_begin(),
            can_pop_back=non_empty,
            can_pop_front=non_empty,
        )

    def set_random(self, rng: random.Random) -> None:
        """Use ``rng`` for shuffling."""
        self._random = rng

    # -- filling -------------------------------------------------------------

    def _load(self, items: tuple[str, ...]) -> None:
        self.model.items = list(items)
        self.model.rewind()
        self._apply_model()

    def load_tea(self) -> None:
        self._load(TEA)

    def load_cakes(self) -> None:
        self._load(CAKES)

    # -- modification --------------------------------------------------------

    def pop_back(self) -> None:
        if self.model.items:
            self.model.items.pop()
            self.model.rewind()
            self._apply_model()

    def pop_front(self) -> None:
        if self.model.items:
            del self.model.items[0]
            self.model.rewind()
            self._apply_model()

    def clear(self) -> None:
        self.model.items.clear()
        self.model.rewind()
        self._apply_model()

    def push_back(self) -> None:
        self.model.items.append(self.element_text)
        self.model.rewind()
        self._apply_model()

    def push_front(self) -> None:
        self.model.items.insert(0, self.element_text)
        self.model.rewind()
        self._apply_model()

    def erase(self) -> None:
        if not self.model.at_end():
            del self.model.items[self.model.position]
            self.model.rewind()
            self._apply_model()

    def insert(self) -> None:
        self.model.items.insert(self.model.position, self.element_text)
        self.model.rewind()
        self._apply_model()

    def edit(self) -> None:
        if not self.model.at_end():
            self.model.items[self.model.position] = self.element_text
        self._apply_model()

    def resize(self) -> None:
        """Resize to the number in ``size_text``, padding with empty strings."""
        size = _parse_int(self.size_text)
        if size >= MAX_LENGTH:
            return
        if size < 0:
            raise ValueError(f"cannot resize to a negative length: {size}")
        items = self.model.items
        del items[size:]
        items.extend([""] * (size - len(items)))
        self.model.rewind()
        self._apply_model()

    # -- iterator ------------------------------------------------------------

    def decrement(self) -> None:
        if not self.model.at_begin():
            self.model.position -= 1
            self._apply_iterator()

    def increment(self) -> None:
        if not self.model.at_end():
            self.model.position += 1
            self._apply_iterator()

    def begin(self) -> None:
        self.model.rewind()
        self._apply_iterator()

    def end(self) -> None:
        self.model.position = len(self.model.items)
        self._apply_iterator()

    def select_row(self, row: int) -> None:
        """Move the iterator to a list row; rows past the items mean end."""
        size = len(self.model.items)
        self.model.position = max(0, min(row, size))
        self._apply_iterator()

    # -- algorithms ----------------------------------------------------------

    def count(self) -> None:
        self.count_text = str(self.model.items.count(self.count_query))
        self._apply_model()

    def find(self) -> None:
        items = self.model.items
        try:
            self.model.position = items.index(self.element_text)
        except ValueError:
            self.model.position = len(items)
        self._apply_iterator()

    def min(self) -> None:
        items = self.model.items
        self.model.position = items.index(min(items)) if items else 0
        self._apply_iterator()

    def max(self) -> None:
        items = self.model.items
        self.model.position = items.index(max(items)) if items else 0
        self._apply_iterator()

    def merge_sort(self) -> None:
        self.model.items = merge_sort(self.model.items, operator.lt)
        self.model.rewind()
        self._apply_model()

    def merge_sort_ignore_case(self) -> None:
        self.model.items = merge_sort(self.model.items, case_insensitive_less)
        self.model.rewind()
        self._apply_model()

    def unique(self) -> None:
        """Drop adjacent duplicates, but only when the items are sorted."""
        if _is_sorted(self.model.items):
            self.model.items = [key for key, _ in groupby(self.model.items)]
            self.model.rewind()
        self._apply_model()

    def shuffle(self) -> None:
        self._random.shuffle(self.model.items)
        self._apply_model()

    def reverse(self) -> None:
        self.model.items.reverse()
        self._apply_model()

    def lower_bound(self) -> None:
        if _is_sorted(self.model.items):
            self.model.position = bisect.bisect_left(self.model.items, self.element_text)
            self._apply_model()

    def upper_bound(self) -> None:
        if _is_sorted(self.model.items):
            self.model.position = bisect.bisect_right(self.model.items, self.element_text)
            self._apply_model()