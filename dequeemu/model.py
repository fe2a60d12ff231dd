"""State of the emulated deque: its items and an iterator position."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DequeModel:
    """Items and an iterator; ``position == len(items)`` is the end."""

    items: list[str] = field(default_factory=list)
    position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.items)

    def at_begin(self) -> bool:
        return self.position == 0

    def current(self) -> str:
        """Return the item under the iterator; raise IndexError at the end."""
        if self.at_end():
            raise IndexError("iterator is at end")
        return self.items[self.position]

    def rewind(self) -> None:
        self.position = 0