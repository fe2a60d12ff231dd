"""Line-oriented front end for the deque emulator."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from dequeemu.emulator import DequeEmulator

_ACTIONS: dict[str, Callable[[DequeEmulator], None]] = {
    "tea": DequeEmulator.load_tea,
    "cakes": DequeEmulator.load_cakes,
    "pop_back": DequeEmulator.pop_back,
    "pop_front": DequeEmulator.pop_front,
    "clear": DequeEmulator.clear,
    "push_back": DequeEmulator.push_back,
    "push_front": DequeEmulator.push_front,
    "erase": DequeEmulator.erase,
    "insert": DequeEmulator.insert,
    "dec": DequeEmulator.decrement,
    "inc": DequeEmulator.increment,
    "begin": DequeEmulator.begin,
    "end": DequeEmulator.end,
    "edit": DequeEmulator.edit,
    "resize": DequeEmulator.resize,
    "count": DequeEmulator.count,
    "find": DequeEmulator.find,
    "min": DequeEmulator.min,
    "max": DequeEmulator.max,
    "sort": DequeEmulator.merge_sort,
    "sort_ci": DequeEmulator.merge_sort_ignore_case,
    "unique": DequeEmulator.unique,
    "shuffle": DequeEmulator.shuffle,
    "reverse": DequeEmulator.reverse,
    "lower_bound": DequeEmulator.lower_bound,
    "upper_bound": DequeEmulator.upper_bound,
}

_FIELDS = {"text": "element_text", "size": "size_text", "query": "count_query"}

_BUTTONS = (
    ("edit", "can_edit"),
    ("erase", "can_erase"),
    ("inc", "can_increment"),
    ("dec", "can_decrement"),
    ("pop_back", "can_pop_back"),
    ("pop_front", "can_pop_front"),
)


def render(emulator: DequeEmulator) -> str:
    """Return the emulator's view as text."""
    state = emulator.view()
    lines = [f"size: {state.size_text}"]
    for row, label in enumerate(state.rows):
        marker = ">" if row == state.current_row else " "
        lines.append(f"{marker} {label}")
    lines.append(f"element: {state.element_text}")
    lines.append(f"count: {state.count_text}")
    enabled = " ".join(name for name, attr in _BUTTONS if getattr(state, attr))
    lines.append(f"enabled: {enabled}")
    return "\n".join(lines) + "\n"


def run_commands(emulator: DequeEmulator, lines: Iterable[str], out: TextIO) -> None:
    """Execute commands until input ends or ``quit`` is read."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        command, _, argument = line.strip().partition(" ")
        if not command:
            continue
        if command in ("quit", "exit"):
            return
        if command == "show":
            out.write(render(emulator))
            continue
        if command in _FIELDS:
            setattr(emulator, _FIELDS[command], argument)
            continue
        try:
            if command == "row":
                emulator.select_row(int(argument))
            elif command in _ACTIONS:
                _ACTIONS[command](emulator)
            else:
                out.write(f"unknown command: {command}\n")
                continue
        except ValueError as exc:
            out.write(f"error: {exc}\n")
            continue
        out.write(render(emulator))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dequeemu", description="Deque emulator.")
    parser.add_argument("--seed", type=int, help="seed for shuffling")
    args = parser.parse_args(argv)
    emulator = DequeEmulator()
    if args.seed is not None:
        emulator.set_random(random.Random(args.seed))
    sys.stdout.write(render(emulator))
    run_commands(emulator, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())