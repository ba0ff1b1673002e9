"""Nested loops, any-of conditions, and building maps and edge lists."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any


def _debug(value: Any, indent: int = 0) -> str:
    """Render ``value`` in an indented, one-item-per-line debug layout."""
    pad = "    " * (indent + 1)
    close = "    " * indent
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        body = "".join(
            f"{pad}{_debug(k, indent + 1)}: {_debug(v, indent + 1)},\n"
            for k, v in value.items()
        )
        return "{\n" + body + close + "}"
    if isinstance(value, (tuple, list)):
        opening, closing = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        if not value:
            return opening + closing
        body = "".join(f"{pad}{_debug(v, indent + 1)},\n" for v in value)
        return opening + "\n" + body + close + closing
    return str(value)


@dataclass
class Coordinate:
    """A point on a grid."""

    x: int
    y: int

    def show(self) -> str:
        """Print the coordinate as ``(x, y)`` and return the printed text."""
        text = f"({self.x}, {self.y})"
        print(text)
        return text


def for_2d(rows: Iterable, cols: Iterable, body: Callable[[Any, Any], Any]) -> None:
    """Call ``body(row, col)`` for every column of every row, row by row."""
    columns = list(cols)
    for row in rows:
        for col in columns:
            body(row, col)


def if_any(conditions: Iterable[bool], block: Callable[[], Any]) -> bool:
    """Run ``block`` if any condition holds; return whether it ran.

    At least one condition is required.
    """
    values = list(conditions)
    if not values:
        raise ValueError("if_any needs at least one condition")
    if any(values):
        block()
        return True
    return False


def hashmap(pairs: Iterable[tuple[Any, Any]]) -> dict:
    """Build a dict from key/value pairs; a later key replaces an earlier one."""
    return dict(pairs)


def graph(edges: Mapping[Any, Iterable] | Iterable[tuple[Any, Iterable]]) -> list[tuple]:
    """Flatten ``from -> (to, ...)`` entries into a list of ``(from, to)`` edges."""
    items = edges.items() if isinstance(edges, Mapping) else edges
    return [(source, target) for source, targets in items for target in targets]


def _print_success() -> str:
    message = "Yay, the if statement worked."
    print(message)
    return message


def run_more_complex_example() -> None:
    """Show every coordinate of two grids."""
    for_2d(range(1, 5), range(2, 7), lambda row, col: Coordinate(x=col, y=row).show())

    values = [1, 3, 5]
    for_2d(values, values, lambda x, y: Coordinate(x=x, y=y).show())


def run_repetition() -> None:
    """Print success when one of several conditions holds."""
    if_any([False, 0 == 1, True], _print_success)


def run_more_repetition() -> None:
    """Build a small map and print it."""
    value = "my_string"
    my_hashmap = hashmap([("hash", "map"), ("Key", value)])
    print(_debug(my_hashmap))


def run_nested_repetition() -> None:
    """Build an edge list from adjacency entries and print it."""
    my_graph = graph(
        [
            (1, (2, 3, 4, 5)),
            (2, (1, 3)),
            (3, (2,)),
            (4, ()),
            (5, (1, 2, 3)),
        ]
    )
    print(_debug(my_graph))