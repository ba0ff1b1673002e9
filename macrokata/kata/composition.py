"""Building values from smaller building blocks: digits, numbers, pairs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .repetition import _debug

_DIGITS = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def digit(word: str) -> str:
    """Return the digit character spelled by ``word``."""
    try:
        return _DIGITS[word]
    except KeyError:
        raise ValueError(f"no rule matches {word!r}") from None


def number(*args: str) -> str:
    """Concatenate the digits spelled by one or more words."""
    if not args:
        raise ValueError("number needs at least one digit")
    return "".join(digit(word) for word in args)


def pair(key: Any, value: Any) -> tuple[Any, Any]:
    """Return ``key`` and ``value`` as a pair."""
    return (key, value)


def hashmap_from(pairs: Iterable[tuple[Any, Any]]) -> dict:
    """Build a dict from key/value pairs; a later key replaces an earlier one."""
    return dict(pair(key, value) for key, value in pairs)


def run_macros_calling_macros() -> None:
    """Build two numbers from words and print their sum."""
    my_number = int(number("nine", "three", "seven", "two", "zero"))
    my_other_number = int(number("one", "two", "four", "six", "eight", "zero"))
    print(my_number + my_other_number)


def run_pairs() -> None:
    """Print a pair and a map built from pairs."""
    print(_debug(pair("a", 1)))
    value = "value"
    my_hashmap = hashmap_from([("Hash", "map"), ("Key", value)])
    print(_debug(my_hashmap))