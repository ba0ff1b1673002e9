"""Curried functions: one argument at a time until the body can run."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .repetition import _debug


def print_curried_argument(val: Any) -> None:
    """Announce an argument as it is supplied."""
    print(f"Currying value {val!r}.")


def curry(names: Iterable[str], body: Callable[..., Any]) -> Any:
    """Curry ``body`` over the named arguments.

    Each returned function takes one argument, announces it and yields the
    next function; once every name is bound, ``body`` is called with them
    as keyword arguments. With no names, ``body()`` is returned at once.
    """
    names = tuple(names)
    if len(set(names)) != len(names):
        raise ValueError("argument names must be unique")

    def step(remaining: Sequence[str], bound: dict[str, Any]) -> Any:
        if not remaining:
            return body(**bound)
        name, rest = remaining[0], remaining[1:]

        def take(value: Any) -> Any:
            print_curried_argument(value)
            return step(rest, {**bound, name: value})

        return take

    return step(names, {})


def curry_fn(arity: int, body: Callable[..., Any]) -> Callable[[Any], Any]:
    """Return a function taking ``body``'s ``arity`` arguments one at a time."""
    if arity < 1:
        raise ValueError("a curried function needs at least one argument")

    def collect(args: tuple) -> Callable[[Any], Any]:
        def take(value: Any) -> Any:
            collected = (*args, value)
            if len(collected) == arity:
                return body(*collected)
            return collect(collected)

        return take

    return collect(())


def _print_numbers(nums: list[int]) -> None:
    print(f"Resulting Numbers: {_debug(nums)}")


def _get_example_vec() -> list[int]:
    return [1, 3, 5, 6, 7, 9]


def run_macro_recursion() -> None:
    """Build curried filters and apply them to an example list."""
    print("=== defining functions ===")
    is_between = curry(
        ["low", "high", "item"], lambda low, high, item: low < item < high
    )

    def filter_between(low: int, high: int, vec: list[int]) -> list[int]:
        check = is_between(low)(high)
        return [i for i in vec if check(i)]

    curry_filter_between = curry(["low", "high", "vec"], filter_between)

    print("=== create between_3_7 ===")
    between_3_7 = curry_filter_between(3)(7)
    print("=== create between_5_10 ===")
    between_5_10 = curry_filter_between(5)(10)

    my_vec = _get_example_vec()

    print("=== call between_3_7 ===")
    _print_numbers(between_3_7(my_vec))

    print("=== call between_5_10 ===")
    _print_numbers(between_5_10(my_vec))


def run_advanced() -> None:
    """Add four numbers through a curried function and print the sum."""
    add = curry_fn(4, lambda a, b, c, d: a + b + c + d)
    print(add(3)(2)(3)(4))