"""First steps: calling a function, naming numbers and simple arithmetic forms."""

from __future__ import annotations

_NUMBER_WORDS = {"one": 1, "two": 2, "three": 3}


def show_output() -> str:
    """Print the line the first exercise is meant to produce and return it."""
    message = "I should appear as the output."
    print(message)
    return message


def print_result(num) -> None:
    """Print a computed result."""
    print(f"The result is {num}")


def num(word: str) -> int:
    """Return the number spelled by ``word`` (``one``, ``two`` or ``three``)."""
    try:
        return _NUMBER_WORDS[word]
    except KeyError:
        raise ValueError(f"no rule matches {word!r}") from None


def math_plus(first, second):
    """Return ``first + second``."""
    return first + second


def math_square(value):
    """Return ``value`` multiplied by itself."""
    return value * value


def run_my_first_macro() -> None:
    """Run the first exercise."""
    show_output()


def run_numbers() -> None:
    """Add the three named numbers and print the result."""
    print_result(num("one") + num("two") + num("three"))


def run_literal_variables() -> None:
    """Print a sum and a square of literal values."""
    print_result(math_plus(3, 5))
    print_result(math_square(2))


def run_expression_variables() -> None:
    """Print a sum and a square of expressions."""
    var = 5
    print_result(math_plus(2 * 3, var))
    print_result(math_square(var))