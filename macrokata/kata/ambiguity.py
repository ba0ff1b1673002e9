"""Telling literals, negative literals, blocks and expressions apart."""

from __future__ import annotations

import ast
import operator
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class NumberKind(Enum):
    """What sort of code produced a number."""

    POSITIVE_NUMBER = "PositiveNumber"
    NEGATIVE_NUMBER = "NegativeNumber"
    UNKNOWN_BECAUSE_BLOCK = "UnknownBecauseBlock"
    UNKNOWN_BECAUSE_EXPR = "UnknownBecauseExpr"


@dataclass(frozen=True)
class NumberType:
    """A number together with the kind of code that was written for it."""

    kind: NumberKind
    value: int

    def __str__(self) -> str:
        return f"{self.kind.value}(\n    {self.value},\n)"

    def show(self) -> str:
        """Print the number in an indented debug layout and return the text."""
        text = str(self)
        print(text)
        return text


def sum_numbers(first: int, *args: int) -> int:
    """Add together at least two numbers."""
    if not args:
        raise ValueError("sum needs at least two numbers")
    return first + sum(args)


_BINARY_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
}

_UNARY_OPS = {
    ast.USub: operator.neg,
    ast.UAdd: operator.pos,
}

_FUNCTIONS: dict[str, Callable[..., int]] = {"sum": sum_numbers}


def _is_int_literal(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and type(node.value) is int


def _evaluate(node: ast.AST) -> int:
    if _is_int_literal(node):
        return node.value
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        return _UNARY_OPS[type(node.op)](_evaluate(node.operand))
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPS:
        return _BINARY_OPS[type(node.op)](_evaluate(node.left), _evaluate(node.right))
    if (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id in _FUNCTIONS
        and not node.keywords
    ):
        return _FUNCTIONS[node.func.id](*(_evaluate(arg) for arg in node.args))
    raise ValueError(f"unsupported expression: {ast.dump(node)}")


def get_number_type(code) -> NumberType:
    """Classify ``code`` by how it was written and compute its value.

    An ``int`` or a string holding an integer literal is a literal; a string
    ``-<literal>`` is a negative literal; a callable is a block whose result
    is the value; any other integer expression string is an expression.
    """
    if isinstance(code, bool):
        raise TypeError("a boolean is not a number")
    if isinstance(code, int):
        kind = NumberKind.POSITIVE_NUMBER if code >= 0 else NumberKind.NEGATIVE_NUMBER
        return NumberType(kind, code)
    if callable(code):
        return NumberType(NumberKind.UNKNOWN_BECAUSE_BLOCK, code())
    if not isinstance(code, str):
        raise TypeError(f"cannot classify {type(code).__name__}")

    try:
        tree = ast.parse(code.strip(), mode="eval").body
    except SyntaxError as exc:
        raise ValueError(f"not an expression: {code!r}") from exc

    if _is_int_literal(tree):
        return NumberType(NumberKind.POSITIVE_NUMBER, tree.value)
    if (
        isinstance(tree, ast.UnaryOp)
        and isinstance(tree.op, ast.USub)
        and _is_int_literal(tree.operand)
    ):
        return NumberType(NumberKind.NEGATIVE_NUMBER, -tree.operand.value)
    return NumberType(NumberKind.UNKNOWN_BECAUSE_EXPR, _evaluate(tree))


def _block() -> int:
    x = 6
    return x


def run_ambiguity_and_ordering() -> None:
    """Classify and show one number of each kind."""
    get_number_type("5").show()
    get_number_type("-5").show()
    get_number_type(_block).show()
    get_number_type("sum(1, 2, 3, 4)").show()
    get_number_type("3 + 5 - 1").show()