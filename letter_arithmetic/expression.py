"""Immutable syntax tree for letter arithmetic expressions.

An expression is one of three frozen dataclasses:

* :class:`CharLiteral` - a single grapheme, rendered as a glyph.
* :class:`Paren` - explicit grouping. Transparent when evaluated, kept so the
  pretty printer can reproduce the parentheses the user typed.
* :class:`BinaryOp` - one of the six operators applied to two operands.

Trees are values: nodes own their children and are never mutated, so a parsed
tree can be shared freely between printers and renders.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Callable, Dict, List, Tuple, TypeVar, Union


class OperatorKind(StrEnum):
    """Binary operators of the language."""

    CONCAT = auto()
    ADD = auto()
    SUB = auto()
    AND = auto()
    OR = auto()
    XOR = auto()


OPERATOR_SYMBOLS: Dict[OperatorKind, str] = {
    OperatorKind.CONCAT: "||",
    OperatorKind.ADD: "+",
    OperatorKind.SUB: "-",
    OperatorKind.AND: "&",
    OperatorKind.OR: "|",
    OperatorKind.XOR: "^",
}
"""Source spelling of each operator."""

OPERATOR_PRECEDENCE: Dict[OperatorKind, int] = {
    OperatorKind.CONCAT: 0,
    OperatorKind.ADD: 1,
    OperatorKind.SUB: 1,
    OperatorKind.XOR: 2,
    OperatorKind.AND: 3,
    OperatorKind.OR: 3,
}
"""Binding strength, higher binds tighter. All operators are left-associative."""

STRUCTURAL_SYMBOLS = frozenset("()+-&|^")


@dataclass(frozen=True)
class CharLiteral:
    text: str


@dataclass(frozen=True)
class Paren:
    inner: "Expression"


@dataclass(frozen=True)
class BinaryOp:
    kind: OperatorKind
    left: "Expression"
    right: "Expression"


Expression = Union[CharLiteral, Paren, BinaryOp]

T = TypeVar("T")


def fold(
    expression: Expression,
    literal: Callable[[CharLiteral], T],
    paren: Callable[[Paren, T], T],
    binary: Callable[[BinaryOp, T, T], T],
) -> T:
    """Reduce a tree bottom-up without recursion.

    Children are reduced left before right, so ``literal`` is called for the
    literals in source order. Trees of any depth are accepted.

    Args:
        expression: Root of the tree.
        literal: Value of a :class:`CharLiteral`.
        paren: Value of a :class:`Paren` given the value of its inner node.
        binary: Value of a :class:`BinaryOp` given the values of its operands.

    Raises:
        TypeError: if a node is not an expression.
    """
    values: List[T] = []
    stack: List[Tuple[Expression, bool]] = [(expression, False)]
    while stack:
        node, reduced = stack.pop()
        if isinstance(node, CharLiteral):
            values.append(literal(node))
        elif isinstance(node, Paren):
            if reduced:
                values.append(paren(node, values.pop()))
            else:
                stack.append((node, True))
                stack.append((node.inner, False))
        elif isinstance(node, BinaryOp):
            if reduced:
                right = values.pop()
                left = values.pop()
                values.append(binary(node, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"Not an expression: {node!r}")
    return values.pop()

