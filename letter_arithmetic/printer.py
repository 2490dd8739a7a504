"""Textual projections of an expression tree.

* :func:`repr_expression` - canonical call form, ``add(sub('G','H'), 'J')``.
* :func:`pretty` - infix source form that parses back to the same tree.
* :func:`polish` - prefix form, ``(+ (- G H) J)``.

All three are pure functions of the tree shape.
"""

from letter_arithmetic.expression import (
    OPERATOR_PRECEDENCE,
    OPERATOR_SYMBOLS,
    BinaryOp,
    CharLiteral,
    Expression,
    Paren,
    fold,
)


def repr_expression(expression: Expression) -> str:
    """Canonical call form. Parentheses are transparent.

    Operands are separated by ``","`` when both are literals and by ``", "``
    otherwise: ``concat(sub('G','H'), xor('J','H'))``.
    """

    def binary(node: BinaryOp, left: str, right: str) -> str:
        both_literals = isinstance(_unwrap(node.left), CharLiteral) and isinstance(
            _unwrap(node.right), CharLiteral
        )
        separator = "," if both_literals else ", "
        return f"{node.kind.value}({left}{separator}{right})"

    return fold(
        expression,
        literal=lambda node: f"'{node.text}'",
        paren=lambda node, inner: inner,
        binary=binary,
    )


def pretty(expression: Expression) -> str:
    """Infix form with single spaces around operators.

    Explicit :class:`Paren` nodes are always printed. Parentheses are also
    inserted around an operand that would otherwise re-associate: a left
    operand binding looser than its parent, or a right operand binding looser
    or equally loose. ``parse(pretty(tree))`` therefore equals ``tree`` up to
    redundant parentheses.
    """

    def binary(node: BinaryOp, left: str, right: str) -> str:
        precedence = OPERATOR_PRECEDENCE[node.kind]
        if _binds_looser(node.left, precedence, strict=True):
            left = f"({left})"
        if _binds_looser(node.right, precedence, strict=False):
            right = f"({right})"
        return f"{left} {OPERATOR_SYMBOLS[node.kind]} {right}"

    return fold(
        expression,
        literal=lambda node: node.text,
        paren=lambda node, inner: f"({inner})",
        binary=binary,
    )


def polish(expression: Expression) -> str:
    """Prefix (Polish) notation, ``(|| (+ A B) C)``. Parentheses are transparent."""
    return fold(
        expression,
        literal=lambda node: node.text,
        paren=lambda node, inner: inner,
        binary=lambda node, left, right: (
            f"({OPERATOR_SYMBOLS[node.kind]} {left} {right})"
        ),
    )


def _unwrap(expression: Expression) -> Expression:
    while isinstance(expression, Paren):
        expression = expression.inner
    return expression


def _binds_looser(operand: Expression, precedence: int, strict: bool) -> bool:
    if not isinstance(operand, BinaryOp):
        return False
    operand_precedence = OPERATOR_PRECEDENCE[operand.kind]
    if strict:
        return operand_precedence < precedence
    return operand_precedence <= precedence
