"""Grammar and parser for letter arithmetic.

Operators, loosest to tightest, all left-associative::

    ||          concat
    +  -        add, subtract
    ^           xor
    &  |        and, or

Parentheses override precedence. A literal is any single grapheme other than
whitespace and the structural symbols ``( ) + - & | ^``. Whitespace between
tokens is ignored.

:func:`parse` never raises for malformed input. It returns a
:class:`MatchResult` that either holds the complete tree or a
:class:`ParseFailure` describing the first offending position.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from letter_arithmetic.exceptions import ExpressionSyntaxError
from letter_arithmetic.expression import (
    BinaryOp,
    CharLiteral,
    Expression,
    OperatorKind,
    Paren,
)

logger = logging.getLogger(__name__)

GRAMMAR = r"""
?start: concat_expr

?concat_expr: concat_expr "||" sum_expr   -> concat
            | sum_expr

?sum_expr: sum_expr "+" xor_expr          -> add
         | sum_expr "-" xor_expr          -> sub
         | xor_expr

?xor_expr: xor_expr "^" bit_expr          -> xor
         | bit_expr

?bit_expr: bit_expr "&" atom              -> and_
         | bit_expr "|" atom              -> or_
         | atom

?atom: "(" concat_expr ")"                -> paren
     | CHAR                               -> char

// One extended grapheme cluster not starting with whitespace or a symbol.
CHAR: /(?![\s()+\-&|^])\X/

%ignore /\s+/
"""

SYNTAX_REFERENCE = """\
|| concat
+  add
-  subtract
&  and
|  or
^  xor
() parentheses
any unicode character
"""


@v_args(inline=True)
class ExpressionBuilder(Transformer):
    """Turns parse tree callbacks into :mod:`letter_arithmetic.expression` nodes."""

    def char(self, token: Token) -> CharLiteral:
        return CharLiteral(str(token))

    def paren(self, inner: Expression) -> Paren:
        return Paren(inner)

    def concat(self, left: Expression, right: Expression) -> BinaryOp:
        return BinaryOp(OperatorKind.CONCAT, left, right)

    def add(self, left: Expression, right: Expression) -> BinaryOp:
        return BinaryOp(OperatorKind.ADD, left, right)

    def sub(self, left: Expression, right: Expression) -> BinaryOp:
        return BinaryOp(OperatorKind.SUB, left, right)

    def xor(self, left: Expression, right: Expression) -> BinaryOp:
        return BinaryOp(OperatorKind.XOR, left, right)

    def and_(self, left: Expression, right: Expression) -> BinaryOp:
        return BinaryOp(OperatorKind.AND, left, right)

    def or_(self, left: Expression, right: Expression) -> BinaryOp:
        return BinaryOp(OperatorKind.OR, left, right)


_PARSER = Lark(
    GRAMMAR, parser="lalr", regex=True, transformer=ExpressionBuilder()
)


@dataclass(frozen=True)
class ParseFailure:
    """Diagnostic for input rejected by the grammar.

    Attributes:
        message: Human readable description, e.g.
            ``Line 1, col 5: unexpected ')'; expected '(' or a character``.
        offset: Zero-based offset of the first offending character.
        line: One-based line of ``offset``.
        column: One-based column of ``offset``.
        expected: Descriptions of tokens that would have been accepted.
    """

    message: str
    offset: int
    line: int
    column: int
    expected: Tuple[str, ...] = ()

    def to_exception(self) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(
            self.message, self.offset, self.line, self.column, self.expected
        )


@dataclass(frozen=True)
class MatchResult:
    """Outcome of :func:`parse`: exactly one of ``expression`` / ``failure`` is set."""

    source: str
    expression: Optional[Expression] = None
    failure: Optional[ParseFailure] = None

    def succeeded(self) -> bool:
        return self.expression is not None

    def failed(self) -> bool:
        return self.failure is not None

    @property
    def message(self) -> str:
        """Failure message, or an empty string on success."""
        return self.failure.message if self.failure is not None else ""

    def unwrap(self) -> Expression:
        """Return the tree or raise :class:`ExpressionSyntaxError`."""
        if self.failure is not None:
            raise self.failure.to_exception()
        if self.expression is None:
            raise ValueError("MatchResult holds neither an expression nor a failure")
        return self.expression


def _describe_terminal(name: str) -> str:
    if name == "CHAR":
        return "a character"
    if name == "$END":
        return "end of input"
    try:
        terminal = _PARSER.get_terminal(name)
    except KeyError:
        return name
    return repr(terminal.pattern.value)


def _describe_expected(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted({_describe_terminal(name) for name in names}))


def _line_and_column(text: str, offset: int) -> Tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _failure_from_error(text: str, error: UnexpectedInput) -> ParseFailure:
    if isinstance(error, UnexpectedToken):
        if error.token.type == "$END":
            offset, found = len(text), "end of input"
        else:
            offset, found = error.token.start_pos, repr(str(error.token))
        expected = _describe_expected(error.expected)
    elif isinstance(error, UnexpectedCharacters):
        offset, found = error.pos_in_stream, repr(error.char)
        expected = _describe_expected(error.allowed or ())
    elif isinstance(error, UnexpectedEOF):
        offset, found = len(text), "end of input"
        expected = _describe_expected(error.expected)
    else:
        offset, found, expected = len(text), "input", ()

    line, column = _line_and_column(text, offset)
    message = f"Line {line}, col {column}: unexpected {found}"
    if expected:
        message += f"; expected {' or '.join(expected)}"
    return ParseFailure(message, offset, line, column, expected)


def parse(text: str) -> MatchResult:
    """Parse ``text`` into an :data:`Expression`.

    Returns:
        MatchResult: the full tree on success; on failure a
        :class:`ParseFailure` for the first offending position and no tree.
    """
    try:
        expression = _PARSER.parse(text)
    except UnexpectedInput as error:
        failure = _failure_from_error(text, error)
        logger.debug("parse failed at offset %d: %s", failure.offset, failure.message)
        return MatchResult(source=text, failure=failure)
    return MatchResult(source=text, expression=expression)
