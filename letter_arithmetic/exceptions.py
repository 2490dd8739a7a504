"""Error taxonomy.

Two families of failure exist:

* :class:`ExpressionSyntaxError` for input that does not match the grammar.
  Parsing never raises it directly; :func:`letter_arithmetic.parser.parse`
  returns a :class:`~letter_arithmetic.parser.MatchResult` and callers opt into
  the exception with ``MatchResult.unwrap()``.
* :class:`RasterizationError` for font / drawing backend failures. These
  abort the whole render; no placeholder glyph is substituted.
"""

from typing import Tuple


class LetterArithmeticError(Exception):
    """Base class for all errors raised by this package."""


class ExpressionSyntaxError(LetterArithmeticError, ValueError):
    """Input text is not a well-formed expression.

    Attributes:
        message: Human readable diagnostic.
        offset: Zero-based character offset of the first offending token.
        line: One-based line of ``offset``.
        column: One-based column of ``offset``.
        expected: Descriptions of the tokens that would have been accepted.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        line: int = 1,
        column: int = 1,
        expected: Tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = expected


class RasterizationError(LetterArithmeticError):
    """Font resolution, measurement or drawing failed."""
