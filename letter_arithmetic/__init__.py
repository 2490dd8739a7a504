"""Arithmetic of letters.

Expressions combine characters with six binary operators and render to a
single image::

    >>> from letter_arithmetic import parse, render, repr_expression
    >>> tree = parse("(G - H) || (J ^ H)").unwrap()
    >>> repr_expression(tree)
    "concat(sub('G','H'), xor('J','H'))"

Entry points:

* :func:`parse` - source text to :class:`MatchResult`.
* :func:`render` - tree, font spec and color strategy to a Pillow image.
* :func:`repr_expression`, :func:`pretty`, :func:`polish` - textual forms.
"""

from letter_arithmetic.colors import (
    COLOR_STRATEGY_REGISTRY,
    ColorStrategy,
    Hsl,
    Lch,
    Rgb,
    hsl_wheel_strategy,
    lch_wheel_strategy,
    next_color,
    palette_strategy,
    uniform_strategy,
)
from letter_arithmetic.evaluator import render
from letter_arithmetic.exceptions import (
    ExpressionSyntaxError,
    LetterArithmeticError,
    RasterizationError,
)
from letter_arithmetic.expression import (
    BinaryOp,
    CharLiteral,
    Expression,
    OperatorKind,
    Paren,
)
from letter_arithmetic.parser import MatchResult, ParseFailure, parse
from letter_arithmetic.printer import polish, pretty, repr_expression
from letter_arithmetic.renderer import ExpressionRenderer, RenderResult

__all__ = [
    "COLOR_STRATEGY_REGISTRY",
    "BinaryOp",
    "CharLiteral",
    "ColorStrategy",
    "Expression",
    "ExpressionRenderer",
    "ExpressionSyntaxError",
    "Hsl",
    "Lch",
    "LetterArithmeticError",
    "MatchResult",
    "OperatorKind",
    "Paren",
    "ParseFailure",
    "RasterizationError",
    "RenderResult",
    "Rgb",
    "hsl_wheel_strategy",
    "lch_wheel_strategy",
    "next_color",
    "palette_strategy",
    "parse",
    "polish",
    "pretty",
    "render",
    "repr_expression",
    "uniform_strategy",
]
