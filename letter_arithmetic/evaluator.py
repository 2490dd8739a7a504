"""Evaluation of an expression tree into a bitmap.

The walk is pre-order, left before right. Each :class:`CharLiteral` takes
exactly one color from the strategy, so for a tree with N literals the
strategy advances N times and literal k receives the k-th color. Callers pass
a fresh strategy per top-level render; the same tree rendered with two
equal fresh strategies produces identical pixels.
"""

from dataclasses import dataclass

from letter_arithmetic.bitmap import Bitmap
from letter_arithmetic.colors import ColorStrategy
from letter_arithmetic.compositor import composite
from letter_arithmetic.expression import Expression, fold
from letter_arithmetic.fonts import FontSpec
from letter_arithmetic.rasterizer import render_glyph


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every node of one render."""

    font: FontSpec
    color_strategy: ColorStrategy


def evaluate(expression: Expression, context: RenderContext) -> Bitmap:
    return fold(
        expression,
        literal=lambda node: render_glyph(
            node.text, context.font, context.color_strategy
        ),
        paren=lambda node, inner: inner,
        binary=lambda node, left, right: composite(node.kind, left, right),
    )


def render(expression: Expression, font: FontSpec, strategy: ColorStrategy) -> Bitmap:
    """Render ``expression`` with ``font``, drawing glyph colors from ``strategy``.

    Raises:
        RasterizationError: on any font or drawing failure; the render is
            abandoned as a whole.
    """
    return evaluate(expression, RenderContext(font=font, color_strategy=strategy))
