"""Configured rendering from source text.

:class:`ExpressionRenderer` bundles a font and a color strategy factory, and
builds a fresh strategy for every render so results depend only on the input.
"""

from dataclasses import dataclass
from typing import Optional

from letter_arithmetic.bitmap import Bitmap
from letter_arithmetic.colors import (
    COLOR_STRATEGY_REGISTRY,
    ColorStrategyFactory,
    default_color_strategy,
)
from letter_arithmetic.evaluator import render
from letter_arithmetic.expression import Expression
from letter_arithmetic.fonts import FontSpec, make_font_spec
from letter_arithmetic.parser import MatchResult, parse

DEFAULT_FONT_SIZE = 300
DEFAULT_FONT_FAMILY = "roboto, sans-serif"
DEFAULT_EXPRESSION = "A + B || 8 & 0 || G - K"


@dataclass(frozen=True)
class RenderResult:
    """Parse outcome plus the bitmap, which is ``None`` when parsing failed."""

    match: MatchResult
    bitmap: Optional[Bitmap] = None

    def succeeded(self) -> bool:
        return self.bitmap is not None


class ExpressionRenderer:
    font_size: float
    font_family: str
    color_strategy: ColorStrategyFactory

    def __init__(
        self,
        font_size: float = DEFAULT_FONT_SIZE,
        font_family: str = DEFAULT_FONT_FAMILY,
        color_strategy: Optional[ColorStrategyFactory] = None,
    ):
        if font_size <= 0:
            raise ValueError(f"Font size must be positive, got {font_size}")
        self.font_size = font_size
        self.font_family = font_family
        self.color_strategy = color_strategy or default_color_strategy

    @classmethod
    def from_strategy_name(
        cls,
        name: str,
        font_size: float = DEFAULT_FONT_SIZE,
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> "ExpressionRenderer":
        """Build with a strategy from :data:`COLOR_STRATEGY_REGISTRY`.

        Raises:
            KeyError: if ``name`` is not registered.
        """
        return cls(font_size, font_family, COLOR_STRATEGY_REGISTRY[name])

    @property
    def font_spec(self) -> FontSpec:
        return make_font_spec(self.font_size, self.font_family)

    def render(self, expression: Expression) -> Bitmap:
        return render(expression, self.font_spec, self.color_strategy())

    def render_text(self, text: str) -> RenderResult:
        """Parse and render ``text``. Nothing is rendered if parsing fails."""
        match = parse(text)
        if match.expression is None:
            return RenderResult(match=match)
        return RenderResult(match=match, bitmap=self.render(match.expression))
