"""Glyph rasterizer: one character to one tightly sized, colored bitmap."""

import logging
import math

import numpy as np
from PIL import Image, ImageDraw

from letter_arithmetic.bitmap import Bitmap, placeholder_bitmap
from letter_arithmetic.colors import RGBA, ColorStrategy, next_color
from letter_arithmetic.exceptions import RasterizationError
from letter_arithmetic.fonts import FontSpec, load_font

logger = logging.getLogger(__name__)


def colorize_mask(mask: Image.Image, rgba: RGBA) -> Bitmap:
    """Fill ``rgba`` through an ``L`` coverage mask, scaling alpha by coverage."""
    coverage = np.asarray(mask, dtype=np.uint16)
    red, green, blue, alpha = rgba
    out = np.empty(coverage.shape + (4,), dtype=np.uint8)
    out[..., 0] = red
    out[..., 1] = green
    out[..., 2] = blue
    out[..., 3] = ((coverage * alpha + 127) // 255).astype(np.uint8)
    return Image.fromarray(out)


def render_glyph(character: str, font: FontSpec, strategy: ColorStrategy) -> Bitmap:
    """Render ``character`` with the next color from ``strategy``.

    The bitmap is ``ceil(advance)`` wide and ``ascent + descent`` high, with the
    baseline at ``ascent``. Exactly one color is taken from ``strategy`` per
    call, including for characters that produce the 1x1 transparent
    placeholder (whitespace or zero advance).

    Raises:
        RasterizationError: if the font cannot be loaded or drawing fails.
    """
    color = next_color(strategy)
    typeface = load_font(font)
    try:
        ascent, descent = typeface.getmetrics()
        width = math.ceil(typeface.getlength(character))
        height = ascent + descent
        if not character.strip() or width <= 0 or height <= 0:
            logger.debug("glyph %r has no extent, using placeholder", character)
            return placeholder_bitmap()

        mask = Image.new("L", (width, height), 0)
        ImageDraw.Draw(mask).text(
            (0, ascent), character, fill=255, font=typeface, anchor="ls"
        )
    except (OSError, ValueError) as error:
        raise RasterizationError(
            f"Failed to rasterize {character!r}: {error}"
        ) from error

    rgba = color.to_rgba()
    logger.debug("glyph %r %dx%d color=%s", character, width, height, rgba)
    return colorize_mask(mask, rgba)
