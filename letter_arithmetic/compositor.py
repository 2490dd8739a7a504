"""Combining two bitmaps according to an operator.

``||`` is layout: operands side by side, each centered vertically in the
taller height. All other operators are Porter-Duff compositing on a shared
canvas of ``max(width) x max(height)``, with both operands centered on it.
The left operand is the destination (drawn first), the right operand the
source.

========  ================  =================================
Operator  Blend mode        Effect on coverage
========  ================  =================================
``+``     source-over       union, right painted over left
``|``     source-over       union (alias of ``+``)
``-``     destination-out   left minus right
``&``     source-in         intersection, right's color
``^``     xor               symmetric difference
========  ================  =================================

Centering offsets are ``(outer - inner) // 2`` everywhere.
"""

import logging
from enum import StrEnum
from typing import Callable, Dict, Tuple

import numpy as np
from PIL import Image

from letter_arithmetic.bitmap import Bitmap, new_bitmap
from letter_arithmetic.expression import OperatorKind

logger = logging.getLogger(__name__)

FloatArray = np.ndarray


class BlendMode(StrEnum):
    SOURCE_OVER = "source-over"
    DESTINATION_OUT = "destination-out"
    SOURCE_IN = "source-in"
    XOR = "xor"


OPERATOR_BLEND_MODES: Dict[OperatorKind, BlendMode] = {
    OperatorKind.ADD: BlendMode.SOURCE_OVER,
    OperatorKind.OR: BlendMode.SOURCE_OVER,
    OperatorKind.SUB: BlendMode.DESTINATION_OUT,
    OperatorKind.AND: BlendMode.SOURCE_IN,
    OperatorKind.XOR: BlendMode.XOR,
}

# (source alpha, destination alpha) -> (source factor, destination factor)
PorterDuffFactors = Callable[[FloatArray, FloatArray], Tuple[FloatArray, FloatArray]]

_PORTER_DUFF: Dict[BlendMode, PorterDuffFactors] = {
    BlendMode.SOURCE_OVER: lambda sa, da: (np.ones_like(sa), 1.0 - sa),
    BlendMode.DESTINATION_OUT: lambda sa, da: (np.zeros_like(sa), 1.0 - sa),
    BlendMode.SOURCE_IN: lambda sa, da: (da, np.zeros_like(da)),
    BlendMode.XOR: lambda sa, da: (1.0 - da, 1.0 - sa),
}


def _premultiplied(bitmap: Bitmap) -> Tuple[FloatArray, FloatArray]:
    pixels = np.asarray(bitmap, dtype=np.float32) / 255.0
    alpha = pixels[..., 3:4]
    return pixels[..., :3] * alpha, alpha


def blend(destination: Bitmap, source: Bitmap, mode: BlendMode) -> Bitmap:
    """Porter-Duff ``source`` onto ``destination``; both must have the same size."""
    if destination.size != source.size:
        raise ValueError(
            f"Cannot blend {source.size} onto {destination.size}: sizes differ"
        )
    dst_color, dst_alpha = _premultiplied(destination)
    src_color, src_alpha = _premultiplied(source)
    fa, fb = _PORTER_DUFF[mode](src_alpha, dst_alpha)

    out_alpha = src_alpha * fa + dst_alpha * fb
    out_color = src_color * fa + dst_color * fb
    visible = out_alpha > 0.0
    straight = np.where(visible, out_color / np.where(visible, out_alpha, 1.0), 0.0)

    out = np.concatenate([straight, out_alpha], axis=-1)
    return Image.fromarray(np.rint(np.clip(out, 0.0, 1.0) * 255.0).astype(np.uint8))


def centered_on(bitmap: Bitmap, width: int, height: int) -> Bitmap:
    """Copy ``bitmap`` onto a new transparent ``width x height`` canvas, centered."""
    canvas = new_bitmap(width, height)
    canvas.paste(bitmap, ((width - bitmap.width) // 2, (height - bitmap.height) // 2))
    return canvas


def concat(a: Bitmap, b: Bitmap) -> Bitmap:
    """Place ``b`` to the right of ``a``."""
    width = a.width + b.width
    height = max(a.height, b.height)
    canvas = new_bitmap(width, height)
    canvas.paste(a, (0, (height - a.height) // 2))
    canvas.paste(b, (a.width, (height - b.height) // 2))
    return canvas


def composite(kind: OperatorKind, a: Bitmap, b: Bitmap) -> Bitmap:
    """Combine ``a`` (left operand) and ``b`` (right operand) with ``kind``.

    Neither input is modified; the result is a new bitmap.
    """
    if kind is OperatorKind.CONCAT:
        result = concat(a, b)
    else:
        width = max(a.width, b.width)
        height = max(a.height, b.height)
        result = blend(
            centered_on(a, width, height),
            centered_on(b, width, height),
            OPERATOR_BLEND_MODES[kind],
        )
    logger.debug("composite %s -> %dx%d", kind, result.width, result.height)
    return result
