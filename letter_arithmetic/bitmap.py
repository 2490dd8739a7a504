"""Bitmap helpers.

A bitmap is a Pillow ``RGBA`` image with straight (non-premultiplied) alpha.
Every rendering step returns a freshly allocated image; inputs are never
modified.
"""

import io

from PIL import Image

Bitmap = Image.Image

TRANSPARENT = (0, 0, 0, 0)


def new_bitmap(width: int, height: int) -> Bitmap:
    """Fully transparent bitmap of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Bitmap size must be positive, got {width}x{height}")
    return Image.new("RGBA", (width, height), TRANSPARENT)


def placeholder_bitmap() -> Bitmap:
    """1x1 transparent bitmap used for characters without ink or advance."""
    return new_bitmap(1, 1)



def encode_png(bitmap: Bitmap) -> bytes:
    buffer = io.BytesIO()
    bitmap.save(buffer, format="PNG")
    return buffer.getvalue()
