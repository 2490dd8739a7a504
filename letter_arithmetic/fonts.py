"""Font specifications and font loading.

A :data:`FontSpec` is a CSS-like string, ``"<size>px <family>[, <family>...]"``
such as ``"300px roboto, sans-serif"``. Families are tried in order: generic
families (``sans-serif``, ``serif``, ``monospace``, ``system-ui``, ``default``)
resolve to Pillow's built-in scalable font, any other name is looked up as a
TrueType / OpenType file through :func:`PIL.ImageFont.truetype`.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from PIL import ImageFont

from letter_arithmetic.exceptions import RasterizationError

FontSpec = str

GENERIC_FAMILIES = frozenset(
    {"sans-serif", "serif", "monospace", "system-ui", "default"}
)

_FONT_SPEC_PATTERN = re.compile(
    r"^\s*(?P<size>\d+(?:\.\d+)?)px\s+(?P<families>\S.*?)\s*$"
)


@dataclass(frozen=True)
class ParsedFontSpec:
    size: float
    families: Tuple[str, ...]


def make_font_spec(size: float, family: str) -> FontSpec:
    return f"{size:g}px {family}"


def parse_font_spec(spec: FontSpec) -> ParsedFontSpec:
    match = _FONT_SPEC_PATTERN.match(spec)
    if match is None:
        raise RasterizationError(
            f"Malformed font spec {spec!r}, expected '<size>px <family>'"
        )
    size = float(match.group("size"))
    if size <= 0:
        raise RasterizationError(f"Font size must be positive in {spec!r}")
    families = tuple(
        family.strip().strip("'\"")
        for family in match.group("families").split(",")
        if family.strip().strip("'\"")
    )
    return ParsedFontSpec(size=size, families=families)


def _load_family(family: str, size: float) -> Optional[ImageFont.FreeTypeFont]:
    if family.lower() in GENERIC_FAMILIES:
        try:
            font = ImageFont.load_default(size=size)
        except OSError:
            return None
        return font if isinstance(font, ImageFont.FreeTypeFont) else None

    for candidate in (family, f"{family}.ttf", f"{family}.otf"):
        try:
            return ImageFont.truetype(candidate, size=size)
        except OSError:
            continue
    return None


@lru_cache(maxsize=64)
def load_font(spec: FontSpec) -> ImageFont.FreeTypeFont:
    """Resolve ``spec`` to the first loadable family.

    Raises:
        RasterizationError: if the spec is malformed or no family can be loaded.
    """
    parsed = parse_font_spec(spec)
    for family in parsed.families:
        font = _load_family(family, parsed.size)
        if font is not None:
            return font
    raise RasterizationError(f"No usable font for {spec!r}")
