"""Colors and color strategies.

A *color strategy* is an infinite iterator of colors. The renderer pulls one
color per glyph, in pre-order, via :func:`next_color`. Strategies are plain
generators / iterators so each instance carries its own cursor; restarting
means building a new instance from a factory, which is what the entries of
:data:`COLOR_STRATEGY_REGISTRY` are.

Built-in strategies:

* :func:`hsl_wheel_strategy` / :func:`lch_wheel_strategy` - rotate the hue of
  a start color by a fixed step, modulo 360. The start color comes first.
* :func:`palette_strategy` - cycle a finite list of colors.
* :func:`uniform_strategy` - the same color forever.
"""

import colorsys
import itertools
import math
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterator, Protocol, Sequence, Tuple, TypeVar

import numpy as np
from PIL import ImageColor
from pyrsistent import pvector

RGBA = Tuple[int, int, int, int]


class Color(Protocol):
    def to_rgba(self) -> RGBA: ...


def _channel(value: float) -> int:
    return int(round(min(max(value, 0.0), 1.0) * 255))


@dataclass(frozen=True)
class Rgb:
    """sRGB color, channels in ``[0, 1]``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_string(cls, value: str) -> "Rgb":
        """Build from any color string Pillow understands (``"black"``, ``"#f80"``)."""
        r, g, b, a = ImageColor.getcolor(value, "RGBA")
        return cls(r / 255, g / 255, b / 255, a / 255)

    def to_rgba(self) -> RGBA:
        return (
            _channel(self.red),
            _channel(self.green),
            _channel(self.blue),
            _channel(self.alpha),
        )


@dataclass(frozen=True)
class Hsl:
    """HSL color. ``hue`` in degrees, ``saturation`` / ``lightness`` in ``[0, 1]``."""

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def shift_hue(self, degrees: float) -> "Hsl":
        return replace(self, hue=(self.hue + degrees) % 360)

    def to_rgba(self) -> RGBA:
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360) / 360, self.lightness, self.saturation
        )
        return (_channel(r), _channel(g), _channel(b), _channel(self.alpha))


# CSS Color 4 conversion constants: Lab is relative to D50, sRGB to D65.
_D50_WHITE = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])
_D50_TO_D65 = np.array(
    [
        [0.9554734527042182, -0.023098536874261423, 0.0632593086610217],
        [-0.028369706963208136, 1.0099954580058226, 0.021041398966943008],
        [0.012314001688319899, -0.020507696433477912, 1.3303659366080753],
    ]
)
_XYZ_TO_LINEAR_SRGB = np.array(
    [
        [3.2409699419045226, -1.537383177570094, -0.4986107602930034],
        [-0.9692436362808796, 1.8759675015077202, 0.04155505740717559],
        [0.05563007969699366, -0.20397695888897652, 1.0569715142428786],
    ]
)
_KAPPA = 24389 / 27
_EPSILON = 216 / 24389


def _lab_to_xyz_d50(lightness: float, a: float, b: float) -> np.ndarray:
    fy = (lightness + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    xr = fx**3 if fx**3 > _EPSILON else (116 * fx - 16) / _KAPPA
    yr = fy**3 if lightness > _KAPPA * _EPSILON else lightness / _KAPPA
    zr = fz**3 if fz**3 > _EPSILON else (116 * fz - 16) / _KAPPA
    return np.array([xr, yr, zr]) * _D50_WHITE


def _gamma_encode(linear: np.ndarray) -> np.ndarray:
    magnitude = np.abs(linear)
    encoded = np.where(
        magnitude <= 0.0031308,
        12.92 * magnitude,
        1.055 * np.power(magnitude, 1 / 2.4) - 0.055,
    )
    return np.sign(linear) * encoded


@dataclass(frozen=True)
class Lch:
    """CIE LCH color (CSS ``lch()``): lightness 0-100, chroma, hue in degrees.

    Converted to sRGB through Lab (D50) and XYZ; out-of-gamut channels are
    clipped.
    """

    lightness: float
    chroma: float
    hue: float
    alpha: float = 1.0

    def shift_hue(self, degrees: float) -> "Lch":
        return replace(self, hue=(self.hue + degrees) % 360)

    def to_rgba(self) -> RGBA:
        radians = math.radians(self.hue)
        a = self.chroma * math.cos(radians)
        b = self.chroma * math.sin(radians)
        xyz_d65 = _D50_TO_D65 @ _lab_to_xyz_d50(self.lightness, a, b)
        r, g, b = _gamma_encode(_XYZ_TO_LINEAR_SRGB @ xyz_d65)
        return (
            _channel(float(r)),
            _channel(float(g)),
            _channel(float(b)),
            _channel(self.alpha),
        )


ColorStrategy = Iterator[Color]
ColorStrategyFactory = Callable[[], ColorStrategy]

HueColor = TypeVar("HueColor", Hsl, Lch)


def _hue_wheel(start: HueColor, step: float) -> Iterator[HueColor]:
    # Leaf k gets (start + k * step) mod 360, not an accumulated sum.
    for k in itertools.count():
        yield start.shift_hue(k * step)


def hsl_wheel_strategy(start: Hsl, step: float) -> ColorStrategy:
    """Rotate hue in HSL space by ``step`` degrees per color."""
    return _hue_wheel(start, step)


def lch_wheel_strategy(start: Lch, step: float) -> ColorStrategy:
    """Rotate hue in perceptual LCH space by ``step`` degrees per color."""
    return _hue_wheel(start, step)


def palette_strategy(palette: Sequence[Color]) -> ColorStrategy:
    """Repeat ``palette`` indefinitely.

    The palette is copied when the strategy is built; later changes to the
    caller's sequence do not affect it.
    """
    colors = pvector(palette)
    if len(colors) == 0:
        raise ValueError("Palette must contain at least one color")
    return itertools.cycle(colors)


def uniform_strategy(color: Color) -> ColorStrategy:
    """Yield ``color`` forever."""
    return itertools.repeat(color)


def default_color_strategy() -> ColorStrategy:
    return hsl_wheel_strategy(Hsl(0.0, 1.0, 0.60), 70.0)


def next_color(strategy: ColorStrategy) -> Color:
    """Return the strategy's current color and advance it."""
    try:
        return next(strategy)
    except StopIteration:
        raise ValueError("Color strategy is exhausted") from None


COLOR_STRATEGY_REGISTRY: Dict[str, ColorStrategyFactory] = {
    "Default": default_color_strategy,
    "Black": lambda: uniform_strategy(Rgb.from_string("black")),
    "Pastel": lambda: lch_wheel_strategy(Lch(75, 70, 0), 95),
    "Rainbow": lambda: lch_wheel_strategy(Lch(60, 70, 0), 10),
    "Glass": lambda: lch_wheel_strategy(Lch(60, 70, 0, alpha=0.5), 95),
}
"""Named strategy factories, in display order.

Each call to a factory returns a fresh strategy in its initial state.
"""

DEFAULT_COLOR_STRATEGY = "Default"
