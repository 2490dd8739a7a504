import itertools
from typing import List

import pytest

from letter_arithmetic.colors import (
    COLOR_STRATEGY_REGISTRY,
    Color,
    Hsl,
    Lch,
    Rgb,
    default_color_strategy,
    hsl_wheel_strategy,
    lch_wheel_strategy,
    next_color,
    palette_strategy,
    uniform_strategy,
)


def take(strategy, n: int) -> List[Color]:
    return [next_color(strategy) for _ in range(n)]


def test_hsl_wheel_starts_at_base_and_rotates() -> None:
    colors = take(hsl_wheel_strategy(Hsl(10.0, 1.0, 0.5), 70.0), 7)
    assert [c.hue for c in colors] == [(10 + k * 70) % 360 for k in range(7)]


def test_lch_wheel_wraps_modulo_360() -> None:
    colors = take(lch_wheel_strategy(Lch(60, 70, 350), 20), 3)
    assert [c.hue for c in colors] == [350, 10, 30]
    assert all(c.lightness == 60 and c.chroma == 70 for c in colors)


def test_default_strategy() -> None:
    first, second, third = take(default_color_strategy(), 3)
    assert first == Hsl(0.0, 1.0, 0.60)
    assert second.hue == 70.0
    assert third.hue == 140.0


def test_palette_cycles_in_order() -> None:
    red, green, blue = Rgb(1, 0, 0), Rgb(0, 1, 0), Rgb(0, 0, 1)
    assert take(palette_strategy([red, green, blue]), 7) == [
        red,
        green,
        blue,
        red,
        green,
        blue,
        red,
    ]


def test_palette_is_copied() -> None:
    palette: List[Color] = [Rgb(1, 0, 0)]
    strategy = palette_strategy(palette)
    palette.append(Rgb(0, 0, 1))
    assert take(strategy, 3) == [Rgb(1, 0, 0)] * 3


def test_empty_palette_is_rejected() -> None:
    with pytest.raises(ValueError):
        palette_strategy([])


def test_uniform_repeats_forever() -> None:
    black = Rgb(0, 0, 0)
    assert take(uniform_strategy(black), 5) == [black] * 5


def test_next_color_on_exhausted_strategy() -> None:
    with pytest.raises(ValueError):
        next_color(iter([]))


def test_strategies_are_independent() -> None:
    first = default_color_strategy()
    second = default_color_strategy()
    take(first, 3)
    assert next_color(second) == Hsl(0.0, 1.0, 0.60)


@pytest.mark.parametrize("name", list(COLOR_STRATEGY_REGISTRY))
def test_registry_factories_restart(name: str) -> None:
    factory = COLOR_STRATEGY_REGISTRY[name]
    first_run = take(factory(), 4)
    second_run = take(factory(), 4)
    assert first_run == second_run


def test_registry_order() -> None:
    assert list(COLOR_STRATEGY_REGISTRY) == [
        "Default",
        "Black",
        "Pastel",
        "Rainbow",
        "Glass",
    ]


@pytest.mark.parametrize(
    "color, expected",
    [
        (Rgb(1, 0, 0), (255, 0, 0, 255)),
        (Rgb.from_string("black"), (0, 0, 0, 255)),
        (Rgb.from_string("#ff8000"), (255, 128, 0, 255)),
        (Hsl(0, 1, 0.5), (255, 0, 0, 255)),
        (Hsl(120, 1, 0.5), (0, 255, 0, 255)),
        (Hsl(240, 1, 0.5, alpha=0.5), (0, 0, 255, 128)),
        (Lch(0, 0, 0), (0, 0, 0, 255)),
    ],
)
def test_to_rgba(color: Color, expected: tuple) -> None:
    assert color.to_rgba() == expected


def test_lch_white_and_alpha() -> None:
    r, g, b, a = Lch(100, 0, 0, alpha=0.5).to_rgba()
    assert all(abs(channel - 255) <= 1 for channel in (r, g, b))
    assert a == 128


def test_lch_hue_changes_color() -> None:
    colors = {Lch(60, 70, hue).to_rgba() for hue in range(0, 360, 90)}
    assert len(colors) == 4


def test_glass_is_translucent() -> None:
    color = next_color(COLOR_STRATEGY_REGISTRY["Glass"]())
    assert color.to_rgba()[3] == 128


def test_hue_wheel_is_infinite() -> None:
    strategy = hsl_wheel_strategy(Hsl(0, 1, 0.5), 1)
    last = list(itertools.islice(strategy, 1000))[-1]
    assert last.hue == 999 % 360
