import pytest
from PIL import ImageFont

from letter_arithmetic.exceptions import RasterizationError
from letter_arithmetic.fonts import load_font, make_font_spec, parse_font_spec


def test_parse_font_spec() -> None:
    parsed = parse_font_spec("300px roboto, 'Noto Sans', sans-serif")
    assert parsed.size == 300
    assert parsed.families == ("roboto", "Noto Sans", "sans-serif")


def test_make_font_spec() -> None:
    assert make_font_spec(300, "roboto") == "300px roboto"
    assert make_font_spec(12.5, "serif") == "12.5px serif"


@pytest.mark.parametrize("spec", ["", "roboto", "12 roboto", "px roboto", "0px serif"])
def test_malformed_spec(spec: str) -> None:
    with pytest.raises(RasterizationError):
        parse_font_spec(spec)


def test_generic_family_loads_builtin_font() -> None:
    font = load_font("40px sans-serif")
    assert isinstance(font, ImageFont.FreeTypeFont)
    assert font.size == 40


def test_unknown_family_falls_back() -> None:
    font = load_font("40px no-such-font-family-xyz, sans-serif")
    assert isinstance(font, ImageFont.FreeTypeFont)


def test_no_usable_family() -> None:
    with pytest.raises(RasterizationError):
        load_font("40px no-such-font-family-xyz")
