from pathlib import Path

import pytest
from PIL import Image

from letter_arithmetic.__main__ import main


def test_prints_textual_forms(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["(G-H)||(J^H)", "--repr", "--pretty", "--polish"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "concat(sub('G','H'), xor('J','H'))",
        "(G - H) || (J ^ H)",
        "(|| (- G H) (^ J H))",
    ]


def test_syntax_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["A + )"]) == 2
    assert "')'" in capsys.readouterr().err


def test_writes_png(tmp_path: Path) -> None:
    output = tmp_path / "out.png"
    code = main(
        [
            "A || B",
            "-o",
            str(output),
            "--font-size",
            "40",
            "--font-family",
            "sans-serif",
            "--colors",
            "Black",
        ]
    )
    assert code == 0
    with Image.open(output) as image:
        assert image.mode == "RGBA"
        assert image.width > 0


def test_render_error_exit_code(tmp_path: Path) -> None:
    output = tmp_path / "out.png"
    code = main(["A", "-o", str(output), "--font-family", "no-such-font-family-xyz"])
    assert code == 1
    assert not output.exists()


@pytest.mark.parametrize("size", ["0", "-12", "nan", "big"])
def test_invalid_font_size_is_rejected(
    size: str, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as info:
        main(["A", "-o", "out.png", "--font-size", size])
    assert info.value.code == 2
    assert "--font-size" in capsys.readouterr().err
