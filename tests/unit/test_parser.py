import pytest

from letter_arithmetic.exceptions import ExpressionSyntaxError
from letter_arithmetic.expression import BinaryOp, CharLiteral, OperatorKind, Paren
from letter_arithmetic.parser import MatchResult, parse

A, B, C = CharLiteral("A"), CharLiteral("B"), CharLiteral("C")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A", A),
        ("A || B", BinaryOp(OperatorKind.CONCAT, A, B)),
        ("A + B", BinaryOp(OperatorKind.ADD, A, B)),
        ("A - B", BinaryOp(OperatorKind.SUB, A, B)),
        ("A & B", BinaryOp(OperatorKind.AND, A, B)),
        ("A | B", BinaryOp(OperatorKind.OR, A, B)),
        ("A ^ B", BinaryOp(OperatorKind.XOR, A, B)),
        # concat binds loosest
        (
            "A + B || C",
            BinaryOp(OperatorKind.CONCAT, BinaryOp(OperatorKind.ADD, A, B), C),
        ),
        # add/sub looser than xor
        ("A + B ^ C", BinaryOp(OperatorKind.ADD, A, BinaryOp(OperatorKind.XOR, B, C))),
        # xor looser than and/or
        ("A ^ B & C", BinaryOp(OperatorKind.XOR, A, BinaryOp(OperatorKind.AND, B, C))),
        ("A | B ^ C", BinaryOp(OperatorKind.XOR, BinaryOp(OperatorKind.OR, A, B), C)),
        # left associativity within a tier
        ("A - B - C", BinaryOp(OperatorKind.SUB, BinaryOp(OperatorKind.SUB, A, B), C)),
        ("A - B + C", BinaryOp(OperatorKind.ADD, BinaryOp(OperatorKind.SUB, A, B), C)),
        ("A & B | C", BinaryOp(OperatorKind.OR, BinaryOp(OperatorKind.AND, A, B), C)),
        # parentheses override
        (
            "A - (B - C)",
            BinaryOp(OperatorKind.SUB, A, Paren(BinaryOp(OperatorKind.SUB, B, C))),
        ),
        ("((A))", Paren(Paren(A))),
    ],
)
def test_parse_precedence_and_grouping(text: str, expected: object) -> None:
    result = parse(text)
    assert result.succeeded()
    assert result.expression == expected


def test_whitespace_is_insignificant() -> None:
    assert parse("  A+\tB\n").expression == parse("A + B").expression


def test_double_bar_is_concat_single_bar_is_or() -> None:
    assert parse("A||B").expression == BinaryOp(OperatorKind.CONCAT, A, B)
    assert parse("A|B").expression == BinaryOp(OperatorKind.OR, A, B)


@pytest.mark.parametrize(
    "literal",
    [
        "\u00e9",
        "e\u0301",
        "\u5b57",
        "8",
        "\U0001f44d\U0001f3fd",
        "*",
        "=",
        # regional indicator flag
        "\U0001f1ef\U0001f1f5",
        # devanagari consonant with spacing vowel sign
        "\u0915\u093f",
        # hangul leading consonant and vowel jamo
        "\u1100\u1161",
        # zero width joiner family
        "\U0001f468\u200d\U0001f469\u200d\U0001f467",
    ],
)
def test_single_grapheme_literals(literal: str) -> None:
    result = parse(f"{literal} + A")
    assert result.expression == BinaryOp(OperatorKind.ADD, CharLiteral(literal), A)


def test_stray_closing_paren_is_reported() -> None:
    result = parse("A + )")
    assert result.failed()
    assert result.expression is None
    assert result.failure is not None
    assert result.failure.offset == 4
    assert result.failure.column == 5
    assert "')'" in result.message


@pytest.mark.parametrize(
    "text, offset",
    [
        ("", 0),
        ("A B", 2),
        ("(A", 2),
        ("A ++ B", 3),
        ("A +", 3),
        (")", 0),
        ("AB", 1),
        ("e\u0301B", 2),
    ],
)
def test_failure_offsets(text: str, offset: int) -> None:
    result = parse(text)
    assert result.failed()
    assert result.failure is not None
    assert result.failure.offset == offset
    assert result.message


def test_unexpected_end_of_input_is_named() -> None:
    result = parse("(A")
    assert "end of input" in result.message


def test_failure_lists_expected_tokens() -> None:
    result = parse("A + )")
    assert result.failure is not None
    assert "'('" in result.failure.expected
    assert "a character" in result.failure.expected


def test_unwrap_raises_syntax_error_on_failure() -> None:
    with pytest.raises(ExpressionSyntaxError) as info:
        parse("A + )").unwrap()
    assert info.value.offset == 4


def test_unwrap_returns_tree_on_success() -> None:
    assert parse("A").unwrap() == A
    assert parse("A").message == ""


def test_unwrap_of_empty_result_raises() -> None:
    with pytest.raises(ValueError, match="neither an expression nor a failure"):
        MatchResult(source="").unwrap()
