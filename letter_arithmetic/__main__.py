"""Command line: ``python -m letter_arithmetic "A + B || C" -o out.png``."""

import argparse
import logging
import sys
from typing import List, Optional

from letter_arithmetic.bitmap import encode_png
from letter_arithmetic.colors import COLOR_STRATEGY_REGISTRY, DEFAULT_COLOR_STRATEGY
from letter_arithmetic.exceptions import RasterizationError
from letter_arithmetic.parser import parse
from letter_arithmetic.printer import polish, pretty, repr_expression
from letter_arithmetic.renderer import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    ExpressionRenderer,
)


def positive_size(value: str) -> float:
    try:
        size = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not size > 0:
        raise argparse.ArgumentTypeError(f"font size must be positive, got {value}")
    return size


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="letter_arithmetic",
        description="Render an arithmetic-of-letters expression to PNG.",
    )
    p.add_argument("expression", help="Expression, e.g. 'A + B || 8 & 0'.")
    p.add_argument("-o", "--output", help="Path to write the PNG image.")
    p.add_argument(
        "--font-size",
        type=positive_size,
        default=DEFAULT_FONT_SIZE,
        help="Font size in px.",
    )
    p.add_argument(
        "--font-family",
        default=DEFAULT_FONT_FAMILY,
        help="Comma separated font families, tried in order.",
    )
    p.add_argument(
        "--colors",
        choices=list(COLOR_STRATEGY_REGISTRY),
        default=DEFAULT_COLOR_STRATEGY,
        help="Color strategy.",
    )
    p.add_argument("--repr", action="store_true", help="Print the call form.")
    p.add_argument("--pretty", action="store_true", help="Print the infix form.")
    p.add_argument("--polish", action="store_true", help="Print the prefix form.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match = parse(args.expression)
    if match.expression is None:
        print(f"Syntax error: {match.message}", file=sys.stderr)
        return 2
    tree = match.expression

    if args.repr:
        print(repr_expression(tree))
    if args.pretty:
        print(pretty(tree))
    if args.polish:
        print(polish(tree))

    if args.output:
        renderer = ExpressionRenderer.from_strategy_name(
            args.colors, font_size=args.font_size, font_family=args.font_family
        )
        try:
            bitmap = renderer.render(tree)
        except RasterizationError as e:
            print(f"Render error: {e}", file=sys.stderr)
            return 1
        with open(args.output, "wb") as f:
            f.write(encode_png(bitmap))
        print(f"{bitmap.width}x{bitmap.height} -> {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
