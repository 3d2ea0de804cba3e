"""Command-line entry point for evaluating sheetfn spreadsheet functions."""

import argparse
import logging
import sys
from typing import List

from sheetfn.sheetfn import SheetFn
from sheetfn.sheetfn_operand_resolver import parse_number
from sheetfn.sheetfn_value import (
    SheetFnValue, SheetFnNumber, SheetFnString, SheetFnBoolean, SheetFnErrorValue, SheetFnErrorCode,
    SHEETFN_BLANK
)


def parse_cell_literal(text: str) -> SheetFnValue:
    """
    Read a command-line argument as a cell value.

    An empty argument is blank, TRUE and FALSE are booleans, error texts such as #N/A
    are errors, plain decimal numbers are numbers and anything else is text.
    """
    if text == "":
        return SHEETFN_BLANK

    if text.upper() in ("TRUE", "FALSE"):
        return SheetFnBoolean(text.upper() == "TRUE")

    code = SheetFnErrorCode.from_text(text.upper())
    if code is not None:
        return SheetFnErrorValue(code)

    number = parse_number(text)
    if number is not None:
        return SheetFnNumber(number)

    return SheetFnString(text)


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the sheetfn CLI."""
    parser = argparse.ArgumentParser(
        prog='sheetfn',
        description='Evaluate a spreadsheet function',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build a complex number
  sheetfn COMPLEX 3 4            -> 3+4i

  # Use j as the imaginary unit
  sheetfn COMPLEX 3 4 j          -> 3+4j

  # Uppercase suffixes are rejected
  sheetfn COMPLEX 3 4 J          -> #VALUE!

  # Negative numbers and exponents are arguments, not options
  sheetfn COMPLEX 1 -1e3         -> 1-1000i
"""
    )
    parser.add_argument(
        'function',
        help='Function name (case-insensitive)'
    )
    parser.add_argument(
        'args',
        nargs=argparse.REMAINDER,
        help='Function arguments as cell literals ("" is a blank cell); options must come before FUNCTION'
    )
    parser.add_argument(
        '--row',
        type=int,
        default=0,
        help='Row index of the evaluating cell (default: 0)'
    )
    parser.add_argument(
        '--column',
        type=int,
        default=0,
        help='Column index of the evaluating cell (default: 0)'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level, logs go to stderr (default: WARNING)'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    values = [parse_cell_literal(arg) for arg in args.args]
    result = SheetFn().call(args.function, *values, row=args.row, column=args.column)
    print(result.describe())

    return 1 if isinstance(result, SheetFnErrorValue) else 0


if __name__ == '__main__':
    sys.exit(main())
