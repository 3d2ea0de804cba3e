"""
Operand resolution and coercion for spreadsheet function arguments.

Functions receive their arguments exactly as the formula engine produced them:
possibly references, possibly whole areas, possibly text that merely looks like a
number.  The helpers here reduce an argument to a single cell value and coerce
that value to the type the function actually needs.
"""

import re

from sheetfn.sheetfn_error import SheetFnEvaluationError
from sheetfn.sheetfn_evaluation_context import SheetFnEvaluationContext
from sheetfn.sheetfn_value import (
    SheetFnValue, SheetFnNumber, SheetFnString, SheetFnBoolean, SheetFnBlank, SheetFnErrorValue,
    SheetFnRef, SheetFnArea, SHEETFN_VALUE_INVALID, number_to_text
)


# Plain decimal numbers only: no inf/nan, hex, digit separators or thousands commas
_NUMBER_PATTERN = re.compile(r'\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*', re.ASCII)


def parse_number(text: str) -> float | None:
    """
    Parse cell text as a number.

    Args:
        text: Text to parse

    Returns:
        The parsed number, or None if the text is not a plain decimal number
    """
    if not _NUMBER_PATTERN.fullmatch(text):
        return None

    return float(text)


def _choose_single_element_from_area(area: SheetFnArea, context: SheetFnEvaluationContext) -> SheetFnValue:
    """
    Pick one cell out of an area by implicit intersection.

    A single cell area yields that cell.  A single column yields the cell on the
    evaluating row and a single row yields the cell on the evaluating column,
    provided the coordinate falls inside the area.

    Raises:
        SheetFnEvaluationError: With #VALUE! if no single cell can be chosen
    """
    if area.height == 1 and area.width == 1:
        return area.cells[0][0]

    if area.width == 1 and area.first_row <= context.row_index <= area.last_row:
        return area.get_absolute(context.row_index, area.first_column)

    if area.height == 1 and area.first_column <= context.column_index <= area.last_column:
        return area.get_absolute(area.first_row, context.column_index)

    raise SheetFnEvaluationError(SHEETFN_VALUE_INVALID)


def get_single_value(arg: SheetFnValue, context: SheetFnEvaluationContext) -> SheetFnValue:
    """
    Resolve an argument to a single scalar cell value.

    Args:
        arg: Argument as supplied by the formula engine
        context: Coordinate of the evaluating cell

    Returns:
        A scalar value (never a reference, area or error)

    Raises:
        SheetFnEvaluationError: If the argument cannot be reduced to one cell, or if
            the chosen cell holds an error (the error is carried unchanged)
    """
    if isinstance(arg, SheetFnRef):
        result = arg.value

    elif isinstance(arg, SheetFnArea):
        result = _choose_single_element_from_area(arg, context)

    else:
        result = arg

    # A reference may point at a cell whose own value is a reference
    if isinstance(result, (SheetFnRef, SheetFnArea)):
        return get_single_value(result, context)

    if isinstance(result, SheetFnErrorValue):
        raise SheetFnEvaluationError(result)

    return result


def coerce_value_to_number(value: SheetFnValue) -> float:
    """
    Coerce a scalar value to a number.

    Args:
        value: Scalar value, usually the result of get_single_value()

    Returns:
        The numeric value (blank is 0, TRUE is 1, FALSE is 0)

    Raises:
        SheetFnEvaluationError: With #VALUE! for non-numeric text or unsupported values,
            or with the value itself if it is an error
    """
    if isinstance(value, SheetFnNumber):
        return float(value.value)

    if isinstance(value, SheetFnBoolean):
        return 1.0 if value.value else 0.0

    if isinstance(value, SheetFnBlank):
        return 0.0

    if isinstance(value, SheetFnString):
        number = parse_number(value.value)
        if number is None:
            raise SheetFnEvaluationError(SHEETFN_VALUE_INVALID)

        return number

    if isinstance(value, SheetFnErrorValue):
        raise SheetFnEvaluationError(value)

    raise SheetFnEvaluationError(SHEETFN_VALUE_INVALID)


def coerce_value_to_string(value: SheetFnValue, context: SheetFnEvaluationContext | None = None) -> str:
    """
    Coerce a value to text.  This never fails: every value has some text form.

    Args:
        value: Value to coerce
        context: Coordinate used to resolve references and areas

    Returns:
        Text form of the value; an error (including one hit while resolving a
        reference) becomes its error text
    """
    if isinstance(value, SheetFnString):
        return value.value

    if isinstance(value, SheetFnNumber):
        return number_to_text(float(value.value))

    if isinstance(value, (SheetFnRef, SheetFnArea)):
        try:
            scalar = get_single_value(value, context or SheetFnEvaluationContext())

        except SheetFnEvaluationError as e:
            return e.error_value.describe()

        return coerce_value_to_string(scalar, context)

    return value.describe()
