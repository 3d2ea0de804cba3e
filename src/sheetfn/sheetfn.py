"""Main sheetfn class: call spreadsheet functions by name from Python."""

import logging
from typing import Any

from sheetfn.sheetfn_error import SheetFnError
from sheetfn.sheetfn_evaluation_context import SheetFnEvaluationContext
from sheetfn.sheetfn_function_registry import SheetFnFunctionRegistry
from sheetfn.sheetfn_value import (
    SheetFnValue, SheetFnNumber, SheetFnString, SheetFnBoolean, SheetFnArea,
    SHEETFN_BLANK, SHEETFN_NAME_INVALID
)


class SheetFn:
    """
    Evaluates spreadsheet functions outside a full formula engine.

    Arguments may be given as sheetfn values or as plain Python values, which are
    converted with to_value().  Spreadsheet errors come back as SheetFnErrorValue
    results rather than being raised.
    """

    def __init__(self, registry: SheetFnFunctionRegistry | None = None) -> None:
        """
        Initialize the evaluator.

        Args:
            registry: Function registry to use; a default one is created if omitted
        """
        self._registry = registry or SheetFnFunctionRegistry()
        self._logger = logging.getLogger("SheetFn")

    @property
    def registry(self) -> SheetFnFunctionRegistry:
        """The function registry used for name lookup."""
        return self._registry

    @staticmethod
    def to_value(value: Any) -> SheetFnValue:
        """
        Convert a Python value to a sheetfn value.

        None becomes blank, bool becomes boolean, int and float become numbers, str
        becomes text and a list of row lists becomes an area anchored at R0C0.
        sheetfn values are returned unchanged.

        Raises:
            SheetFnError: If the value has no spreadsheet equivalent
        """
        if isinstance(value, SheetFnValue):
            return value

        if value is None:
            return SHEETFN_BLANK

        # bool must be checked before int
        if isinstance(value, bool):
            return SheetFnBoolean(value)

        if isinstance(value, (int, float)):
            try:
                return SheetFnNumber(float(value))

            except OverflowError as e:
                raise SheetFnError(
                    "Integer is too large for a spreadsheet number",
                    received=f"int of {value.bit_length()} bits",
                    expected="a value within the range of a 64-bit float"
                ) from e

        if isinstance(value, str):
            return SheetFnString(value)

        if isinstance(value, list) and value and all(isinstance(row, list) for row in value):
            return SheetFnArea(tuple(tuple(SheetFn.to_value(cell) for cell in row) for row in value))

        raise SheetFnError(
            f"Cannot convert {type(value).__name__} to a spreadsheet value",
            received=repr(value),
            expected="None, bool, int, float, str, a list of row lists, or a SheetFnValue",
            example="sheetfn.call('COMPLEX', 3, 4, 'j')"
        )

    def call(self, name: str, *args: Any, row: int = 0, column: int = 0) -> SheetFnValue:
        """
        Call a spreadsheet function.

        Args:
            name: Function name, case-insensitive
            args: Function arguments
            row: Row index of the evaluating cell
            column: Column index of the evaluating cell

        Returns:
            The function result, #NAME? for an unknown function, or another error value

        Raises:
            SheetFnError: If an argument cannot be converted to a spreadsheet value
        """
        function = self._registry.get_function(name)
        if function is None:
            self._logger.debug("Unknown function name: %s", name)
            return SHEETFN_NAME_INVALID

        values = [self.to_value(arg) for arg in args]
        context = SheetFnEvaluationContext(row_index=row, column_index=column)

        self._logger.debug("Evaluating %s with %d arguments at R%dC%d", function.name, len(values), row, column)
        return function.evaluate(values, context)

    def call_and_format(self, name: str, *args: Any, row: int = 0, column: int = 0) -> str:
        """
        Call a spreadsheet function and return the text a cell would display.

        Raises:
            SheetFnError: If an argument cannot be converted to a spreadsheet value
        """
        return self.call(name, *args, row=row, column=column).describe()
