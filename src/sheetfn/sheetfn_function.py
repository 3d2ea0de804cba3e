"""Base class for spreadsheet functions."""

from abc import ABC, abstractmethod
import logging
from typing import Sequence

from sheetfn.sheetfn_evaluation_context import SheetFnEvaluationContext
from sheetfn.sheetfn_value import SheetFnValue, SHEETFN_VALUE_INVALID


class SheetFnFunction(ABC):
    """
    A spreadsheet function that accepts between min_args and max_args arguments.

    The formula engine calls evaluate() with the raw argument values.  Calls with
    the wrong number of arguments are answered with #VALUE! before the function's
    own logic runs.
    """

    def __init__(self, name: str, min_args: int, max_args: int) -> None:
        """
        Initialize the function.

        Args:
            name: Function name as written in formulas
            min_args: Minimum number of arguments accepted
            max_args: Maximum number of arguments accepted
        """
        self.name = name
        self.min_args = min_args
        self.max_args = max_args
        self._logger = logging.getLogger(type(self).__name__)

    def accepts_arg_count(self, arg_count: int) -> bool:
        """Check whether a call with arg_count arguments is valid."""
        return self.min_args <= arg_count <= self.max_args

    def evaluate(self, args: Sequence[SheetFnValue], context: SheetFnEvaluationContext) -> SheetFnValue:
        """
        Evaluate the function for a formula call.

        Args:
            args: Argument values in call order
            context: Coordinate of the evaluating cell

        Returns:
            The function result, or an error value
        """
        if not self.accepts_arg_count(len(args)):
            self._logger.debug(
                "%s called with %d arguments, expected %d to %d",
                self.name, len(args), self.min_args, self.max_args
            )
            return SHEETFN_VALUE_INVALID

        return self.evaluate_args(args, context)

    @abstractmethod
    def evaluate_args(self, args: Sequence[SheetFnValue], context: SheetFnEvaluationContext) -> SheetFnValue:
        """Evaluate the function once the argument count has been checked."""
