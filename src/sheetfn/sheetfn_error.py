"""Exception classes for sheetfn (spreadsheet formula functions)."""

from typing import Any


class SheetFnError(Exception):
    """
    Raised when the sheetfn API is misused from Python.

    Examples are a Python value with no spreadsheet equivalent or a ragged area.
    Spreadsheet-level failures such as #VALUE! are never raised; they are returned
    as error values.
    """

    def __init__(
        self,
        message: str,
        received: str | None = None,
        expected: str | None = None,
        example: str | None = None
    ):
        """
        Initialize the error.

        Args:
            message: What went wrong
            received: Description of the offending value
            expected: What would have been accepted
            example: A correct call
        """
        self.message = message
        self.received = received
        self.expected = expected
        self.example = example

        details = [message]
        if received:
            details.append(f"got {received}")

        if expected:
            details.append(f"expected {expected}")

        if example:
            details.append(f"e.g. {example}")

        super().__init__("; ".join(details))


class SheetFnEvaluationError(Exception):
    """
    Raised while resolving or coercing an operand.

    Carries the spreadsheet error value that the failing step produced.  Function
    implementations catch this and turn it into a returned error value, so it never
    escapes a function call.
    """

    def __init__(self, error_value: Any):
        """
        Initialize evaluation error.

        Args:
            error_value: The SheetFnErrorValue describing the failure
        """
        self.error_value = error_value
        super().__init__(error_value.describe())
