"""
Implementation of the spreadsheet COMPLEX() function.

Syntax: COMPLEX(real_num, i_num, [suffix])

Converts real and imaginary coefficients into the text of a complex number of the
form x+yi or x+yj.  Suffix defaults to "i"; only lowercase "i" and "j" are accepted,
anything else (including "I" and "J") gives #VALUE!.  A non-numeric coefficient also
gives #VALUE!, while an error already present in a coefficient is passed through.
"""

from typing import Sequence

from sheetfn.sheetfn_error import SheetFnEvaluationError
from sheetfn.sheetfn_evaluation_context import SheetFnEvaluationContext
from sheetfn.sheetfn_function import SheetFnFunction
from sheetfn.sheetfn_operand_resolver import get_single_value, coerce_value_to_number, coerce_value_to_string
from sheetfn.sheetfn_value import SheetFnValue, SheetFnString, SHEETFN_VALUE_INVALID, number_to_text


class SheetFnComplexFunction(SheetFnFunction):
    """The COMPLEX() function."""

    DEFAULT_SUFFIX = "i"
    SUPPORTED_SUFFIX = "j"

    def __init__(self) -> None:
        """Initialize COMPLEX, which takes two or three arguments."""
        super().__init__("COMPLEX", 2, 3)

    def evaluate_args(self, args: Sequence[SheetFnValue], context: SheetFnEvaluationContext) -> SheetFnValue:
        suffix = args[2] if len(args) > 2 else None
        return self.evaluate_complex(context, args[0], args[1], suffix)

    def _resolve_coefficient(self, arg: SheetFnValue, context: SheetFnEvaluationContext) -> float:
        """
        Resolve one coefficient argument to a number.

        Raises:
            SheetFnEvaluationError: Carrying the upstream error if resolution hit one,
                or #VALUE! if the resolved value is not numeric
        """
        value = get_single_value(arg, context)

        try:
            return coerce_value_to_number(value)

        except SheetFnEvaluationError as e:
            raise SheetFnEvaluationError(SHEETFN_VALUE_INVALID) from e

    def evaluate_complex(
        self,
        context: SheetFnEvaluationContext,
        real_num: SheetFnValue,
        i_num: SheetFnValue,
        suffix: SheetFnValue | None = None
    ) -> SheetFnValue:
        """
        Evaluate COMPLEX(real_num, i_num, suffix).

        Args:
            context: Coordinate of the evaluating cell
            real_num: Real coefficient argument
            i_num: Imaginary coefficient argument
            suffix: Suffix argument, or None if omitted

        Returns:
            SheetFnString holding the complex number text, or an error value
        """
        try:
            real = self._resolve_coefficient(real_num, context)
            imag = self._resolve_coefficient(i_num, context)

        except SheetFnEvaluationError as e:
            return e.error_value

        suffix_text = "" if suffix is None else coerce_value_to_string(suffix, context)
        if not suffix_text:
            suffix_text = self.DEFAULT_SUFFIX

        if suffix_text in (self.DEFAULT_SUFFIX.upper(), self.SUPPORTED_SUFFIX.upper()):
            return SHEETFN_VALUE_INVALID

        if suffix_text not in (self.DEFAULT_SUFFIX, self.SUPPORTED_SUFFIX):
            return SHEETFN_VALUE_INVALID

        return SheetFnString(self.format_complex(real, imag, suffix_text))

    @staticmethod
    def format_complex(real: float, imag: float, suffix: str) -> str:
        """
        Build the text of a complex number.

        A zero part is left out entirely, so 0+0i is the empty string.  A "+" is
        written only between a real part and a positive imaginary part; a negative
        imaginary part carries its own "-".  An imaginary coefficient of exactly 1 or
        -1 is written as the bare suffix, with no digits and no sign of its own, so
        both COMPLEX(0, -1) and COMPLEX(0, 1) give "i".

        Args:
            real: Real coefficient
            imag: Imaginary coefficient
            suffix: Imaginary unit, already validated

        Returns:
            Complex number text
        """
        parts = []
        if real != 0:
            parts.append(number_to_text(real))

        if imag != 0:
            if parts and imag > 0:
                parts.append("+")

            if imag not in (1, -1):
                parts.append(number_to_text(imag))

            parts.append(suffix)

        return "".join(parts)
