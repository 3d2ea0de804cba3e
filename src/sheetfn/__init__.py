"""sheetfn (spreadsheet formula functions) package."""

# Main API
from sheetfn.sheetfn import SheetFn

# Exceptions
from sheetfn.sheetfn_error import SheetFnError, SheetFnEvaluationError

# Value types
from sheetfn.sheetfn_value import (
    SheetFnValue, SheetFnNumber, SheetFnString, SheetFnBoolean, SheetFnBlank, SheetFnErrorValue,
    SheetFnErrorCode, SheetFnRef, SheetFnArea, number_to_text,
    SHEETFN_BLANK, SHEETFN_NULL_INTERSECTION, SHEETFN_DIV_ZERO, SHEETFN_VALUE_INVALID,
    SHEETFN_REF_INVALID, SHEETFN_NAME_INVALID, SHEETFN_NUM_ERROR, SHEETFN_NA
)

# Lower-level components (for formula engines)
from sheetfn.sheetfn_evaluation_context import SheetFnEvaluationContext
from sheetfn.sheetfn_operand_resolver import (
    get_single_value, coerce_value_to_number, coerce_value_to_string, parse_number
)
from sheetfn.sheetfn_function import SheetFnFunction
from sheetfn.sheetfn_complex import SheetFnComplexFunction
from sheetfn.sheetfn_function_registry import SheetFnFunctionRegistry


__all__ = [
    # Main API
    "SheetFn",

    # Exceptions
    "SheetFnError", "SheetFnEvaluationError",

    # Value types
    "SheetFnValue", "SheetFnNumber", "SheetFnString", "SheetFnBoolean", "SheetFnBlank", "SheetFnErrorValue",
    "SheetFnErrorCode", "SheetFnRef", "SheetFnArea", "number_to_text",
    "SHEETFN_BLANK", "SHEETFN_NULL_INTERSECTION", "SHEETFN_DIV_ZERO", "SHEETFN_VALUE_INVALID",
    "SHEETFN_REF_INVALID", "SHEETFN_NAME_INVALID", "SHEETFN_NUM_ERROR", "SHEETFN_NA",

    # Lower-level components
    "SheetFnEvaluationContext",
    "get_single_value", "coerce_value_to_number", "coerce_value_to_string", "parse_number",
    "SheetFnFunction", "SheetFnComplexFunction", "SheetFnFunctionRegistry",
]
