"""
Function registry for sheetfn.

Maps the function names used in formulas to their implementations.
"""

import logging
from typing import Dict, List

from sheetfn.sheetfn_complex import SheetFnComplexFunction
from sheetfn.sheetfn_function import SheetFnFunction


class SheetFnFunctionRegistry:
    """Central registry of spreadsheet functions, keyed by uppercase name."""

    # Authoritative list of function names; every entry must have an implementation
    FUNCTION_TABLE = [
        'COMPLEX',
    ]

    def __init__(self) -> None:
        """Initialize the registry and build the name lookup table."""
        self._logger = logging.getLogger("SheetFnFunctionRegistry")
        self._functions: Dict[str, SheetFnFunction] = self._build_function_table()

    def _build_function_table(self) -> Dict[str, SheetFnFunction]:
        """
        Build the name to function mapping in FUNCTION_TABLE order.

        Returns:
            Dictionary mapping uppercase function names to implementations
        """
        implementations: Dict[str, SheetFnFunction] = {}
        for function in (SheetFnComplexFunction(),):
            implementations[function.name] = function

        functions: Dict[str, SheetFnFunction] = {}
        for name in self.FUNCTION_TABLE:
            if name not in implementations:
                raise RuntimeError(f"Function '{name}' in FUNCTION_TABLE but not implemented")

            functions[name] = implementations[name]

        self._logger.debug("Registered %d spreadsheet functions", len(functions))
        return functions

    def get_function(self, name: str) -> SheetFnFunction | None:
        """
        Look up a function by name, ignoring case.

        Args:
            name: Function name as written in a formula

        Returns:
            The function, or None if no function has that name
        """
        return self._functions.get(name.upper())

    def names(self) -> List[str]:
        """Return all registered function names in table order."""
        return list(self._functions)
