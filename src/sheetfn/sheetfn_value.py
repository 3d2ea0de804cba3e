"""sheetfn Value hierarchy - immutable cell value types.

These are the tagged values a formula engine passes into and receives back from
spreadsheet functions: numbers, text, booleans, blanks, error codes, and references
to a single cell or to a rectangular area of cells.
"""

from abc import ABC, abstractmethod
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from sheetfn.sheetfn_error import SheetFnError


class SheetFnErrorCode(Enum):
    """Spreadsheet error codes, valued by their display text."""
    NULL_INTERSECTION = "#NULL!"
    DIV_ZERO = "#DIV/0!"
    VALUE_INVALID = "#VALUE!"
    REF_INVALID = "#REF!"
    NAME_INVALID = "#NAME?"
    NUM_ERROR = "#NUM!"
    NA = "#N/A"

    @classmethod
    def from_text(cls, text: str) -> 'SheetFnErrorCode | None':
        """Look up an error code by its display text, or None if it isn't one."""
        for code in cls:
            if code.value == text:
                return code

        return None


@dataclass(frozen=True)
class SheetFnValue(ABC):
    """
    Abstract base class for all sheetfn values.

    All values are immutable.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python value."""

    @abstractmethod
    def type_name(self) -> str:
        """Return the value's type name for error messages."""

    @abstractmethod
    def describe(self) -> str:
        """Return the text a spreadsheet would display for this value."""


def number_to_text(value: float) -> str:
    """
    Render a number the way cell text shows it.

    Finite whole numbers render as exact integer digits with no decimal point.
    Everything else uses Python's shortest round-trip float text.

    Args:
        value: Number to render

    Returns:
        Text form of the number
    """
    if math.isfinite(value) and value == math.floor(value):
        return str(int(value))

    return repr(value)


@dataclass(frozen=True)
class SheetFnNumber(SheetFnValue):
    """Represents numeric cell values (always IEEE 754 doubles)."""
    value: float

    def to_python(self) -> float:
        return self.value

    def type_name(self) -> str:
        return "number"

    def describe(self) -> str:
        return number_to_text(float(self.value))


@dataclass(frozen=True)
class SheetFnString(SheetFnValue):
    """Represents text cell values."""
    value: str

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "text"

    def describe(self) -> str:
        return self.value


@dataclass(frozen=True)
class SheetFnBoolean(SheetFnValue):
    """Represents boolean cell values."""
    value: bool

    def to_python(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "boolean"

    def describe(self) -> str:
        return "TRUE" if self.value else "FALSE"


@dataclass(frozen=True)
class SheetFnBlank(SheetFnValue):
    """Represents an empty cell or an omitted argument."""

    def to_python(self) -> None:
        return None

    def type_name(self) -> str:
        return "blank"

    def describe(self) -> str:
        return ""


# Module-level singleton - there is only one blank value.
SHEETFN_BLANK = SheetFnBlank()


@dataclass(frozen=True)
class SheetFnErrorValue(SheetFnValue):
    """Represents a spreadsheet error such as #VALUE! or #DIV/0!."""
    code: SheetFnErrorCode

    def to_python(self) -> str:
        return self.code.value

    def type_name(self) -> str:
        return "error"

    def describe(self) -> str:
        return self.code.value


SHEETFN_NULL_INTERSECTION = SheetFnErrorValue(SheetFnErrorCode.NULL_INTERSECTION)
SHEETFN_DIV_ZERO = SheetFnErrorValue(SheetFnErrorCode.DIV_ZERO)
SHEETFN_VALUE_INVALID = SheetFnErrorValue(SheetFnErrorCode.VALUE_INVALID)
SHEETFN_REF_INVALID = SheetFnErrorValue(SheetFnErrorCode.REF_INVALID)
SHEETFN_NAME_INVALID = SheetFnErrorValue(SheetFnErrorCode.NAME_INVALID)
SHEETFN_NUM_ERROR = SheetFnErrorValue(SheetFnErrorCode.NUM_ERROR)
SHEETFN_NA = SheetFnErrorValue(SheetFnErrorCode.NA)


@dataclass(frozen=True)
class SheetFnRef(SheetFnValue):
    """
    Represents a reference to a single cell.

    The referenced cell has already been evaluated by the host engine; the reference
    just carries that value together with the cell's coordinate.
    """
    value: SheetFnValue
    row_index: int = 0
    column_index: int = 0

    def to_python(self) -> Any:
        return self.value.to_python()

    def type_name(self) -> str:
        return "reference"

    def describe(self) -> str:
        return self.value.describe()


@dataclass(frozen=True)
class SheetFnArea(SheetFnValue):
    """
    Represents a rectangular range of cells.

    Cells are held row-major as a tuple of row tuples.  The area is anchored at
    (first_row, first_column) so that implicit intersection can relate it to the
    coordinate of the evaluating cell.
    """
    cells: Tuple[Tuple[SheetFnValue, ...], ...]
    first_row: int = 0
    first_column: int = 0

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise SheetFnError(
                "Area must contain at least one cell",
                received="an empty area",
                expected="one or more rows, each with one or more cells"
            )

        width = len(self.cells[0])
        for row in self.cells:
            if len(row) != width:
                raise SheetFnError(
                    "Area rows must all have the same length",
                    received=f"rows of lengths {[len(r) for r in self.cells]}",
                    expected=f"every row to have {width} cells"
                )

    def to_python(self) -> List[List[Any]]:
        """Convert to a Python list of row lists."""
        return [[cell.to_python() for cell in row] for row in self.cells]

    def type_name(self) -> str:
        return "area"

    def describe(self) -> str:
        return f"<area {self.height}x{self.width} at R{self.first_row}C{self.first_column}>"

    @property
    def height(self) -> int:
        """Number of rows in the area."""
        return len(self.cells)

    @property
    def width(self) -> int:
        """Number of columns in the area."""
        return len(self.cells[0])

    @property
    def last_row(self) -> int:
        """Absolute index of the bottom row."""
        return self.first_row + self.height - 1

    @property
    def last_column(self) -> int:
        """Absolute index of the rightmost column."""
        return self.first_column + self.width - 1

    def get_absolute(self, row_index: int, column_index: int) -> SheetFnValue:
        """Get the cell at an absolute sheet coordinate (raises IndexError if outside the area)."""
        if not (self.first_row <= row_index <= self.last_row and self.first_column <= column_index <= self.last_column):
            raise IndexError(f"Cell R{row_index}C{column_index} is outside the area")

        return self.cells[row_index - self.first_row][column_index - self.first_column]
