"""Evaluation context passed to spreadsheet functions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SheetFnEvaluationContext:
    """Coordinate of the cell whose formula is being evaluated."""
    row_index: int = 0
    column_index: int = 0
