"""Project-wide custom exception types."""
from __future__ import annotations

from typing import Iterable, List


class ColumnNotFoundError(KeyError):
    """Raised when an operation names a column the table does not have."""

    def __init__(self, column: str, available: Iterable[str] = ()) -> None:
        self.column = column
        self.available: List[str] = [str(c) for c in available]
        super().__init__(column)

    def __str__(self) -> str:  # KeyError would repr() the key otherwise
        return f"Column '{self.column}' not found. Available columns: {self.available}"


class EmptyDistributionError(ValueError):
    """Raised when a category count has nothing to plot."""

    def __init__(self, message: str = "Category counts are empty or sum to zero") -> None:
        super().__init__(message)


class AmbiguousColumnError(ValueError):
    """Raised when a column name cannot be derived from the column's entries."""

    def __init__(self, column: str, values: Iterable[str]) -> None:
        self.column = column
        self.values: List[str] = list(values)
        super().__init__(
            f"Column '{column}' does not hold exactly one distinct non-empty value: {self.values}"
        )


class PaletteTooSmallWarning(UserWarning):
    """Emitted when a palette has fewer colors than the chart has segments."""
