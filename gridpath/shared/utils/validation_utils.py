"""Validation utilities for gridpath."""
import numbers
from typing import Tuple, Any

from ..exceptions import ValidationError, InvalidPositionError

DIRECTION_COUNTS = (4, 8)


def validate_cell(cell: Tuple[int, int], shape: Tuple[int, int], name: str = "cell") -> None:
    """Validate that a (row, col) pair lies inside a grid of the given shape.
    
    Args:
        cell: (row, col) coordinates
        shape: (rows, cols) grid extents
        name: Name used in error messages (e.g. "start", "goal")
        
    Raises:
        InvalidPositionError: If the coordinates are not integers or out of bounds
    """
    row, col = cell
    if not isinstance(row, numbers.Integral) or not isinstance(col, numbers.Integral):
        raise InvalidPositionError(
            f"{name} coordinates must be integers, got ({row!r}, {col!r})",
            field=name, position=(row, col)
        )
    
    rows, cols = shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise InvalidPositionError(
            f"{name} ({row}, {col}) out of bounds for {rows}x{cols} grid",
            field=name, position=(row, col)
        )


def validate_direction_count(direction_count: Any) -> None:
    """Validate neighbour directionality.
    
    Raises:
        ValidationError: If direction count is not 4 or 8
    """
    if direction_count not in DIRECTION_COUNTS:
        raise ValidationError(
            f"Direction count must be 4 or 8, got {direction_count}",
            field="direction_count", value=direction_count
        )


def validate_positive_number(value: Any, field_name: str) -> None:
    """Validate that a value is a positive number.
    
    Args:
        value: Value to validate
        field_name: Name of field for error reporting
        
    Raises:
        ValidationError: If value is not a positive number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field_name} must be numeric, got {type(value)}",
            field=field_name, value=value
        )
    
    if value <= 0:
        raise ValidationError(
            f"{field_name} must be positive, got {value}",
            field=field_name, value=value
        )


def validate_minimum(value: Any, field_name: str, min_val: float) -> None:
    """Validate that a value is a number no smaller than min_val.
    
    Raises:
        ValidationError: If value is not numeric or below the minimum
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field_name} must be numeric, got {type(value)}",
            field=field_name, value=value
        )
    
    if value < min_val:
        raise ValidationError(
            f"{field_name} must be at least {min_val}, got {value}",
            field=field_name, value=value
        )
