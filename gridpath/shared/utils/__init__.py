"""Shared utilities."""
from .logging_utils import setup_logging, get_context_logger, SearchLogAdapter
from .validation_utils import (
    validate_cell, validate_direction_count, validate_positive_number, validate_minimum
)

__all__ = [
    'setup_logging', 'get_context_logger', 'SearchLogAdapter',
    'validate_cell', 'validate_direction_count',
    'validate_positive_number', 'validate_minimum'
]
