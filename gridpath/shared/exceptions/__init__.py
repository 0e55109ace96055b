"""Shared exceptions for gridpath."""
from .base_exceptions import (
    GridPathException, ConfigurationError, ValidationError, SearchError
)
from .domain_exceptions import (
    GridError, InvalidPositionError, MapLoadError, SearchStateError
)

__all__ = [
    'GridPathException', 'ConfigurationError', 'ValidationError', 'SearchError',
    'GridError', 'InvalidPositionError', 'MapLoadError', 'SearchStateError'
]
