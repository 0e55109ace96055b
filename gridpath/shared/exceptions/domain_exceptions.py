"""Domain-specific exceptions."""
from .base_exceptions import (
    GridPathException, ConfigurationError, ValidationError, SearchError
)


class GridError(ConfigurationError):
    """Exception raised when a grid cannot be built from the given cells."""
    
    def __init__(self, message: str, grid_shape: tuple = None, **kwargs):
        """Initialize grid error.
        
        Args:
            message: Error message
            grid_shape: Shape of the offending cell array, if known
        """
        super().__init__(message, **kwargs)
        self.grid_shape = grid_shape


class InvalidPositionError(ValidationError):
    """Exception raised for start or goal cells that cannot be searched from or to."""
    
    def __init__(self, message: str, position: tuple = None, **kwargs):
        """Initialize position error.
        
        Args:
            message: Error message
            position: Offending (row, col) position
        """
        kwargs.setdefault('value', position)
        super().__init__(message, **kwargs)
        self.position = position


class MapLoadError(GridPathException):
    """Exception raised when map loading fails."""
    
    def __init__(self, message: str, file_path: str = None, **kwargs):
        """Initialize map load error.
        
        Args:
            message: Error message
            file_path: Path to map file that failed to load
        """
        super().__init__(message, **kwargs)
        self.file_path = file_path


class SearchStateError(SearchError):
    """Exception raised when a search engine is asked to run a second time."""
    pass
