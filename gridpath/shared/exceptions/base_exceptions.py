"""Base exceptions for gridpath."""


class GridPathException(Exception):
    """Base exception class for gridpath."""
    
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        """Initialize exception.
        
        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            details: Optional additional error details
        """
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
    
    def __str__(self) -> str:
        """Return string representation of exception."""
        base_msg = super().__str__()
        if self.error_code:
            return f"[{self.error_code}] {base_msg}"
        return base_msg


class ConfigurationError(GridPathException):
    """Exception raised for configuration-related errors."""
    pass


class ValidationError(GridPathException):
    """Exception raised for validation errors."""
    
    def __init__(self, message: str, field: str = None, value=None, **kwargs):
        """Initialize validation error.
        
        Args:
            message: Error message
            field: Field that failed validation
            value: Invalid value
        """
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class SearchError(GridPathException):
    """Exception raised when a search cannot be carried out."""
    
    def __init__(self, message: str, algorithm_name: str = None, **kwargs):
        """Initialize search error.
        
        Args:
            message: Error message
            algorithm_name: Name of the algorithm involved
        """
        super().__init__(message, **kwargs)
        self.algorithm_name = algorithm_name
