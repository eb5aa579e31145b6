"""
Exceptions for textpager.

The layout core is total over valid input; errors surface only from
degenerate page geometry and from the rendering backends.
"""

from typing import Optional, Any, Dict


class TextPagerError(Exception):
    """
    Base exception for textpager errors.

    Carries an optional causing exception and a details dictionary so
    callers can report what went wrong without parsing the message.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message
            cause: Causing exception
            details: Additional details
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def get_error_info(self) -> Dict[str, Any]:
        """
        Get error information.

        Returns:
            Dictionary with error information
        """
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'cause': str(self.cause) if self.cause else None,
            'details': self.details,
        }

    def __str__(self) -> str:
        """String representation of exception."""
        return f"{self.__class__.__name__}: {self.message}"


class GeometryError(TextPagerError):
    """Raised for page geometry that leaves no content area."""


class RenderingError(TextPagerError):
    """
    Exception for rendering-related errors.

    Raised by renderers when the output backend or the filesystem fails.
    """

    def __init__(self, message: str, output_path: Optional[str] = None,
                 cause: Optional[Exception] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize rendering error.

        Args:
            message: Error message
            output_path: Output file that could not be produced
            cause: Causing exception
            details: Additional details
        """
        super().__init__(message, cause, details)
        self.output_path = output_path

    def get_error_info(self) -> Dict[str, Any]:
        info = super().get_error_info()
        info['output_path'] = self.output_path
        return info
