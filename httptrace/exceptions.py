"""Custom exception classes for the httptrace application.

This module defines the exceptions raised by httptrace itself. Failures of
the traced HTTP call are not exceptions at this level: they are recorded on
the span and the run completes normally.
"""


class HttptraceError(Exception):
    """Base exception class for all httptrace errors.

    All custom exceptions in the application should inherit from this class.
    This allows for catching all httptrace-specific errors with a single except clause.
    """

    def __init__(self, message: str, suggestion: str = ""):
        """Initialize the exception.

        Args:
            message: The error message describing what went wrong
            suggestion: Optional suggestion for how to fix the problem
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return a formatted error message with suggestion if available."""
        if self.suggestion:
            return f"{self.message}{'.' if not self.message.endswith('.') else ''} {self.suggestion}"
        return self.message


class ConfigurationError(HttptraceError):
    """Raised when there's an error in the configuration.

    This includes invalid configuration values, missing configuration files
    or improperly formatted YAML.
    """

    pass


class ValidationError(HttptraceError):
    """Raised when input validation fails."""

    pass


class InvalidInputError(ValidationError):
    """Raised when no request descriptors are handed to the executor."""

    pass
