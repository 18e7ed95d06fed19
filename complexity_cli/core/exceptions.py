from typing import Optional


class ComplexityCLIError(Exception):
    """Base exception for all Complexity CLI errors."""

    pass


class ConfigurationError(ComplexityCLIError):
    """Raised when configuration is invalid or missing."""

    pass


class InputError(ComplexityCLIError):
    """Raised when source code cannot be read."""

    pass


class ParseError(ComplexityCLIError):
    """Raised when source code does not conform to the supported grammar."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
