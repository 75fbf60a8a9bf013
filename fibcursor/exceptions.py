"""Custom exceptions for fibcursor."""


class FibCursorException(Exception):
    """Base exception for fibcursor."""
    pass


class CursorAccessError(FibCursorException):
    """Exception raised when the shared cursor cannot be accessed."""
    pass


class CursorPoisonedError(CursorAccessError):
    """Exception raised when a previous operation left the shared cursor in an unknown state."""
    pass
