"""fibcursor - Shared Fibonacci sequence cursor."""

from .cursor import SequenceCursor
from .access import SharedCursor
from .exceptions import FibCursorException, CursorAccessError, CursorPoisonedError

__version__ = "0.1.0"
__all__ = [
    "SequenceCursor",
    "SharedCursor",
    "FibCursorException",
    "CursorAccessError",
    "CursorPoisonedError",
]
