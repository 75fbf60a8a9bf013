"""Serialized access to the one shared sequence cursor."""

import logging
import threading
from typing import Callable, Optional

from .cursor import SequenceCursor
from .exceptions import CursorAccessError, CursorPoisonedError

logger = logging.getLogger(__name__)


class SharedCursor:
    """Lock-guarded handle to a single ``SequenceCursor``.

    Every operation, including ``peek``, holds the lock for its whole
    duration. Results are returned as exact base-10 text.

    If an operation raises while the lock is held, the cursor state can no
    longer be trusted. The handle is then marked poisoned and every later
    call raises ``CursorPoisonedError``.
    """

    def __init__(
        self,
        cursor: Optional[SequenceCursor] = None,
        lock_timeout: Optional[float] = None
    ):
        """Initialize shared cursor.

        Args:
            cursor: Cursor to share (default: a fresh ``SequenceCursor``)
            lock_timeout: Seconds to wait for the lock (default: wait forever)
        """
        self.lock_timeout = lock_timeout

        self._cursor = cursor if cursor is not None else SequenceCursor()
        self._lock = threading.Lock()
        self._poisoned = False

    def advance(self) -> str:
        """Advance the shared cursor.

        Returns:
            str: New current term

        Raises:
            CursorAccessError: If the lock cannot be acquired
            CursorPoisonedError: If the shared state is poisoned
        """
        return self._run("advance", self._cursor.advance)

    def retreat(self) -> str:
        """Retreat the shared cursor.

        Returns:
            str: New current term

        Raises:
            CursorAccessError: If the lock cannot be acquired
            CursorPoisonedError: If the shared state is poisoned
        """
        return self._run("retreat", self._cursor.retreat)

    def peek(self) -> str:
        """Read the shared cursor's current term.

        Returns:
            str: Current term

        Raises:
            CursorAccessError: If the lock cannot be acquired
            CursorPoisonedError: If the shared state is poisoned
        """
        return self._run("peek", self._cursor.peek)

    @property
    def poisoned(self) -> bool:
        """Whether a failed operation has poisoned the shared state."""
        return self._poisoned

    def _run(self, name: str, operation: Callable[[], int]) -> str:
        timeout = -1 if self.lock_timeout is None else self.lock_timeout
        if not self._lock.acquire(timeout=timeout):
            raise CursorAccessError(f"Timed out acquiring cursor lock for {name} after {self.lock_timeout}s")

        try:
            if self._poisoned:
                raise CursorPoisonedError(f"Cannot {name}: shared cursor is poisoned")

            try:
                value = operation()
            except Exception as e:
                self._poisoned = True
                logger.error(f"Cursor {name} failed, shared cursor is now poisoned: {e}")
                raise CursorPoisonedError(f"Cursor {name} failed: {e}") from e

            logger.debug(f"Cursor {name}: step={self._cursor.step}, value={value}")
            return str(value)
        finally:
            self._lock.release()
