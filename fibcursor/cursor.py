"""Fibonacci sequence cursor with a bounded trailing window."""

from typing import List, Tuple

WINDOW_SIZE = 3


class SequenceCursor:
    """Walks the Fibonacci sequence forward and backward.

    Only the last three computed terms are kept, since every term depends on
    the two before it. The first terms of the sequence are 0, 1, 1, 2, so the
    window fills up more slowly than ``step`` grows during the first few
    advances. Both the window shape and ``step`` are needed to know where the
    cursor is; neither can be derived from the other.

    The cursor is not thread-safe. Use ``SharedCursor`` for shared access.
    """

    def __init__(self):
        """Initialize cursor at the start of the sequence."""
        self._window: List[int] = [0]
        self._step = 0

    def advance(self) -> int:
        """Move one term forward.

        Returns:
            int: The term that is now current
        """
        self._step += 1
        window = self._window

        if len(window) == 1:
            window.append(1)
            # Reached either from step 0 (first term, 0) or, after a
            # retreat, from step 1 (second term, 1).
            return 0 if self._step == 1 else 1

        if len(window) == 2:
            total = window[0] + window[1]
            window.append(total)
            return total

        if len(window) == WINDOW_SIZE and self._step == 3:
            return 1

        total = window[-2] + window[-1]
        self._window = [window[-2], window[-1], total]
        return total

    def retreat(self) -> int:
        """Move one term backward, never below the first term.

        A following ``advance`` returns the term that was just stepped past.

        Returns:
            int: The term that is now current
        """
        if self._step == 0:
            return 0

        self._step -= 1
        window = self._window

        if len(window) == WINDOW_SIZE:
            if window[0] == 0:
                # [0, 1, 1] is left from step 2 or step 3
                self._window = [0, 1]
                return 0 if self._step == 1 else 1

            # Recover the term before the window instead of storing history
            first = window[1] - window[0]
            self._window = [first, window[0], window[1]]
            return self._window[-1]

        if len(window) == 2:
            window.pop()
            return 0

        return 0

    def peek(self) -> int:
        """Get current term without moving.

        Returns:
            int: Current term
        """
        window = self._window

        # [0, 1] is held at step 1 (value 0) and, after a retreat from
        # step 3, at step 2 (value 1).
        if len(window) == 2:
            return 0 if self._step <= 1 else 1

        if len(window) == WINDOW_SIZE and self._step == 2:
            return 1

        return window[-1] if window else 0

    @property
    def step(self) -> int:
        """Number of net forward advances since creation."""
        return self._step

    @property
    def window(self) -> Tuple[int, ...]:
        """Copy of the trailing window, oldest term first."""
        return tuple(self._window)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.advance()

    def __repr__(self):
        return f"SequenceCursor(step={self._step}, window={self._window!r})"
