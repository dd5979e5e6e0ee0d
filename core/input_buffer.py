# core/input_buffer.py
from __future__ import annotations
from collections import deque
from typing import Optional
from interfaces import Direction

class InputBuffer:
    """Key presses collected between ticks, handed out one per tick.

    Pressing Up then Left inside a single tick interval while moving Right
    should turn twice over two ticks instead of losing the first press.
    Repeats and reversals of the previous queued heading are dropped; when
    the queue is empty they're judged against the last direction popped.
    """

    def __init__(self, maxlen: int = 2):
        self._queue: deque[Direction] = deque()
        self.maxlen = maxlen
        self._last: Optional[Direction] = None

    def push(self, direction: Direction) -> bool:
        ref = self._queue[-1] if self._queue else self._last
        if ref is not None and direction in (ref, ref.opposite):
            return False
        if len(self._queue) >= self.maxlen:
            return False
        self._queue.append(direction)
        return True

    def pop(self) -> Optional[Direction]:
        if not self._queue:
            return None
        self._last = self._queue.popleft()
        return self._last

    def sync(self, direction: Direction) -> None:
        """Tell the buffer which way the snake is heading right now."""
        if not self._queue:
            self._last = direction

    def clear(self) -> None:
        self._queue.clear()
        self._last = None

    def __len__(self) -> int:
        return len(self._queue)
