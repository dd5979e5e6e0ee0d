# core/errors.py
from __future__ import annotations
from typing import Optional
from interfaces import Snapshot

class SnakeError(Exception):
    """Base class for errors raised by the engine."""

class ConstructionError(SnakeError, ValueError):
    """The requested grid/snake combination cannot be set up."""

class SpawnExhaustedError(SnakeError):
    """No free cell is left for food: the snake fills the whole board.

    The move that filled the board has already been committed; ``snapshot``
    holds the resulting state so a driver can treat it as a win.
    """
    def __init__(self, message: str, snapshot: Optional[Snapshot] = None):
        super().__init__(message)
        self.snapshot = snapshot
