"""Per-worker read position over a shared StreamTable.

Search and filtering loops consume one position of every stream per
simulated step.  The table itself stays immutable, so the position lives
here: each worker owns a cursor, and all cursors may share one table.
"""

from __future__ import annotations

from particle_streams.core.stream_table import StreamTable
from particle_streams.core.types import StreamIndexError


class StreamCursor:
    """Tracks the current position into a table's streams.

    Valid positions are ``0..table.length()``.  Position ``length`` is the
    exhausted state: it can be reached by ``advance()`` but not read.
    """

    def __init__(self, table: StreamTable, position: int = 0) -> None:
        self._table = table
        if not 0 <= position <= table.length():
            raise StreamIndexError(None, position, table.shape)
        self._position = position

    @property
    def table(self) -> StreamTable:
        return self._table

    @property
    def position(self) -> int:
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= self._table.length()

    def entry(self, stream: int) -> float:
        """Value of *stream* at the current position."""
        return self._table.entry(stream, self._position)

    def advance(self) -> None:
        if self._position >= self._table.length():
            raise StreamIndexError(None, self._position + 1, self._table.shape)
        self._position += 1

    def back(self) -> None:
        if self._position == 0:
            raise StreamIndexError(None, -1, self._table.shape)
        self._position -= 1

    def reset(self) -> None:
        self._position = 0

    def __repr__(self) -> str:
        return f"StreamCursor(position={self._position}, table={self._table!r})"
