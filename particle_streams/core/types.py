"""Shared vocabulary for the stream table and its consumers."""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Seeds
# ---------------------------------------------------------------------------

SeedValue = int  # unsigned 32-bit

SEED_BITS = 32
SEED_MASK = (1 << SEED_BITS) - 1


# ---------------------------------------------------------------------------
# Subsystems that receive a derived seed
# ---------------------------------------------------------------------------

class Subsystem(Enum):
    """Simulation components seeded independently of the particle streams.

    The value is the offset added to the row count before it is XORed
    into the master seed.
    """

    WORLD = 0
    BELIEF_UPDATE = 1
    MODEL = 2


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class StreamIndexError(IndexError):
    """A stream or position index fell outside the table."""

    def __init__(
        self, stream: int | None, pos: int | None, shape: tuple[int, int]
    ) -> None:
        self.stream = stream
        self.pos = pos
        self.shape = shape
        if pos is None:
            where = f"stream {stream}"
        elif stream is None:
            where = f"position {pos}"
        else:
            where = f"({stream}, {pos})"
        super().__init__(
            f"{where} is out of bounds for a table of "
            f"{shape[0]} streams x {shape[1]} positions"
        )
