"""StreamTable: precomputed per-particle random streams plus derived seeds.

Each particle in a simulation reads its randomness from one row of the
table.  Rows are filled once, at construction, from a uniform source seeded
with that row's derived seed; after that the table never changes, so any
number of workers may read it concurrently without locking.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from particle_streams.config.schema import StreamTableConfig
from particle_streams.core.seeding import (
    make_rng,
    normalize_seed,
    stream_seed,
    subsystem_seed,
)
from particle_streams.core.sources import SourceFactory, resolve_source
from particle_streams.core.types import SeedValue, StreamIndexError, Subsystem

LOGGER = logging.getLogger(__name__)


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return int(value)


def _in_range(index: int, bound: int) -> bool:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        return False
    return 0 <= index < bound


class StreamTable:
    """Fixed table of ``num_streams`` rows by ``length`` uniform draws."""

    def __init__(
        self,
        num_streams: int,
        length: int,
        seed: int,
        source: str | SourceFactory | None = None,
    ) -> None:
        num_streams = _check_dimension("num_streams", num_streams)
        length = _check_dimension("length", length)
        self._seed = normalize_seed(seed)
        factory = resolve_source(source)

        # A table without rows has no observable row length.
        cols = length if num_streams > 0 else 0
        streams = np.empty((num_streams, cols), dtype=np.float64)
        for i in range(num_streams):
            src = factory()
            src.reset(stream_seed(self._seed, i))
            row = np.asarray(src.draw(length), dtype=np.float64)
            if row.shape != (length,):
                raise ValueError(
                    f"source returned {row.shape} draws for stream {i}, expected ({length},)"
                )
            streams[i] = row
        streams.flags.writeable = False
        self._streams = streams

        LOGGER.debug(
            "Built stream table: %d streams x %d positions, seed=%d",
            num_streams, cols, self._seed,
        )

    @classmethod
    def from_config(
        cls, config: StreamTableConfig, source: SourceFactory | None = None
    ) -> StreamTable:
        """Build a table from a validated config.

        An explicit *source* factory overrides ``config.source``.
        """
        return cls(
            config.num_streams,
            config.length,
            config.seed,
            source=source if source is not None else config.source,
        )

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    def num_streams(self) -> int:
        return self._streams.shape[0]

    def length(self) -> int:
        """Positions per stream; 0 when the table has no streams."""
        return self._streams.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.num_streams(), self.length())

    @property
    def seed(self) -> SeedValue:
        """The master seed all other seeds derive from."""
        return self._seed

    def __len__(self) -> int:
        return self.num_streams()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def entry(self, stream: int, pos: int) -> float:
        """Value at (*stream*, *pos*).  Raises StreamIndexError when out of range."""
        if not (
            _in_range(stream, self.num_streams()) and _in_range(pos, self.length())
        ):
            raise StreamIndexError(stream, pos, self.shape)
        return float(self._streams[stream, pos])

    def stream(self, stream: int) -> np.ndarray:
        """Read-only view of one stream."""
        self._check_stream(stream)
        return self._streams[stream]

    def as_array(self) -> np.ndarray:
        """Read-only view of the whole table, for vectorised consumers."""
        return self._streams.view()

    # ------------------------------------------------------------------
    # Derived seeds
    # ------------------------------------------------------------------

    def stream_seed(self, stream: int) -> SeedValue:
        """Seed that was used to fill *stream*."""
        self._check_stream(stream)
        return stream_seed(self._seed, stream)

    def subsystem_seed(self, subsystem: Subsystem) -> SeedValue:
        return subsystem_seed(self._seed, self.num_streams(), subsystem)

    def world_seed(self) -> SeedValue:
        return self.subsystem_seed(Subsystem.WORLD)

    def belief_update_seed(self) -> SeedValue:
        return self.subsystem_seed(Subsystem.BELIEF_UPDATE)

    def model_seed(self) -> SeedValue:
        return self.subsystem_seed(Subsystem.MODEL)

    def subsystem_rng(self, subsystem: Subsystem) -> np.random.Generator:
        """Fresh generator for *subsystem*, seeded with its derived seed."""
        return make_rng(self.subsystem_seed(subsystem))

    def describe(self) -> dict[str, Any]:
        """Dimensions and every derived seed, for run headers and logs."""
        return {
            "seed": self._seed,
            "num_streams": self.num_streams(),
            "length": self.length(),
            "world_seed": self.world_seed(),
            "belief_update_seed": self.belief_update_seed(),
            "model_seed": self.model_seed(),
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_stream(self, stream: int) -> None:
        if not _in_range(stream, self.num_streams()):
            raise StreamIndexError(stream, None, self.shape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamTable):
            return NotImplemented
        return self._seed == other._seed and np.array_equal(
            self._streams, other._streams
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"StreamTable(num_streams={self.num_streams()}, "
            f"length={self.length()}, seed={self._seed})"
        )
