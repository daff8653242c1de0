"""Deterministic per-particle random streams and derived subsystem seeds."""

from __future__ import annotations

from particle_streams.config.defaults import default_config
from particle_streams.config.schema import StreamTableConfig
from particle_streams.core.cursor import StreamCursor
from particle_streams.core.seeding import make_rng
from particle_streams.core.sources import (
    SOURCE_REGISTRY,
    BitGeneratorSource,
    UniformSource,
    create_source,
)
from particle_streams.core.stream_table import StreamTable
from particle_streams.core.types import StreamIndexError, Subsystem

__all__ = [
    "SOURCE_REGISTRY",
    "BitGeneratorSource",
    "StreamCursor",
    "StreamIndexError",
    "StreamTable",
    "StreamTableConfig",
    "Subsystem",
    "UniformSource",
    "create_source",
    "default_config",
    "make_rng",
]
