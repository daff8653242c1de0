"""Configuration schema for a stream table: single source of truth.

One validated instance of StreamTableConfig, plus the source
implementation it names, fully determines every stream entry and every
derived seed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from particle_streams.core.sources import ALLOWED_SOURCES, DEFAULT_SOURCE
from particle_streams.core.types import SEED_MASK


class StreamTableConfig(BaseModel):
    """Dimensions, master seed and source for one simulation run."""

    num_streams: int = Field(
        ge=0,
        description="Number of streams, one per particle. 0 gives an empty table.",
    )
    length: int = Field(
        ge=0,
        description="Draws per stream, typically the maximum simulation depth.",
    )
    seed: int = Field(
        ge=0, le=SEED_MASK,
        description="Master seed (unsigned 32-bit) for full reproducibility.",
    )
    source: str = Field(
        default=DEFAULT_SOURCE,
        description="Registered uniform source used to fill the streams.",
    )

    @field_validator("source")
    @classmethod
    def source_is_registered(cls, value: str) -> str:
        if value not in ALLOWED_SOURCES:
            raise ValueError(
                f"Unknown source {value!r}; expected one of {sorted(ALLOWED_SOURCES)}."
            )
        return value
