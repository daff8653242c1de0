"""Default stream table configuration.

500 particles searched to depth 90: the usual particle count and search
horizon for online belief-tree planners.
"""

from particle_streams.config.schema import StreamTableConfig


def default_config(seed: int = 42) -> StreamTableConfig:
    """Return a complete, valid default config."""
    return StreamTableConfig(
        num_streams=500,
        length=90,
        seed=seed,
        source="pcg64",
    )
