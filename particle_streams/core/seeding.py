"""Deterministic seeding utilities.

Every seed handed out by a stream table is the master seed XORed with a
small per-purpose offset:

  - row ``i`` of the table            -> ``seed ^ i``
  - world / belief update / model     -> ``seed ^ (num_streams + 0/1/2)``

This is a cheap fan-out, not a hash.  It gives distinct seeds for distinct
offsets and nothing more, so it must never be used where seeds could be
chosen adversarially.  Replaying a known master seed must keep producing the
same derived seeds, which is why the offsets are fixed.
"""

from __future__ import annotations

import numpy as np

from particle_streams.core.types import SEED_MASK, SeedValue, Subsystem


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a NumPy Generator from an explicit seed.

    If seed is None a fresh (non-reproducible) generator is returned.
    """
    return np.random.default_rng(seed)


def normalize_seed(seed: int) -> SeedValue:
    """Validate that *seed* fits an unsigned 32-bit word and return it as int."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
    value = int(seed)
    if value < 0 or value > SEED_MASK:
        raise ValueError(f"seed must be in [0, {SEED_MASK}], got {value}")
    return value


def xor_seed(master: SeedValue, offset: int) -> SeedValue:
    """Combine *master* with *offset*, wrapping to 32 bits."""
    return (master ^ offset) & SEED_MASK


def stream_seed(master: SeedValue, stream: int) -> SeedValue:
    """Seed used to fill row *stream* of a table."""
    return xor_seed(master, stream)


def subsystem_seed(master: SeedValue, num_streams: int, subsystem: Subsystem) -> SeedValue:
    """Seed for a named subsystem of a table with *num_streams* rows."""
    return xor_seed(master, num_streams + subsystem.value)
