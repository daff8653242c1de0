"""Uniform random-value sources used to fill stream tables.

A source is seeded once per row and asked for exactly ``length`` draws.
Sources are transient: the table creates one, fills one row, and drops it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

import numpy as np

from particle_streams.core.types import SeedValue


class UniformSource(ABC):
    """Interface that all random-value sources must implement."""

    @abstractmethod
    def reset(self, seed: SeedValue) -> None:
        """Seed (or reseed) the source.  Same seed, same draws."""

    @abstractmethod
    def draw(self, n: int) -> np.ndarray:
        """Return the next *n* draws, in order, as a 1-D float array."""


class BitGeneratorSource(UniformSource):
    """Uniform [0, 1) draws from a NumPy bit generator."""

    def __init__(self, bit_generator: type[np.random.BitGenerator] = np.random.PCG64) -> None:
        self._bit_generator = bit_generator
        self._rng: np.random.Generator | None = None

    @property
    def name(self) -> str:
        return self._bit_generator.__name__.lower()

    def reset(self, seed: SeedValue) -> None:
        self._rng = np.random.Generator(self._bit_generator(seed))

    def draw(self, n: int) -> np.ndarray:
        assert self._rng is not None, "Must call reset() before draw()"
        return self._rng.random(n)


SourceFactory = Callable[[], UniformSource]

SOURCE_REGISTRY: dict[str, SourceFactory] = {
    "pcg64": lambda: BitGeneratorSource(np.random.PCG64),
    "mt19937": lambda: BitGeneratorSource(np.random.MT19937),
    "philox": lambda: BitGeneratorSource(np.random.Philox),
    "sfc64": lambda: BitGeneratorSource(np.random.SFC64),
}

DEFAULT_SOURCE = "pcg64"

ALLOWED_SOURCES = frozenset(SOURCE_REGISTRY)


def create_source(name: str = DEFAULT_SOURCE) -> UniformSource:
    """Instantiate a source by registry name.

    Raises KeyError if the name is not registered.
    """
    return SOURCE_REGISTRY[name]()


def resolve_source(source: str | SourceFactory | None) -> SourceFactory:
    """Turn a registry name, a factory or None into a factory."""
    if source is None:
        return SOURCE_REGISTRY[DEFAULT_SOURCE]
    if isinstance(source, str):
        if source not in SOURCE_REGISTRY:
            raise KeyError(
                f"unknown source {source!r}; expected one of {sorted(SOURCE_REGISTRY)}"
            )
        return SOURCE_REGISTRY[source]
    return source
