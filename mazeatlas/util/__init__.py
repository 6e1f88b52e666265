"""Shared utilities."""

from .rng import RNG, RNGProvider, RNGStream, derive_seed

__all__ = ["RNG", "RNGProvider", "RNGStream", "derive_seed"]
