"""Deterministic random number generation with isolated streams.

Every generation call owns one `RNGProvider` built from an explicit seed. Each
stage of the call (maze layout, symmetry choice, chart selection) pulls its own
independent stream from the provider by domain name. This ensures that:

1. A given seed reproduces an identical maze and atlas
2. Changes to one stage's random consumption don't cascade to the others
3. Nothing depends on a process-wide random source

Usage:
    provider = RNGProvider(master_seed=seed)
    generator.seed = provider.get("atlas.maze").getrandbits(32)

Domain names in use:
    - "atlas.maze", "atlas.charts" (MazeAtlasGenerator)
    - "maze.inner", "maze.symmetry" (SymmetryTransformGenerator)
"""

from __future__ import annotations

import zlib
from collections.abc import MutableSequence, Sequence
from random import Random
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from mazeatlas.types import RandomSeed

T = TypeVar("T")


def derive_seed(master_seed: RandomSeed, domain: str) -> int:
    """Derive a stable 32-bit seed for a domain from a master seed."""
    # crc32 instead of hash(): hash() is randomized per Python session via
    # PYTHONHASHSEED, which would break cross-session determinism.
    return zlib.crc32(f"{master_seed}:{domain}".encode())


class RNGStream:
    """One domain's random source, exposing the Random methods generation uses."""

    def __init__(self, rng: Random) -> None:
        self._rng = rng

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng.randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng.choice(seq)

    def shuffle(self, x: MutableSequence) -> None:
        """Shuffle sequence x in place."""
        self._rng.shuffle(x)

    def getrandbits(self, k: int) -> int:
        """Return an integer with k random bits."""
        return self._rng.getrandbits(k)


# Type alias for functions that accept either Random or RNGStream.
# Use this in type hints: `def foo(rng: RNG) -> int:`
type RNG = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams for the stages of one generation call.

    Each domain gets its own Random instance derived deterministically
    from the master seed. Domains are identified by string names.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """Get the RNG stream for the named domain.

        Repeated calls with the same domain return the same stream, so
        consumption continues where the previous caller left off.

        Args:
            domain: Hierarchical name like "atlas.maze" or "maze.symmetry"
        """
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: use system entropy for non-deterministic behavior
                rng = Random()
            else:
                rng = Random(derive_seed(self._master_seed, domain))
            self._streams[domain] = RNGStream(rng)
        return self._streams[domain]
