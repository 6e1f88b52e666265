"""Weighted random choice over a fixed set of values."""

from __future__ import annotations

from collections.abc import Iterable

from mazeatlas.errors import InvalidArgumentError, InvalidStateError
from mazeatlas.util.rng import RNG


class WeightedTable[T]:
    """Values paired with non-negative integer weights.

    Content strategies use this to vary what they place at a marker, e.g. an
    "enemy" preset that spawns a common monster most of the time.
    """

    def __init__(self, weighted_values: Iterable[tuple[T, int]] = ()) -> None:
        self._values: list[T] = []
        self._weights: list[int] = []
        for value, weight in weighted_values:
            self.add(value, weight)

    def add(self, value: T, weight: int) -> None:
        if weight < 0:
            raise InvalidArgumentError("Weights must be non-negative.")
        self._values.append(value)
        self._weights.append(weight)

    @property
    def values(self) -> list[T]:
        return list(self._values)

    @property
    def weights(self) -> list[int]:
        return list(self._weights)

    @property
    def weighted_values(self) -> list[tuple[T, int]]:
        return list(zip(self._values, self._weights, strict=True))

    def __len__(self) -> int:
        return len(self._values)

    def random_value(self, rng: RNG) -> T:
        """Pick a value with probability proportional to its weight."""
        if not self._values:
            raise InvalidStateError("Table is empty.")
        total = sum(self._weights)
        if total == 0:
            raise InvalidStateError("All weights are zero.")
        target = rng.randrange(total)
        running = 0
        for value, weight in zip(self._values, self._weights, strict=True):
            running += weight
            if running > target:
                return value
        raise InvalidStateError("Target weight never reached.")
