"""Exceptions raised by maze generation and atlas assembly.

Every error is raised at the point of violation and never retried internally.
The base classes subclass the closest builtin exception so callers can keep
catching ``ValueError``/``LookupError``/``RuntimeError`` if they prefer.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised for invalid configuration or malformed inputs.

    Examples: an empty cell list, a link between non-adjacent cells, a tag for
    a cell outside the maze, an empty chart pool, or chart maps whose
    dimensions disagree with the provider's tile size.
    """

    pass


class CellNotFoundError(LookupError):
    """Raised when querying a maze for a cell (or tag) it does not have."""

    pass


class InvalidStateError(RuntimeError):
    """Raised when an object is used in a way its current state forbids."""

    pass


class PathNotFoundError(InvalidStateError):
    """Raised when the weighted grid search exhausts its queue.

    A rectangular grid is always connected under 4-directional movement, so
    this indicates an internal bug rather than bad input.
    """

    pass


class MarkerAlreadyUsedError(InvalidStateError):
    """Raised when ``Marker.use()`` is called on a marker that is already used."""

    pass


class GenerationStalledError(InvalidStateError):
    """Raised when branch expansion keeps drawing cells with no free neighbor."""

    pass
