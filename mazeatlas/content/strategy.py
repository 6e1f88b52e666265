"""Base class for content strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazeatlas.atlas.atlas import Atlas


class ContentStrategy(ABC):
    """Turns an atlas's markers into content.

    One strategy need not handle the whole atlas. When several strategies run
    over the same atlas, each should call Marker.use() on the markers it
    consumes and skip markers that are already used.
    """

    @abstractmethod
    def generate_content(self, atlas: Atlas) -> None:
        """Place content for the unused markers this strategy handles."""
        raise NotImplementedError
