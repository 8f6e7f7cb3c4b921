"""Template engine contract.

An engine owns the compiled template set and knows how to turn a capsule
into a render context. The dispatcher depends only on this interface, so
tests and alternative backends can swap in their own implementation.
"""

from abc import ABC, abstractmethod
from typing import Any

from capsula.capsule import Capsule


class TemplateEngine(ABC):
    """Capability interface for template backends.

    Implementations must be safe to call from many request handlers at
    once: ``render`` runs concurrently with other renders and may overlap
    a ``load_all`` swap.
    """

    @abstractmethod
    def load_all(self) -> None:
        """Discover and compile every template this engine serves.

        Replaces the previously loaded set as a unit. On failure raises
        ``TemplateLoadError`` and leaves the previous set in place.
        """

    @abstractmethod
    def render(self, name: str, context: dict[str, Any]) -> str:
        """Render the compiled template *name* with *context*.

        Raises ``RenderError`` if the template is missing or fails.
        """

    @abstractmethod
    def has_template(self, name: str) -> bool:
        """Whether *name* is in the currently loaded set."""

    def context_for(self, capsule: Capsule) -> dict[str, Any]:
        """Build the render context for *capsule*.

        Pure: reads the capsule's current fields on every call. Subclasses
        may extend the mapping with site-wide values.
        """
        return {
            "name": capsule.name,
            "description": capsule.description,
            "uri": capsule.uri,
            "method": str(capsule.method),
            "data": capsule.data,
        }
