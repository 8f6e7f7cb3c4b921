"""Capsule registry — the lookup table from canonical URI to capsule.

Built once at startup, then shared read-only across every request
handler. There is no internal locking: mutate only before the registry
is handed to a server.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from capsula.capsule import Capsule

logger = logging.getLogger("capsula.registry")


class CapsuleRegistry:
    """Mapping of ``uri -> Capsule``. Last ``add`` for a URI wins.

    ``add`` stores a deep copy, so later edits to the caller's payload
    never leak into routing. Stored capsules are frozen; treat the
    payload returned by ``get`` as read-only too.

    Usage::

        registry = CapsuleRegistry()
        registry.add(Capsule("Home", "Landing page", "/", "index"))
        registry.get("/")  # -> Capsule(...)
    """

    __slots__ = ("_capsules",)

    def __init__(self) -> None:
        self._capsules: dict[str, Capsule] = {}

    @classmethod
    def from_capsules(cls, capsules: Iterable[Capsule]) -> CapsuleRegistry:
        """Build a registry from static configuration."""
        registry = cls()
        for capsule in capsules:
            registry.add(capsule)
        return registry

    def add(self, capsule: Capsule) -> None:
        """Insert *capsule* under its ``uri``, replacing any previous entry."""
        if capsule.uri in self._capsules:
            logger.debug("Replacing capsule at %s", capsule.uri)
        self._capsules[capsule.uri] = capsule.copy()

    def get(self, uri: str) -> Capsule | None:
        """Exact-string lookup. No normalization is applied here."""
        return self._capsules.get(uri)

    def all(self) -> Iterator[tuple[str, Capsule]]:
        """Iterate ``(uri, capsule)`` pairs over the current contents."""
        yield from self._capsules.items()

    def __len__(self) -> int:
        return len(self._capsules)

    def __contains__(self, uri: object) -> bool:
        return uri in self._capsules

    def __repr__(self) -> str:
        return f"CapsuleRegistry({sorted(self._capsules)!r})"
