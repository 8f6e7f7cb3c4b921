"""Route definitions and match results."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

# Method key that matches any verb not registered explicitly
ANY_METHOD = "*"


@dataclass(frozen=True, slots=True)
class Route:
    """One handler mounted at a path for a set of verbs.

    ``path`` is the catch-all mount (``"/{path:path}"``). ``methods``
    may contain ``ANY_METHOD``.
    """

    path: str
    handler: Callable[..., Awaitable[Any]]
    methods: frozenset[str]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    route: Route
    path_params: dict[str, str]
