"""Catch-all router: one ``/{name:path}`` mount, chosen by verb.

Every request path lands on the same mount; the capture is the request
path with empty segments dropped, so ``/blog/``, ``//blog`` and
``/blog`` all capture ``"blog"``. The verb picks the route, and a route
registered for ``"*"`` answers every verb nothing else claims.
"""

from capsula.errors import ConfigurationError
from capsula.routing.route import ANY_METHOD, Route, RouteMatch


def split_path(path: str) -> tuple[str, ...]:
    """Non-empty segments of *path* (``"//blog/x/"`` -> ``("blog", "x")``)."""
    return tuple(part for part in path.split("/") if part)


class Router:
    """Per-method table over a single catch-all mount.

    Usage::

        router = Router()
        router.add(Route("/{path:path}", catch_all, frozenset({"GET"})))
        router.add(Route("/{path:path}", fallback, frozenset({"*"})))
        router.compile()
        match = router.match("GET", "/blog/post-1")
        match.path_params  # {"path": "blog/post-1"}
    """

    __slots__ = ("_by_method", "_compiled", "capture")

    def __init__(self, capture: str = "path") -> None:
        self.capture = capture
        self._by_method: dict[str, Route] = {}
        self._compiled = False

    @property
    def mount(self) -> str:
        return f"/{{{self.capture}:path}}"

    def add(self, route: Route) -> None:
        """Register *route* for each of its verbs. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if route.path != self.mount:
            msg = f"Route {route.path!r}: capsula mounts every route at {self.mount!r}."
            raise ConfigurationError(msg)
        for method in route.methods:
            self._by_method[method] = route

    def compile(self) -> None:
        """Freeze the router. A ``"*"`` route is required so every verb resolves."""
        if ANY_METHOD not in self._by_method:
            msg = f"Router has no {ANY_METHOD!r} fallback route."
            raise ConfigurationError(msg)
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Resolve *method* and *path*; the fallback answers unclaimed verbs."""
        if not self._compiled:
            msg = "Router.match() called before compile()."
            raise RuntimeError(msg)

        route = self._by_method.get(method) or self._by_method[ANY_METHOD]
        return RouteMatch(route=route, path_params={self.capture: "/".join(split_path(path))})
