"""Request dispatch — from captured path to rendered response.

Three outcomes, all synchronous and side-effect free apart from
rendering:

- ``catch_all``: registry hit renders the capsule's template with its
  context; a miss renders the not-found template with ``{"path": ...}``.
- ``handle_post``: like ``catch_all`` but the capsule's ``data`` is
  replaced by ``{"body": <raw text>}`` on a private copy first.
- ``not_found``: the not-found template with an empty context.

Render errors are not caught here; the ASGI boundary handles them.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from capsula.capsule import Capsule
from capsula.http.response import Response
from capsula.state import AppState

logger = logging.getLogger("capsula.server")

NOT_FOUND_TEMPLATE = "404"


def normalize_path(path: str | Sequence[str]) -> str:
    """Return the canonical registry key for a captured path.

    Accepts either the captured remainder (``"blog/post-1"``) or its
    segments (``["blog", "post-1"]``)::

        normalize_path(["blog", "post-1"])  # "/blog/post-1"
        normalize_path("")                  # "/"
    """
    remainder = path if isinstance(path, str) else "/".join(path)
    return "/" + remainder


@dataclass(frozen=True, slots=True)
class Dispatcher:
    """Route handling logic bound to one ``AppState``.

    ``not_found_status`` is the status sent with the not-found page.
    """

    state: AppState
    not_found_template: str = NOT_FOUND_TEMPLATE
    not_found_status: int = 404

    def catch_all(self, path: str | Sequence[str]) -> Response:
        """GET-style handling: render the capsule at *path* or not-found."""
        uri = normalize_path(path)
        capsule = self.state.registry.get(uri)
        if capsule is None:
            logger.debug("No capsule at %s", uri)
            return self._render_not_found({"path": uri})
        return self._render_capsule(capsule)

    def handle_post(self, path: str | Sequence[str], body: str) -> Response:
        """POST-style handling: render the capsule with ``data = {"body": body}``."""
        uri = normalize_path(path)
        capsule = self.state.registry.get(uri)
        if capsule is None:
            logger.debug("No capsule at %s (POST)", uri)
            return self._render_not_found({"path": uri})
        return self._render_capsule(capsule.with_data({"body": body}))

    def not_found(self, status: int | None = None) -> Response:
        """Render the not-found template with an empty context."""
        return self._render_not_found({}, status=status)

    def _render_capsule(self, capsule: Capsule) -> Response:
        engine = self.state.engine
        html = engine.render(capsule.template, engine.context_for(capsule))
        return Response(body=html)

    def _render_not_found(
        self,
        context: dict[str, Any],
        *,
        status: int | None = None,
    ) -> Response:
        html = self.state.engine.render(self.not_found_template, context)
        return Response(body=html, status=status or self.not_found_status)
