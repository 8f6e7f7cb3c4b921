"""The three HTTP routes every capsula app mounts.

All of them capture the whole path with ``{path:path}``; which one runs
depends only on the verb:

=========  ===============  ==========================================
Method     Handler          Outcome
=========  ===============  ==========================================
GET, HEAD  ``catch_all``    capsule render, or not-found with the path
POST       ``handle_post``  capsule render with the body as ``data``
any other  ``not_found``    not-found, empty context
=========  ===============  ==========================================
"""

from capsula.dispatch import Dispatcher
from capsula.http.request import Request
from capsula.http.response import Response
from capsula.routing.route import ANY_METHOD, Route
from capsula.routing.router import Router

CATCH_ALL_PATH = "/{path:path}"


async def catch_all(request: Request, dispatcher: Dispatcher) -> Response:
    return dispatcher.catch_all(request.path_params.get("path", ""))


async def handle_post(request: Request, dispatcher: Dispatcher) -> Response:
    body = await request.text()
    return dispatcher.handle_post(request.path_params.get("path", ""), body)


async def not_found(request: Request, dispatcher: Dispatcher) -> Response:  # noqa: ARG001
    return dispatcher.not_found()


def build_router() -> Router:
    """Compile the capsula route table."""
    router = Router()
    router.add(Route(CATCH_ALL_PATH, catch_all, frozenset({"GET", "HEAD"}), name="catch_all"))
    router.add(Route(CATCH_ALL_PATH, handle_post, frozenset({"POST"}), name="handle_post"))
    router.add(Route(CATCH_ALL_PATH, not_found, frozenset({ANY_METHOD}), name="not_found"))
    router.compile()
    return router
