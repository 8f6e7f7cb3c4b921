"""Per-request pipeline: ASGI scope -> Request -> route -> Response -> send.

Every failure inside a request ends in a response from the default
catcher, so one bad template or body never escapes to the server.
"""

from dataclasses import replace

from capsula._internal.asgi import Receive, Scope, Send
from capsula.dispatch import Dispatcher
from capsula.errors import HTTPError
from capsula.http.request import Request
from capsula.http.response import Response
from capsula.routing.router import Router
from capsula.server.errors import handle_http_error, handle_internal_error
from capsula.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    dispatcher: Dispatcher,
    debug: bool = False,
    max_content_length: int | None = None,
) -> None:
    """Process a single HTTP request through the full pipeline.

    Failures are contained to this request: HTTP errors and unexpected
    exceptions are turned into error pages by the default catcher.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive, max_body_size=max_content_length)

    try:
        match = router.match(request.method, request.path)
        request = replace(request, path_params=match.path_params)
        response: Response = await match.route.handler(request, dispatcher)
    except HTTPError as exc:
        response = handle_http_error(exc, request, dispatcher, debug=debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, dispatcher, debug=debug)

    await send_response(response, send, head=request.method == "HEAD")
