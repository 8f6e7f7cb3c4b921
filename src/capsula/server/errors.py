"""Default error catcher for capsula requests.

Every error status renders the same not-found template with an empty
context, keeping the original status code. When that template cannot
be rendered either, a plain-text 500 is sent instead.
"""

import logging
import traceback

from capsula.dispatch import Dispatcher
from capsula.errors import HTTPError
from capsula.http.request import Request
from capsula.http.response import Response

logger = logging.getLogger("capsula.server")


def _render_catcher(dispatcher: Dispatcher, status: int, *, debug: bool) -> Response:
    """Render the not-found page for *status*, degrading to plain text."""
    try:
        return dispatcher.not_found(status=status)
    except Exception:
        logger.exception("Error page %r failed to render", dispatcher.not_found_template)
        detail = traceback.format_exc() if debug else "Internal Server Error"
        return Response.plain(detail, 500)


def handle_http_error(
    exc: HTTPError,
    request: Request,
    dispatcher: Dispatcher,
    *,
    debug: bool = False,
) -> Response:
    """Map an HTTPError to the not-found page with the error's status."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    response = _render_catcher(dispatcher, exc.status, debug=debug)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(
    exc: Exception,
    request: Request,
    dispatcher: Dispatcher,
    *,
    debug: bool = False,
) -> Response:
    """Handle unexpected exceptions (render failures included) as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    if debug:
        return Response.plain("".join(traceback.format_exception(exc)), 500)
    return _render_catcher(dispatcher, 500, debug=debug)
