"""Writes a Response to the ASGI ``send`` channel as start + body messages."""

from capsula._internal.asgi import Send
from capsula.http.response import Response

# RFC 9110: these never carry content, whatever the handler produced.
_NO_BODY = frozenset({204, 304})


def _encode_headers(response: Response, length: int) -> list[tuple[bytes, bytes]]:
    pairs = [("content-type", response.content_type), *response.headers]
    encoded = [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]
    encoded.append((b"content-length", str(length).encode("latin-1")))
    return encoded


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* in two ASGI messages.

    A HEAD request (*head* true) gets the same headers as the GET would,
    ``content-length`` included, and an empty body.
    """
    status = response.status
    body = b"" if status < 200 or status in _NO_BODY else response.body_bytes

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": _encode_headers(response, len(body)),
        }
    )
    await send({"type": "http.response.body", "body": b"" if head else body})
