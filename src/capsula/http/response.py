"""Outgoing response: a complete body plus status and headers.

Capsula only sends whole bodies, rendered HTML or a short plain-text
error, so there is no streaming variant. Responses are frozen; the
``with_*`` helpers return modified copies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

HTML = "text/html; charset=utf-8"
PLAIN = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """A rendered response, HTML unless stated otherwise."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = HTML
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def plain(cls, text: str, status: int = 200) -> Response:
        """A UTF-8 ``text/plain`` response."""
        return cls(body=text, status=status, content_type=PLAIN)

    def with_header(self, name: str, value: str) -> Response:
        """Copy with one more header; earlier headers of the same name stay."""
        return replace(self, headers=(*self.headers, (name, value)))

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 if it is text."""
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 if it is bytes."""
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body
