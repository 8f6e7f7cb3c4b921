"""Immutable HTTP request.

Frozen metadata with async body access. Capsule routes only need the
method, the path, and (for POST) the raw body text.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from capsula._internal.asgi import Receive
from capsula.errors import HTTPError
from capsula.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata is frozen at creation. The body is read lazily through
    ``.body()`` / ``.text()`` and cached after the first read.
    """

    method: str
    path: str
    headers: Headers
    path_params: dict[str, str]

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    # Private: mutable cache for the body bytes
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    max_body_size: int | None = field(default=None, repr=False, compare=False)

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def charset(self) -> str:
        """Charset declared in Content-Type, defaulting to UTF-8."""
        ct = self.content_type or ""
        for part in ct.split(";")[1:]:
            key, _, value = part.strip().partition("=")
            if key.lower() == "charset" and value:
                return value.strip('"')
        return "utf-8"

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.

        Raises:
            HTTPError: 413 when the body exceeds ``max_body_size``.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks: list[bytes] = []
        size = 0
        async for chunk in self.stream():
            size += len(chunk)
            if self.max_body_size is not None and size > self.max_body_size:
                raise HTTPError(status=413, detail="Request body too large")
            chunks.append(chunk)
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        """Read the body as text, replacing undecodable bytes."""
        raw = await self.body()
        try:
            return raw.decode(self.charset, errors="replace")
        except LookupError:
            return raw.decode("utf-8", errors="replace")

    # -- Factory --

    @classmethod
    def from_asgi(
        cls,
        scope: dict[str, Any],
        receive: Receive,
        path_params: dict[str, str] | None = None,
        *,
        max_body_size: int | None = None,
    ) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(scope.get("headers", ())),
            path_params=path_params or {},
            _receive=receive,
            max_body_size=max_body_size,
        )
