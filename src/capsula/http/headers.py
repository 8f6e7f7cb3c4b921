"""Request headers as a read-only, case-insensitive mapping.

ASGI delivers headers as ``(bytes, bytes)`` pairs in arrival order, with
repeats allowed. ``Headers`` decodes them once, folding names to lower
case; the first value sent for a name is the one kept.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Case-insensitive view over one request's headers.

    Usage::

        headers = Headers(scope["headers"])
        headers["Content-Type"]  # "text/plain; charset=utf-8"
        headers.get("accept")    # None when absent
    """

    __slots__ = ("_values",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        values: dict[str, str] = {}
        for name, value in raw:
            values.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        self._values = values

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"
