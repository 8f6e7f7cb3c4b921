"""Capsule — a routable content unit.

A capsule binds a URI to a template name plus descriptive metadata and
an optional JSON-like payload. Capsules are frozen: per-request
variants such as a POST echo are built with ``with_data``, never by
assigning to a registered capsule.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class Method(StrEnum):
    """Declared HTTP intent of a capsule.

    Descriptive only: the dispatcher serves any capsule for GET and POST
    regardless of the declared method.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True, slots=True)
class Capsule:
    """A named, URI-keyed descriptor binding a template and payload.

    ``uri`` is used verbatim as the registry key. Register capsules with
    the canonical form the dispatcher produces: a single leading slash,
    no trailing slash (``"/blog/post-1"``).

    Usage::

        about = Capsule("About", "Who we are", "/about", "pages/about", data={"team": ["ada"]})
        echo = about.with_data({"body": "hi"})  # new capsule, about unchanged
    """

    name: str
    description: str
    uri: str
    template: str
    method: Method = Method.GET
    data: Any = field(default_factory=dict)

    def with_data(self, data: Any) -> Capsule:
        """Return a copy of this capsule carrying *data* instead."""
        return replace(self, data=data)

    def copy(self) -> Capsule:
        """Return a deep copy (payload included)."""
        return replace(self, data=copy.deepcopy(self.data))
