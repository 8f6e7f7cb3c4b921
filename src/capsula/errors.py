"""Capsula exception hierarchy.

Shared across the registry, engine, dispatcher and server so every module
raises and catches the same types. A registry miss is never an error:
lookups return ``None`` and the dispatcher renders the not-found page.
"""

from dataclasses import dataclass


class CapsulaError(Exception):
    """Base for all capsula-specific errors."""


class ConfigurationError(CapsulaError):
    """Raised when configuration or a capsule manifest is invalid.

    Also raised at startup when the not-found template is missing.
    """


class TemplateLoadError(CapsulaError):
    """Template discovery or compilation failed during ``load_all()``.

    The previously loaded template set stays authoritative.
    """


class RenderError(CapsulaError):
    """A named template could not be rendered (missing template, bad context)."""

    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"Failed to render {template!r}: {detail}")


class StartupError(CapsulaError):
    """The server could not bind or launch."""


@dataclass(frozen=True, slots=True)
class HTTPError(CapsulaError):
    """An error that maps directly to an HTTP status code.

    Raised while reading the request (413 for an oversized body). The
    ASGI handler catches these and renders the not-found page with the
    matching status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)

