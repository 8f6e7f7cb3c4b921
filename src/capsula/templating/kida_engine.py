"""File-backed kida template engine.

Templates live under a root directory and follow a double-extension
convention (``*.html.kida`` by default). A template's name is its
root-relative POSIX path with the suffix stripped::

    templates/404.html.kida        -> "404"
    templates/blog/post.html.kida  -> "blog/post"

``load_all()`` builds a complete kida Environment off to the side,
compiles every template in it, and only then swaps it in under the
write lock. Renders hold the read lock, so they always see one whole
template set, never a half-loaded one.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from kida import DictLoader, Environment

from capsula._internal.rwlock import ReadWriteLock
from capsula.errors import RenderError, TemplateLoadError
from capsula.templating.engine import TemplateEngine

logger = logging.getLogger("capsula.templating")

DEFAULT_SUFFIX = ".html.kida"


class KidaEngine(TemplateEngine):
    """Template engine backed by a swappable kida Environment.

    Starts empty; nothing renders until ``load_all()`` succeeds.

    Usage::

        engine = KidaEngine("templates")
        engine.load_all()
        html = engine.render("404", {"path": "/missing"})
    """

    __slots__ = ("_env", "_filters", "_globals", "_lock", "_names", "autoescape", "root", "suffix")

    def __init__(
        self,
        root: str | Path,
        *,
        suffix: str = DEFAULT_SUFFIX,
        autoescape: bool = True,
        filters: dict[str, Callable[..., Any]] | None = None,
        globals: dict[str, Any] | None = None,  # noqa: A002
    ) -> None:
        self.root = Path(root)
        self.suffix = suffix
        self.autoescape = autoescape
        self._filters: dict[str, Callable[..., Any]] = dict(filters or {})
        self._globals: dict[str, Any] = dict(globals or {})
        self._lock = ReadWriteLock()
        self._env: Environment | None = None
        self._names: frozenset[str] = frozenset()

    # -- Loading --

    def load_all(self) -> None:
        """Compile every template under ``root`` and swap the set in."""
        sources = self._discover()
        env = self._build_environment(sources)

        # Compile eagerly so syntax errors surface here, not mid-request.
        for name in sorted(sources):
            try:
                env.get_template(name)
            except Exception as exc:
                msg = f"Template {name!r} failed to compile: {exc}"
                raise TemplateLoadError(msg) from exc

        with self._lock.write():
            self._env = env
            self._names = frozenset(sources)

        logger.info("Loaded %d template(s) from %s", len(sources), self.root)

    def _discover(self) -> dict[str, str]:
        """Map template name -> source for every file matching the suffix."""
        if not self.root.is_dir():
            msg = f"Template directory {str(self.root)!r} does not exist or is not a directory."
            raise TemplateLoadError(msg)

        sources: dict[str, str] = {}
        try:
            paths = sorted(self.root.rglob(f"*{self.suffix}"))
        except (OSError, ValueError) as exc:
            msg = f"Cannot scan {str(self.root)!r} for *{self.suffix}: {exc}"
            raise TemplateLoadError(msg) from exc

        for path in paths:
            if not path.is_file():
                continue
            rel = path.relative_to(self.root).as_posix()
            name = rel[: -len(self.suffix)]
            try:
                sources[name] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                msg = f"Cannot read template {rel!r}: {exc}"
                raise TemplateLoadError(msg) from exc
        return sources

    def _build_environment(self, sources: dict[str, str]) -> Environment:
        env = Environment(
            loader=DictLoader(sources),
            autoescape=self.autoescape,
        )
        if self._filters:
            env.update_filters(self._filters)
        for name, value in self._globals.items():
            env.add_global(name, value)
        return env

    # -- Rendering --

    def render(self, name: str, context: dict[str, Any]) -> str:
        """Render *name* from the active set under the read lock."""
        with self._lock.read():
            env = self._env
            if env is None or name not in self._names:
                raise RenderError(name, "template is not loaded")
            try:
                return env.get_template(name).render(context)
            except Exception as exc:
                raise RenderError(name, str(exc)) from exc

    def has_template(self, name: str) -> bool:
        with self._lock.read():
            return name in self._names

    @property
    def template_names(self) -> frozenset[str]:
        """Names in the active template set."""
        with self._lock.read():
            return self._names

    def __repr__(self) -> str:
        return f"KidaEngine(root={str(self.root)!r}, suffix={self.suffix!r})"
