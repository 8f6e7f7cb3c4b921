"""Server adapters — own the listen loop for a registry + engine pair.

``ServerAdapter`` is the capability interface; ``PounceServer`` is the
concrete binding that serves a capsula ``App`` with pounce. ``App.run()``
and ``capsula run`` both start through ``PounceServer.serve_app`` so the
templates are always loaded before a socket is bound.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from capsula.config import AppConfig
from capsula.errors import StartupError
from capsula.registry import CapsuleRegistry
from capsula.templating.engine import TemplateEngine

if TYPE_CHECKING:
    from capsula.app import App

logger = logging.getLogger("capsula.server")


class ServerAdapter(ABC):
    """Capability interface for anything that can serve capsules."""

    @abstractmethod
    def serve(self, registry: CapsuleRegistry, engine: TemplateEngine) -> None:
        """Load templates, then serve *registry* through *engine* until terminated.

        Raises ``TemplateLoadError`` before anything is bound if the
        templates fail to load, and ``StartupError`` if binding fails.
        """


class PounceServer(ServerAdapter):
    """Serve capsules over HTTP with pounce.

    Startup sequence:

    1. ``engine.load_all()``; a failure aborts before any socket is bound.
    2. Hand the ``App`` to the pounce dev server (``config.debug``) or
       the multi-worker production server.
    3. The app's lifespan startup checks the not-found template exists,
       compiling again when ``compile_on_startup`` is set.
    4. Serve until the process is terminated.

    Usage::

        PounceServer(AppConfig(port=3000)).serve(registry, KidaEngine("templates"))
    """

    __slots__ = ("config",)

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()

    def serve(self, registry: CapsuleRegistry, engine: TemplateEngine) -> None:
        from capsula.app import App

        self.serve_app(App(registry, engine, config=self.config))

    def serve_app(
        self,
        app: App,
        *,
        app_path: str | None = None,
        workers: int | None = None,
    ) -> None:
        """Load *app*'s templates, then run it on ``config.host:config.port``.

        *app_path* is the ``module:attr`` import string the dev server
        reloads from; *workers* overrides ``config.workers`` in production.
        """
        app.engine.load_all()
        host, port = self.config.host, self.config.port
        logger.info("Serving %d capsule(s) on %s:%d", len(app.registry), host, port)

        try:
            if self.config.debug:
                from capsula.server.dev import run_dev_server

                run_dev_server(
                    app,
                    host,
                    port,
                    reload=True,
                    reload_include=self.config.reload_include,
                    reload_dirs=self.config.reload_dirs,
                    app_path=app_path,
                )
            else:
                from capsula.server.production import run_production_server

                run_production_server(
                    app, host=host, port=port, config=self.config, workers=workers
                )
        except OSError as exc:
            msg = f"Cannot listen on {host}:{port}: {exc}"
            raise StartupError(msg) from exc
