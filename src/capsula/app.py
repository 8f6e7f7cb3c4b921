"""Capsula application class.

Binds a capsule registry and a template engine to the ASGI interface.
The route table is compiled on first use (``run()``, the first ASGI
call, or ``TestClient``) and never changes afterwards.
"""

import logging
import threading
from dataclasses import replace

from capsula._internal.asgi import Receive, Scope, Send
from capsula.config import AppConfig
from capsula.dispatch import Dispatcher
from capsula.errors import ConfigurationError
from capsula.registry import CapsuleRegistry
from capsula.routes import build_router
from capsula.routing.router import Router
from capsula.server.handler import handle_request
from capsula.state import AppState
from capsula.templating.engine import TemplateEngine
from capsula.templating.kida_engine import KidaEngine

logger = logging.getLogger("capsula.server")


class App:
    """The capsula application.

    Usage::

        registry = CapsuleRegistry()
        registry.add(Capsule("Home", "Landing page", "/", "index"))

        app = App(registry, config=AppConfig(template_dir="templates"))
        app.run()

    When *engine* is omitted a ``KidaEngine`` is built from the config's
    template settings.

    Thread safety:
        The registry is read-only once the app is serving. The freeze
        transition uses a Lock + double-check so exactly one worker
        compiles the route table.
    """

    __slots__ = (
        "_dispatcher",
        "_freeze_lock",
        "_frozen",
        "_router",
        "config",
        "state",
    )

    def __init__(
        self,
        registry: CapsuleRegistry,
        engine: TemplateEngine | None = None,
        *,
        config: AppConfig | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        if engine is None:
            engine = KidaEngine(
                self.config.template_dir,
                suffix=self.config.template_suffix,
                autoescape=self.config.autoescape,
            )
        self.state: AppState = AppState(registry=registry, engine=engine)
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._dispatcher: Dispatcher | None = None

    @property
    def registry(self) -> CapsuleRegistry:
        return self.state.registry

    @property
    def engine(self) -> TemplateEngine:
        return self.state.engine

    # -- Templates --

    def startup(self) -> None:
        """Compile templates and verify the not-found page.

        Compiles when ``compile_on_startup`` is set, or when nothing has
        loaded the not-found template yet (an app re-imported by the
        reloader). Runs during ASGI lifespan startup. Raises ``TemplateLoadError``
        or ``ConfigurationError``; either aborts server startup.
        """
        self._ensure_frozen()
        if self.config.compile_on_startup or not self.engine.has_template(
            self.config.not_found_template
        ):
            self.engine.load_all()
        self.check_templates()

    def check_templates(self) -> list[tuple[str, str]]:
        """Verify the loaded template set against the registry.

        Returns ``(uri, template)`` pairs for capsules whose template is
        missing; those are logged but only fail at render time.

        Raises:
            ConfigurationError: If the not-found template is missing.
        """
        name = self.config.not_found_template
        if not self.engine.has_template(name):
            where = self.config.template_dir
            msg = f"Required template {name!r} is not loaded (looked in {where!s})."
            raise ConfigurationError(msg)

        missing = [
            (uri, capsule.template)
            for uri, capsule in self.registry.all()
            if not self.engine.has_template(capsule.template)
        ]
        for uri, template in missing:
            logger.warning("Capsule %s references missing template %r", uri, template)
        return missing

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Load templates, then start the server (dev or production based on config.debug).

        Blocks until the process is terminated.
        """
        from capsula.server.adapter import PounceServer

        self._ensure_frozen()
        config = replace(self.config, host=host or self.config.host, port=port or self.config.port)
        PounceServer(config).serve_app(self)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._router is not None
        assert self._dispatcher is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            dispatcher=self._dispatcher,
            debug=self.config.debug,
            max_content_length=self.config.max_content_length,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Template compilation happens at startup, before the server
        accepts HTTP requests; a failure reports ``lifespan.startup.failed``.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self.startup()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the route table and dispatcher.

        MUST only be called while holding _freeze_lock.
        """
        self._router = build_router()
        self._dispatcher = Dispatcher(
            self.state,
            not_found_template=self.config.not_found_template,
        )
        self._frozen = True
