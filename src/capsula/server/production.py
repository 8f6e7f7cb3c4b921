"""Production server.

Starts a multi-worker pounce server configured from ``AppConfig``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from capsula.config import AppConfig

if TYPE_CHECKING:
    from capsula.app import App


def run_production_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 8000,
    *,
    config: AppConfig | None = None,
    workers: int | None = None,
) -> None:
    """Run a capsula app in production mode.

    Args:
        app: Capsula App instance.
        host: Bind address (default: 0.0.0.0 for all interfaces).
        port: Bind port (default: 8000).
        config: Source of worker, logging, connection and TLS settings.
            Defaults to ``app.config``.
        workers: Override ``config.workers`` (0 = auto-detect from CPU count).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    cfg = config or app.config

    server_config = ServerConfig(
        host=host,
        port=port,
        workers=cfg.workers if workers is None else workers,
        lifecycle_logging=cfg.lifecycle_logging,
        log_format=cfg.log_format,
        log_level=cfg.log_level,
        max_connections=cfg.max_connections,
        backlog=cfg.backlog,
        keep_alive_timeout=cfg.keep_alive_timeout,
        request_timeout=cfg.request_timeout,
        ssl_certfile=cfg.ssl_certfile,
        ssl_keyfile=cfg.ssl_keyfile,
    )

    server = Server(server_config, app)
    server.run()
