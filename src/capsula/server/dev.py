"""Development server: one pounce worker with file-watch reload.

Template edits count as code changes, so ``reload_include`` defaults to
watching ``.kida`` files alongside the Python sources.
"""

from capsula._internal.asgi import ASGIApp


def run_dev_server(
    app: ASGIApp,
    host: str,
    port: int,
    *,
    reload: bool = True,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
    app_path: str | None = None,
) -> None:
    """Serve *app* with pounce until interrupted.

    With *app_path* (``"module:attribute"``) pounce re-imports the app
    after each change; without it the live object keeps serving and only
    a restart picks up Python edits.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    Server(
        ServerConfig(
            host=host,
            port=port,
            workers=1,
            reload=reload,
            reload_include=reload_include,
            reload_dirs=reload_dirs,
        ),
        app,
        app_path=app_path,
    ).run()
