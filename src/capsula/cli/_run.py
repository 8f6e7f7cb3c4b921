"""``capsula run`` — development or production server command."""

import argparse
from dataclasses import replace

from capsula.cli._resolve import resolve_or_exit
from capsula.server.adapter import PounceServer


def run_server(args: argparse.Namespace) -> None:
    """Start the capsula server (dev or production mode).

    Production mode is used with ``--production`` or whenever the app is
    not configured with ``debug=True``. Templates are loaded before the
    server binds.
    """
    app = resolve_or_exit(args)
    dev = app.config.debug and not args.production

    config = replace(
        app.config,
        host=args.host or app.config.host,
        port=args.port or app.config.port,
        debug=dev,
    )
    PounceServer(config).serve_app(
        app,
        app_path=args.app if dev else None,
        workers=args.workers,
    )
