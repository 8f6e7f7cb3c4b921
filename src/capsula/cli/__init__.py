"""Capsula CLI — serve, inspect, and validate capsule apps.

Entry point registered as ``capsula`` in ``pyproject.toml``::

    [project.scripts]
    capsula = "capsula.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``capsula`` command."""
    parser = argparse.ArgumentParser(
        prog="capsula",
        description="Capsula — a capsule-based content router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- capsula run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start dev or production server")
    run_parser.add_argument("app", help="Import string (e.g. mysite:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--production",
        action="store_true",
        help="Run in production mode (multi-worker)",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )

    # -- capsula routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered capsules")
    routes_parser.add_argument("app", help="Import string (e.g. mysite:app)")

    # -- capsula check ----------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Load templates and verify every capsule can render"
    )
    check_parser.add_argument("app", help="Import string (e.g. mysite:app)")

    # -- capsula sitemap --------------------------------------------------
    sitemap_parser = subparsers.add_parser("sitemap", help="Print sitemap.xml for the registry")
    sitemap_parser.add_argument("app", help="Import string (e.g. mysite:app)")
    sitemap_parser.add_argument(
        "--base-url",
        required=True,
        help="Absolute site URL prefixed to each capsule URI",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from capsula.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from capsula.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from capsula.cli._check import run_check

        run_check(args)
    elif args.command == "sitemap":
        from capsula.cli._sitemap import run_sitemap

        run_sitemap(args)
