"""Locate the ``App`` a subcommand operates on.

Every ``capsula`` subcommand takes an import string such as
``"mysite:app"``, ``"mysite"`` (attribute defaults to ``app``) or
``"mysite.main:create_app"`` (a zero-argument factory).
"""

import argparse
import importlib
import sys

from capsula.app import App


def resolve_app(import_string: str) -> App:
    """Import *import_string* and return the capsula App it names.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the module lacks the attribute.
        TypeError: If the object (or the factory's result) is not an ``App``,
            or the factory raised.
    """
    module_path, _, attr_name = import_string.partition(":")
    target = getattr(importlib.import_module(module_path), attr_name or "app")

    if not isinstance(target, App) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"App factory {import_string!r} raised {type(exc).__name__}: {exc}"
            raise TypeError(msg) from exc

    if isinstance(target, App):
        return target
    msg = f"{import_string!r} resolved to {type(target).__name__}, not a capsula.App instance"
    raise TypeError(msg)


def resolve_or_exit(args: argparse.Namespace) -> App:
    """Resolve ``args.app``; on failure print ``Error: ...`` and exit 1."""
    try:
        return resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
