"""``capsula check`` — verify templates before deploying.

Loads the template set exactly as server startup does, then reports the
not-found template and every capsule whose template is missing.
Exits with status 1 when anything would fail to render.
"""

import argparse
import sys

from capsula.cli._resolve import resolve_or_exit
from capsula.errors import ConfigurationError, TemplateLoadError


def run_check(args: argparse.Namespace) -> None:
    app = resolve_or_exit(args)

    try:
        app.engine.load_all()
        missing = app.check_templates()
    except (TemplateLoadError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for uri, template in missing:
        print(f"Error: capsule {uri} references missing template {template!r}", file=sys.stderr)
    if missing:
        raise SystemExit(1)

    print(f"OK: {len(app.registry)} capsule(s), all templates present.")
