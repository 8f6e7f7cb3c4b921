"""``capsula sitemap`` — print sitemap.xml for an app's registry."""

import argparse
import sys

from capsula.cli._resolve import resolve_or_exit
from capsula.sitemap import build_sitemap


def run_sitemap(args: argparse.Namespace) -> None:
    app = resolve_or_exit(args)
    sys.stdout.write(build_sitemap(app.registry, args.base_url))
