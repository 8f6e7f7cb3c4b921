"""``capsula routes`` — list registered capsules.

Prints one row per capsule with URI, declared method, template and name.
"""

import argparse

from capsula.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    app = resolve_or_exit(args)

    rows = [
        (uri, str(capsule.method), capsule.template, capsule.name)
        for uri, capsule in sorted(app.registry.all())
    ]
    if not rows:
        print("No capsules registered.")
        return

    headers = ("URI", "METHOD", "TEMPLATE", "NAME")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
