"""Sitemap generation from the capsule registry."""

from xml.sax.saxutils import escape

from capsula.capsule import Method
from capsula.registry import CapsuleRegistry

_XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_uris(registry: CapsuleRegistry) -> list[str]:
    """Sorted URIs of every capsule declared for GET."""
    return sorted(uri for uri, capsule in registry.all() if capsule.method == Method.GET)


def build_sitemap(registry: CapsuleRegistry, base_url: str) -> str:
    """Render a sitemap.xml document for *registry*.

    *base_url* is joined with each capsule URI
    (``"https://example.com"`` + ``"/blog"``).
    """
    base = base_url.rstrip("/")
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{_XMLNS}">',
    ]
    lines.extend(f"  <url><loc>{escape(base + uri)}</loc></url>" for uri in sitemap_uris(registry))
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
