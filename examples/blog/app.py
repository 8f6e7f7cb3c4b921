"""Blog — capsules declared in a TOML manifest, rendered with kida.

Demonstrates manifest loading, nested template names, template
inheritance, POST body echo, and the shared not-found page.

Run:
    python app.py
    capsula routes app:app
    capsula sitemap app:app --base-url https://example.com
"""

from pathlib import Path

from capsula import App, AppConfig
from capsula.manifest import load_manifest

HERE = Path(__file__).parent

app = App(
    load_manifest(HERE / "capsules.toml"),
    config=AppConfig(template_dir=HERE / "templates"),
)


if __name__ == "__main__":
    app.run()
