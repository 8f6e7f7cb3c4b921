"""Template sources and engine doubles shared by the test modules."""

from pathlib import Path
from typing import Any

from capsula.errors import RenderError
from capsula.templating.engine import TemplateEngine

PAGE = "<h1>{{ name }}</h1><p>{{ description }}</p><span>{{ uri }}</span><em>{{ method }}</em>"
ECHO = "<pre>{{ data.body }}</pre>"
NOT_FOUND = '<h1>Not Found</h1><p>{{ path | default("") }}</p>'


def write_templates(root: Path, templates: dict[str, str]) -> Path:
    """Write ``{name: source}`` as ``<root>/<name>.html.kida`` files."""
    for name, source in templates.items():
        path = root / f"{name}.html.kida"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
    return root


class RecordingEngine(TemplateEngine):
    """Engine double: ``render`` returns a marker and records its arguments."""

    def __init__(self, names: set[str] | None = None) -> None:
        self.names = set(names if names is not None else {"404", "page", "echo"})
        self.renders: list[tuple[str, dict[str, Any]]] = []
        self.loads = 0

    def load_all(self) -> None:
        self.loads += 1

    def render(self, name: str, context: dict[str, Any]) -> str:
        if name not in self.names:
            raise RenderError(name, "template is not loaded")
        self.renders.append((name, context))
        return f"rendered:{name}"

    def has_template(self, name: str) -> bool:
        return name in self.names

    @property
    def last(self) -> tuple[str, dict[str, Any]]:
        return self.renders[-1]
