"""Template engines — the ``TemplateEngine`` contract and the kida-backed engine."""

from capsula.templating.engine import TemplateEngine
from capsula.templating.kida_engine import KidaEngine

__all__ = ["KidaEngine", "TemplateEngine"]
