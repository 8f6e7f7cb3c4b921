"""Shared per-process state handed to every request handler.

An explicit object instead of module globals, so tests can build as many
isolated apps as they like.
"""

from dataclasses import dataclass

from capsula.registry import CapsuleRegistry
from capsula.templating.engine import TemplateEngine


@dataclass(frozen=True, slots=True)
class AppState:
    """The registry + engine pair published to request handlers.

    Both are shared read-only after startup. The registry has no locking;
    the engine guards its own compiled set.
    """

    registry: CapsuleRegistry
    engine: TemplateEngine
