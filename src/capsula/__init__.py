"""Capsula — a capsule-based content router.

Maps URI paths to capsules (a template name plus metadata and an
optional payload) and renders them with kida.

Basic usage::

    from capsula import App, Capsule, CapsuleRegistry

    registry = CapsuleRegistry()
    registry.add(Capsule("Home", "Landing page", "/", "index"))

    app = App(registry)
    app.run()

From a TOML manifest::

    from capsula.manifest import load_manifest
    app = App(load_manifest("capsules.toml"))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "AppState",
    "CapsulaError",
    "Capsule",
    "CapsuleRegistry",
    "ConfigurationError",
    "Dispatcher",
    "KidaEngine",
    "Method",
    "PounceServer",
    "RenderError",
    "ServerAdapter",
    "StartupError",
    "TemplateEngine",
    "TemplateLoadError",
    "normalize_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import capsula`` fast while providing a clean top-level API.
    """
    if name == "App":
        from capsula.app import App

        return App

    if name == "AppConfig":
        from capsula.config import AppConfig

        return AppConfig

    if name == "AppState":
        from capsula.state import AppState

        return AppState

    if name in ("Capsule", "Method"):
        from capsula import capsule as _capsule

        return getattr(_capsule, name)

    if name == "CapsuleRegistry":
        from capsula.registry import CapsuleRegistry

        return CapsuleRegistry

    if name in ("Dispatcher", "normalize_path"):
        from capsula import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name in ("KidaEngine", "TemplateEngine"):
        from capsula import templating as _templating

        return getattr(_templating, name)

    if name in ("PounceServer", "ServerAdapter"):
        from capsula.server import adapter as _adapter

        return getattr(_adapter, name)

    if name in (
        "CapsulaError",
        "ConfigurationError",
        "RenderError",
        "StartupError",
        "TemplateLoadError",
    ):
        from capsula import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
