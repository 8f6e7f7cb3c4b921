"""Application configuration.

One frozen dataclass carries everything an ``App`` needs: bind address,
template discovery, the not-found page, and the pounce production knobs.
Invalid combinations fail at construction with ``ConfigurationError``.
"""

from dataclasses import dataclass
from pathlib import Path

from capsula.errors import ConfigurationError

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    Every field has a default; override what you need::

        config = AppConfig(debug=True, port=3000, template_dir="site")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = (".kida",)
    reload_dirs: tuple[str, ...] = ()

    # Templates
    template_dir: str | Path = "templates"
    template_suffix: str = ".html.kida"
    autoescape: bool = True
    not_found_template: str = "404"
    compile_on_startup: bool = True  # recompile during ASGI lifespan startup

    # Limits
    max_content_length: int = 16 * 1024 * 1024  # 16 MB of POST body

    # Production (pounce)
    workers: int = 0  # 0 = one per CPU
    lifecycle_logging: bool = True
    log_format: str = "json"
    log_level: str = "info"
    max_connections: int = 1000
    backlog: int = 2048
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0

    # TLS (optional, both or neither)
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}."
            raise ConfigurationError(msg)
        if not self.template_suffix:
            msg = "template_suffix must not be empty."
            raise ConfigurationError(msg)
        if not self.not_found_template:
            msg = "not_found_template must name a template."
            raise ConfigurationError(msg)
        if self.workers < 0:
            msg = f"workers must be >= 0, got {self.workers}."
            raise ConfigurationError(msg)
        if self.log_level not in _LOG_LEVELS:
            msg = f"log_level must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}."
            raise ConfigurationError(msg)
        if (self.ssl_certfile is None) != (self.ssl_keyfile is None):
            msg = "ssl_certfile and ssl_keyfile must be set together."
            raise ConfigurationError(msg)
