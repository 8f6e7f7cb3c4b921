"""Tests for capsula.config — AppConfig defaults and immutability."""

import dataclasses

import pytest

from capsula.config import AppConfig
from capsula.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.debug is False
        assert config.template_dir == "templates"
        assert config.template_suffix == ".html.kida"
        assert config.not_found_template == "404"
        assert config.autoescape is True
        assert config.compile_on_startup is True

    def test_reload_watches_templates(self) -> None:
        assert ".kida" in AppConfig().reload_include

    def test_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 9000  # type: ignore[misc]

    def test_replace(self) -> None:
        config = dataclasses.replace(AppConfig(), port=3000, debug=True)
        assert config.port == 3000
        assert config.debug is True
        assert config.host == "127.0.0.1"

    def test_tls_off_by_default(self) -> None:
        config = AppConfig()
        assert config.ssl_certfile is None
        assert config.ssl_keyfile is None


class TestAppConfigValidation:
    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("port", 70000, "port"),
            ("port", -1, "port"),
            ("template_suffix", "", "template_suffix"),
            ("not_found_template", "", "not_found_template"),
            ("workers", -2, "workers"),
            ("log_level", "loud", "log_level"),
            ("ssl_certfile", "cert.pem", "together"),
        ],
    )
    def test_rejects(self, field: str, value: object, message: str) -> None:
        with pytest.raises(ConfigurationError, match=message):
            AppConfig(**{field: value})  # type: ignore[arg-type]

    def test_tls_pair(self) -> None:
        config = AppConfig(ssl_certfile="cert.pem", ssl_keyfile="key.pem")
        assert config.ssl_keyfile == "key.pem"
