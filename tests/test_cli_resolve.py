"""Tests for capsula.cli._resolve — App import resolution."""

import sys
import types

import pytest

from capsula.app import App
from capsula.cli._resolve import resolve_app
from capsula.registry import CapsuleRegistry


@pytest.fixture
def _fake_app_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with capsula Apps on sys.modules."""
    mod = types.ModuleType("_fake_capsula_app")
    mod.app = App(CapsuleRegistry())  # type: ignore[attr-defined]
    mod.custom = App(CapsuleRegistry())  # type: ignore[attr-defined]
    mod.not_an_app = "just a string"  # type: ignore[attr-defined]
    mod.factory = lambda: App(CapsuleRegistry())  # type: ignore[attr-defined]
    mod.bad_factory = lambda: 42  # type: ignore[attr-defined]

    def broken_factory() -> App:
        raise RuntimeError("boom")

    mod.broken_factory = broken_factory  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_capsula_app", mod)


@pytest.mark.usefixtures("_fake_app_module")
class TestResolveApp:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_app("_fake_capsula_app:app"), App)

    def test_custom_attribute(self) -> None:
        assert resolve_app("_fake_capsula_app:custom") is sys.modules["_fake_capsula_app"].custom

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'app'."""
        assert resolve_app("_fake_capsula_app") is sys.modules["_fake_capsula_app"].app

    def test_factory_is_called(self) -> None:
        assert isinstance(resolve_app("_fake_capsula_app:factory"), App)

    def test_factory_returning_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"int, not a capsula\.App instance"):
            resolve_app("_fake_capsula_app:bad_factory")

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="boom"):
            resolve_app("_fake_capsula_app:broken_factory")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("nonexistent_module_xyz:app")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_app("_fake_capsula_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a capsula\.App instance"):
            resolve_app("_fake_capsula_app:not_an_app")
