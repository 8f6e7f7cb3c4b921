"""Tests for the lazy top-level API in capsula/__init__.py."""

import pytest

import capsula


class TestLazyImports:
    @pytest.mark.parametrize("name", capsula.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        assert getattr(capsula, name) is not None

    def test_identity_with_submodules(self) -> None:
        from capsula.app import App
        from capsula.registry import CapsuleRegistry
        from capsula.templating.kida_engine import KidaEngine

        assert capsula.App is App
        assert capsula.CapsuleRegistry is CapsuleRegistry
        assert capsula.KidaEngine is KidaEngine

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            capsula.Nope  # noqa: B018

    def test_version(self) -> None:
        assert capsula.__version__ == "0.1.0"
