"""Tests for capsula.templating.kida_engine — file-backed kida engine."""

from pathlib import Path

import pytest
from helpers import NOT_FOUND, PAGE, write_templates

from capsula.capsule import Capsule, Method
from capsula.errors import RenderError, TemplateLoadError
from capsula.templating.kida_engine import KidaEngine

BROKEN = "{% if name %}<p>never closed</p>"


class TestLoadAll:
    def test_starts_empty(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        assert engine.template_names == frozenset()
        assert not engine.has_template("404")

    def test_loads_all_matching_files(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()
        assert engine.template_names == {"404", "page", "echo"}

    def test_names_are_relative_without_suffix(self, tmp_path: Path) -> None:
        write_templates(tmp_path, {"404": NOT_FOUND, "blog/post": PAGE, "a/b/c": PAGE})
        engine = KidaEngine(tmp_path)
        engine.load_all()
        assert engine.template_names == {"404", "blog/post", "a/b/c"}

    def test_ignores_other_extensions(self, tmp_path: Path) -> None:
        write_templates(tmp_path, {"404": NOT_FOUND})
        (tmp_path / "notes.txt").write_text("{{ broken", encoding="utf-8")
        (tmp_path / "plain.html").write_text("<p>hi</p>", encoding="utf-8")
        engine = KidaEngine(tmp_path)
        engine.load_all()
        assert engine.template_names == {"404"}

    def test_custom_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "home.kd").write_text("<p>home</p>", encoding="utf-8")
        engine = KidaEngine(tmp_path, suffix=".kd")
        engine.load_all()
        assert engine.template_names == {"home"}

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        engine = KidaEngine(tmp_path / "nowhere")
        with pytest.raises(TemplateLoadError):
            engine.load_all()

    def test_syntax_error_raises(self, tmp_path: Path) -> None:
        write_templates(tmp_path, {"404": NOT_FOUND, "broken": BROKEN})
        engine = KidaEngine(tmp_path)
        with pytest.raises(TemplateLoadError, match="broken"):
            engine.load_all()

    def test_failed_load_keeps_previous_set(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()

        write_templates(template_dir, {"broken": BROKEN})
        with pytest.raises(TemplateLoadError):
            engine.load_all()

        assert "broken" not in engine.template_names
        context = {"name": "N", "description": "D", "uri": "/u", "method": "GET"}
        html = engine.render("page", context)
        assert "<h1>N</h1>" in html

    def test_reload_replaces_whole_set(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()
        assert engine.has_template("echo")

        (template_dir / "echo.html.kida").unlink()
        write_templates(template_dir, {"fresh": "<p>fresh</p>"})
        engine.load_all()

        assert not engine.has_template("echo")
        assert engine.has_template("fresh")
        with pytest.raises(RenderError):
            engine.render("echo", {"data": {"body": "x"}})

    def test_reload_picks_up_edits(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()
        write_templates(template_dir, {"echo": "<b>{{ data.body }}</b>"})
        engine.load_all()
        assert engine.render("echo", {"data": {"body": "x"}}) == "<b>x</b>"


class TestRender:
    def test_render_before_load_raises(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        with pytest.raises(RenderError):
            engine.render("404", {})

    def test_render_unknown_template_raises(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()
        with pytest.raises(RenderError) as exc_info:
            engine.render("missing", {})
        assert exc_info.value.template == "missing"

    def test_render_with_context(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()
        capsule = Capsule("Title", "Words", "/t", "page", Method.PUT)
        html = engine.render("page", engine.context_for(capsule))
        assert "<h1>Title</h1>" in html
        assert "<p>Words</p>" in html
        assert "<span>/t</span>" in html
        assert "<em>PUT</em>" in html

    def test_autoescape(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        engine.load_all()
        html = engine.render("echo", {"data": {"body": "<script>"}})
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_globals_are_available(self, tmp_path: Path) -> None:
        write_templates(tmp_path, {"footer": "<footer>{{ site_name }}</footer>"})
        engine = KidaEngine(tmp_path, globals={"site_name": "Capsula"})
        engine.load_all()
        assert engine.render("footer", {}) == "<footer>Capsula</footer>"


class TestContextFor:
    def test_base_fields(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        capsule = Capsule("Home", "Landing", "/", "page", Method.DELETE, data={"k": [1, 2]})
        assert engine.context_for(capsule) == {
            "name": "Home",
            "description": "Landing",
            "uri": "/",
            "method": "DELETE",
            "data": {"k": [1, 2]},
        }

    def test_reflects_payload_variant(self, template_dir: Path) -> None:
        engine = KidaEngine(template_dir)
        capsule = Capsule("Home", "", "/", "page")
        assert engine.context_for(capsule)["data"] == {}
        fresh = capsule.with_data({"fresh": True})
        assert engine.context_for(fresh)["data"] == {"fresh": True}
        assert engine.context_for(capsule)["data"] == {}
        assert engine.context_for(capsule)["data"] == {"fresh": True}
