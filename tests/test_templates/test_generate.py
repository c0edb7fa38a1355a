"""Tests for swiftfw.templates.generate_project()."""

import pytest

from swiftfw.core.errors import TemplateRenderError
from swiftfw.templates import generate_project
from swiftfw.templates.manifest import MANIFEST, PLACEHOLDER
from swiftfw.templates.render import TemplateRenderer


def tree(root):
    """Map of relative path -> bytes for every file under root."""
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


class TestGenerateProject:
    """Tests for generate_project()."""

    def test_writes_everything(self, tmp_path, widget_config):
        result = generate_project(tmp_path, widget_config)

        assert len(result.rendered) + len(result.copied) == len(MANIFEST)
        assert result.travis == tmp_path / ".travis.yml"
        assert result.podspec == tmp_path / "Widget.podspec"
        assert len(result.all_paths) == len(MANIFEST) + 2
        assert set(tree(tmp_path)) == {
            str(p.relative_to(tmp_path)) for p in result.all_paths
        }

    def test_no_placeholder_in_tree(self, tmp_path, widget_config):
        generate_project(tmp_path, widget_config)

        for path in tmp_path.rglob("*"):
            assert PLACEHOLDER not in str(path.relative_to(tmp_path))
        assert (tmp_path / "Widget.xcodeproj" / "project.pbxproj").exists()
        assert (tmp_path / "Widget.xcodeproj" / "xcshareddata" / "xcschemes" / "Widget.xcscheme").exists()
        assert not (tmp_path / "PROJECT_NAME.xcodeproj").exists()

    def test_acme_widget(self, tmp_path, widget_config):
        generate_project(tmp_path, widget_config)

        podspec = (tmp_path / "Widget.podspec").read_text()
        assert "com.acme" in podspec
        assert "Acme" in podspec
        assert (tmp_path / "Widget.xcodeproj" / "project.pbxproj").is_file()

    def test_without_cocoapods(self, tmp_path, widget_config):
        widget_config.cocoapods = False
        widget_config.github_user = None

        result = generate_project(tmp_path, widget_config)

        assert result.podspec is None
        assert list(tmp_path.glob("*.podspec")) == []
        assert (tmp_path / ".travis.yml").exists()

    def test_identical_output_for_identical_input(self, tmp_path, widget_config):
        first = tmp_path / "first"
        second = tmp_path / "second"
        generate_project(first, widget_config)
        generate_project(second, widget_config)
        assert tree(first) == tree(second)

    def test_regenerating_overwrites(self, tmp_path, widget_config):
        generate_project(tmp_path, widget_config)
        before = tree(tmp_path)
        generate_project(tmp_path, widget_config)
        assert tree(tmp_path) == before

    def test_template_failure_is_fatal(self, tmp_path, widget_config):
        empty_bundle = tmp_path / "bundle"
        empty_bundle.mkdir()
        out = tmp_path / "out"

        with pytest.raises(TemplateRenderError):
            generate_project(out, widget_config, renderer=TemplateRenderer(empty_bundle))

        assert not (out / ".travis.yml").exists()
