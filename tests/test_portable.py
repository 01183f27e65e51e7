"""Tests for the portable URL scope."""

from unittest.mock import patch

import pytest

from page_baker.portable import PortableUrlScope


class TestPortableUrlScope:
    """Tests for PortableUrlScope."""

    def test_enter_sets_relative_root(self, site, bake_dir):
        scope = PortableUrlScope(site, bake_dir)

        previous = scope.enter(f"{bake_dir.as_posix()}/blog/post/index.html")

        assert previous == "/"
        assert site.config.get_value("site/root") == "../../"

    def test_enter_at_top_level(self, site, bake_dir):
        scope = PortableUrlScope(site, bake_dir)

        scope.enter(f"{bake_dir.as_posix()}/index.html")

        assert site.config.get_value("site/root") == "./"

    def test_exit_restores_root(self, site, bake_dir):
        site.config.set_value("site/root", "/docs/")
        scope = PortableUrlScope(site, bake_dir)

        previous = scope.enter(f"{bake_dir.as_posix()}/about.html")
        scope.exit(previous)

        assert site.config.get_value_unchecked("site/root") == "/docs/"

    def test_enter_recomputes_uri_decorators(self, site, bake_dir):
        site.get_uri_decorators()
        generation = site.decorators_generation

        PortableUrlScope(site, bake_dir).enter(f"{bake_dir.as_posix()}/blog/index.html")

        assert site.decorators_generation == generation + 1
        assert site.page_url("about") == "../about.html"

    def test_enter_unloads_loaded_pages(self, site, bake_dir):
        """Pages rendered with the old root must not keep their cached output."""
        about = site.get_page("about")
        about.rendered_content = '<a href="/index.html">Home</a>'
        blog = site.get_page("blog")
        blog.get_page_data()

        PortableUrlScope(site, bake_dir).enter(f"{bake_dir.as_posix()}/index.html")

        assert not about.is_loaded
        assert not blog.is_loaded

    def test_applied_restores_root(self, site, bake_dir):
        scope = PortableUrlScope(site, bake_dir)

        with scope.applied(f"{bake_dir.as_posix()}/a/b/index.html") as root:
            assert root == "../../"
            assert site.page_url("") == "../../index.html"

        assert site.config.get_value("site/root") == "/"
        assert site.page_url("") == "/index.html"

    def test_applied_restores_root_on_error(self, site, bake_dir):
        scope = PortableUrlScope(site, bake_dir)

        with pytest.raises(RuntimeError):
            with scope.applied(f"{bake_dir.as_posix()}/a/index.html"):
                raise RuntimeError("render failed")

        assert site.config.get_value("site/root") == "/"
        assert site.get_uri_decorators().prefix == "/"

    def test_enter_restores_root_if_unloading_fails(self, site, bake_dir):
        site.get_page("about")
        scope = PortableUrlScope(site, bake_dir)

        with patch("page_baker.page.Page.unload", side_effect=OSError("boom")):
            with pytest.raises(OSError):
                scope.enter(f"{bake_dir.as_posix()}/a/index.html")

        assert site.config.get_value("site/root") == "/"
