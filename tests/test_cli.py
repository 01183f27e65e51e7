"""Tests for the CLI module."""

import logging
from unittest.mock import patch

from page_baker.cli import main


class TestCLIBake:
    """Tests for the bake command."""

    def test_bake_page(self, site_dir, bake_dir):
        """bake writes the page to the output directory."""
        result = main(["bake", "--site", str(site_dir), "--uri", "about", "--output", str(bake_dir)])

        assert result == 0
        assert (bake_dir / "about.html").exists()

    def test_bake_paginated_page(self, site_dir, bake_dir, caplog):
        caplog.set_level(logging.INFO)
        result = main(["bake", "--site", str(site_dir), "--uri", "blog", "--output", str(bake_dir)])

        assert result == 0
        assert (bake_dir / "blog" / "3.html").exists()
        assert "Files: 3" in caplog.text
        assert "Paginated: yes" in caplog.text

    def test_bake_site_root(self, site_dir, bake_dir):
        result = main(["bake", "--site", str(site_dir), "--uri", "", "--output", str(bake_dir)])

        assert result == 0
        assert (bake_dir / "index.html").exists()

    def test_bake_pretty_urls(self, site_dir, bake_dir):
        result = main([
            "bake",
            "--site", str(site_dir),
            "--uri", "blog",
            "--output", str(bake_dir),
            "--pretty-urls",
        ])

        assert result == 0
        assert (bake_dir / "blog" / "2" / "index.html").exists()

    def test_bake_copy_assets(self, site_dir, bake_dir):
        result = main([
            "bake",
            "--site", str(site_dir),
            "--uri", "about",
            "--output", str(bake_dir),
            "--copy-assets",
        ])

        assert result == 0
        assert (bake_dir / "about" / "logo.png").exists()

    def test_bake_copy_assets_from_config(self, site_dir, bake_dir):
        config = site_dir / "config.yml"
        config.write_text(config.read_text().replace("baker:\n", "baker:\n  copy_assets: true\n"))

        result = main(["bake", "--site", str(site_dir), "--uri", "about", "--output", str(bake_dir)])

        assert result == 0
        assert (bake_dir / "about" / "logo.png").exists()

    def test_bake_portable_urls(self, site_dir, bake_dir):
        result = main([
            "bake",
            "--site", str(site_dir),
            "--uri", "",
            "--output", str(bake_dir),
            "--portable-urls",
        ])

        assert result == 0
        assert 'href="./about.html"' in (bake_dir / "index.html").read_text()

    def test_bake_extra_data(self, site_dir, bake_dir):
        (site_dir / "pages" / "hello.html").write_text("Hello {{ name }}")

        result = main([
            "bake",
            "--site", str(site_dir),
            "--uri", "hello",
            "--output", str(bake_dir),
            "--data", '{"name": "World"}',
        ])

        assert result == 0
        assert (bake_dir / "hello.html").read_text() == "Hello World"

    def test_bake_invalid_data(self, site_dir, bake_dir, caplog):
        result = main([
            "bake", "--site", str(site_dir), "--uri", "about", "--data", "{not json",
        ])

        assert result == 1
        assert "Invalid --data JSON" in caplog.text

    def test_bake_data_must_be_object(self, site_dir, caplog):
        result = main(["bake", "--site", str(site_dir), "--uri", "about", "--data", "[1, 2]"])

        assert result == 1
        assert "--data must be a JSON object" in caplog.text

    def test_bake_missing_site(self, tmp_path, caplog):
        result = main(["bake", "--site", str(tmp_path / "nope"), "--uri", "about"])

        assert result == 1
        assert "Site directory not found" in caplog.text

    def test_bake_missing_page(self, site_dir, bake_dir, caplog):
        result = main(["bake", "--site", str(site_dir), "--uri", "nowhere", "--output", str(bake_dir)])

        assert result == 1
        assert "No page found for URI 'nowhere'" in caplog.text

    @patch("page_baker.cli.PageBaker")
    def test_bake_failure(self, mock_baker_class, site_dir, bake_dir, caplog):
        mock_baker_class.return_value.bake.side_effect = RuntimeError("disk full")

        result = main(["bake", "--site", str(site_dir), "--uri", "about", "--output", str(bake_dir)])

        assert result == 1
        assert "Failed to bake page: disk full" in caplog.text


class TestCLIResolvePath:
    """Tests for the resolve-path command."""

    def test_resolve_path(self, capsys):
        result = main(["resolve-path", "--uri", "blog/post", "--page", "3", "--output", "/out"])

        assert result == 0
        assert capsys.readouterr().out.strip() == "/out/blog/post/3.html"

    def test_resolve_path_pretty(self, capsys):
        result = main([
            "resolve-path", "--uri", "blog/post", "--page", "2", "--output", "/out", "--pretty-urls",
        ])

        assert result == 0
        assert capsys.readouterr().out.strip() == "/out/blog/post/2/index.html"

    def test_resolve_path_invalid_page(self, caplog):
        result = main(["resolve-path", "--uri", "blog", "--page", "0"])

        assert result == 1
        assert "Invalid page number: 0" in caplog.text


class TestCLIMain:
    """Tests for the main entry point."""

    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "page-baker" in capsys.readouterr().out
