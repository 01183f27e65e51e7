"""Pytest fixtures for page-baker tests."""

import pytest

from page_baker.config import SiteConfig
from page_baker.site import Site

SITE_CONFIG = """\
site:
  title: Test Site
  root: /
  pretty_urls: false
  items_per_page: 2
baker:
  portable_urls: false
"""

LAYOUT = """\
<html><head><title>{{ site.title }}</title></head>
<body>{{ content }}</body></html>
"""

INDEX_PAGE = """\
---
title: Home
---
<h1>{{ page.title }}</h1><a href="{{ page_url('about') }}">About</a>
"""

ABOUT_PAGE = """\
---
title: About
layout: default
---
<p>About us</p><img src="{{ asset.logo }}">
"""

BLOG_PAGE = """\
---
title: Blog
paginate: posts
---
{% for post in pagination.items %}<h2>{{ post.title }}</h2>{% endfor %}
{% if pagination.has_more %}<a href="{{ pagination.next_page_url }}">Next</a>{% endif %}
"""

LAZY_PAGE = """\
---
title: Lazy
paginate: posts
---
{% if pagination %}<p>Has a paginator, never uses it</p>{% endif %}
"""

FEED_PAGE = """\
<feed><link href="{{ page_url('') }}"/></feed>
"""

POSTS = """\
- title: First
- title: Second
- title: Third
- title: Fourth
- title: Fifth
"""


@pytest.fixture
def site_dir(tmp_path):
    """Create a sample site directory.

    Five posts at two items per page make `blog` three pages long.
    """
    root = tmp_path / "site"
    pages_dir = root / "pages"
    pages_dir.mkdir(parents=True)
    (root / "templates").mkdir()
    (root / "data").mkdir()

    (root / "config.yml").write_text(SITE_CONFIG)
    (root / "templates" / "default.html").write_text(LAYOUT)
    (root / "data" / "posts.yml").write_text(POSTS)

    (pages_dir / "index.html").write_text(INDEX_PAGE)
    (pages_dir / "about.html").write_text(ABOUT_PAGE)
    (pages_dir / "blog.html").write_text(BLOG_PAGE)
    (pages_dir / "lazy.html").write_text(LAZY_PAGE)
    (pages_dir / "feed.xml").write_text(FEED_PAGE)

    about_assets = pages_dir / "about-assets"
    about_assets.mkdir()
    (about_assets / "logo.png").write_bytes(b"fake logo")
    (about_assets / "photo.jpg").write_bytes(b"fake photo")

    blog_assets = pages_dir / "blog-assets"
    blog_assets.mkdir()
    (blog_assets / "banner.png").write_bytes(b"fake banner")

    return root


@pytest.fixture
def site(site_dir):
    """A Site loaded from the sample site directory."""
    return Site.from_directory(site_dir)


@pytest.fixture
def bake_dir(tmp_path):
    """Output directory for baked files."""
    return tmp_path / "out"


@pytest.fixture
def empty_site(tmp_path):
    """A Site with no configuration file and an empty pages directory."""
    root = tmp_path / "empty-site"
    (root / "pages").mkdir(parents=True)
    return Site(root, SiteConfig())
