"""Jinja2 page renderer.

Renders a page's template body with its page data, optionally wrapped in a
layout from the site's `templates/` directory.
"""

import logging

from jinja2 import Environment, FileSystemLoader, TemplateError
from markupsafe import Markup

from .exceptions import RenderError
from .filters import FILTERS

logger = logging.getLogger(__name__)

LAYOUT_EXTENSION = ".html"


class PageRenderer:
    """Render pages of a site to text.

    Templates can call `page_url(uri, page_number=1)` to link to other pages;
    it uses the site's current URI decorators, so links follow the site
    root in effect at render time.

    Attributes:
        site: The site whose pages are rendered
    """

    def __init__(self, site):
        self.site = site
        self._env = Environment(
            loader=FileSystemLoader(str(site.templates_dir)),
            autoescape=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func
        self._env.globals["page_url"] = self._page_url

    def get(self, page) -> str:
        """Return the rendered text of a page, rendering it if not cached."""
        if page.rendered_content is None:
            page.rendered_content = self._render(page)
        return page.rendered_content

    def render(self, page) -> bytes:
        return self.get(page).encode("utf-8")

    def _render(self, page) -> str:
        data = page.get_page_data()
        logger.debug(f"Rendering page '{page.uri}' (p{page.page_number})")
        try:
            content = self._env.from_string(page.body).render(**data)
            layout = page.get_config_value("layout")
            if layout:
                template = self._env.get_template(self._layout_name(layout))
                content = template.render(**data, content=Markup(content))
        except TemplateError as e:
            raise RenderError(f"Can't render page '{page.uri}': {e}") from e
        return content

    def _page_url(self, uri: str, page_number: int = 1) -> str:
        return self.site.page_url(uri, page_number)

    @staticmethod
    def _layout_name(layout: str) -> str:
        return layout if "." in layout else layout + LAYOUT_EXTENSION
