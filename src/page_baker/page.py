"""Page domain object."""

import logging
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from .assets import Assetor
from .pagination_data import Paginator

logger = logging.getLogger(__name__)


class Page:
    """A content page of a site.

    A page is identified by its URI and its current page number. Its source
    file holds YAML front matter (the page configuration) followed by a
    Jinja2 template body.

    Page data is computed lazily by `get_page_data()` and cached until the
    page number changes or the page is unloaded. Every computation bumps
    `data_generation`, so callers can tell when the data was rebuilt.

    Attributes:
        site: The site this page belongs to
        uri: Slash-separated page URI, empty for the site root
        source_path: Path to the page source file
        data_generation: Number of times page data has been computed
        rendered_content: Cached rendered text, set by the renderer
    """

    def __init__(self, site, uri: str, source_path: Path, page_number: int = 1):
        self.site = site
        self.uri = uri.strip("/")
        self.source_path = source_path
        self.data_generation = 0
        self.rendered_content: str | None = None
        self._page_number = 1
        self._config: dict | None = None
        self._body: str | None = None
        self._data: dict | None = None
        self._extra_data: dict = {}
        self._asset_url_base_remap: str | None = None
        self.set_page_number(page_number)

    def __repr__(self) -> str:
        return f"Page('{self.uri}', p{self._page_number})"

    @property
    def page_number(self) -> int:
        return self._page_number

    def set_page_number(self, page_number: int) -> None:
        """Switch the page to another page number.

        This drops the cached page data, the rendered content and any extra
        page data, so they must be set again before the next rendering.
        """
        if page_number < 1:
            raise ValueError(f"Invalid page number: {page_number}")
        self._page_number = page_number
        self._extra_data = {}
        self._data = None
        self.rendered_content = None

    @property
    def is_loaded(self) -> bool:
        return (
            self._config is not None
            or self._data is not None
            or self.rendered_content is not None
        )

    @property
    def config(self) -> dict:
        config, _ = self._ensure_source_loaded()
        return config

    @property
    def body(self) -> str:
        _, body = self._ensure_source_loaded()
        return body

    def get_config_value(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set_extra_page_data(self, data: dict) -> None:
        """Add template data that isn't part of the page itself."""
        self._extra_data = dict(data)
        self._data = None
        self.rendered_content = None

    def set_asset_url_base_remap(self, template: str | None) -> None:
        """Override how asset URLs are built (see `Assetor`)."""
        self._asset_url_base_remap = template
        self._data = None
        self.rendered_content = None

    def get_page_data(self) -> dict:
        """Return the template data for the current page number."""
        if self._data is None:
            self._data = self._compute_page_data()
            self.data_generation += 1
        return self._data

    def unload(self) -> None:
        """Forget everything cached from the source file and from rendering."""
        self._config = None
        self._body = None
        self._data = None
        self.rendered_content = None

    def _compute_page_data(self) -> dict:
        site_config = self.site.config
        items_per_page = self.get_config_value(
            "items_per_page", site_config.get_value("site/items_per_page", 5)
        )
        collection = self.get_config_value("paginate")
        items = self.site.collections.get(collection, []) if collection else []

        data = {
            "page": {
                **self.config,
                "uri": self.uri,
                "page_number": self._page_number,
                "url": self.site.page_url(self.uri, self._page_number),
            },
            "site": site_config.get_value("site", {}),
            "asset": Assetor(self, self._asset_url_base_remap),
            "pagination": Paginator(self, items, items_per_page),
        }
        data.update(self._extra_data)
        return data

    def _ensure_source_loaded(self) -> tuple[dict, str]:
        if self._config is not None and self._body is not None:
            return self._config, self._body
        text = self.source_path.read_text(encoding="utf-8")
        try:
            post = frontmatter.loads(text)
        except (yaml.YAMLError, ValueError) as e:
            logger.warning(f"Invalid front matter in {self.source_path}: {e}")
            self._config, self._body = {}, text
            return self._config, self._body

        if not isinstance(post.metadata, dict):
            logger.warning(f"Front matter of {self.source_path} is not a mapping")
            self._config = {}
        else:
            self._config = dict(post.metadata)
        self._body = post.content
        return self._config, self._body
