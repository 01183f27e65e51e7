"""Site environment: configuration, loaded pages and URL decoration.

Directory structure:
    <site>/
    ├── config.yml          # SiteConfig
    ├── pages/              # page sources (front matter + Jinja2 body)
    │   ├── index.html
    │   ├── blog.html
    │   ├── blog-assets/    # assets of pages/blog.html
    │   └── feed.xml
    ├── templates/          # layouts and includes
    └── data/
        └── posts.yml       # item collection named "posts"
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .config import SiteConfig
from .exceptions import ConfigError, PageNotFoundError
from .page import Page
from .paths import BAKE_INDEX_DOCUMENT, resolve_bake_path, uri_extension

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yml"
DEFAULT_PAGE_EXTENSION = "html"


@dataclass(frozen=True)
class UriDecorators:
    """Builds page URLs for a given site root and URL style.

    Attributes:
        prefix: The site root every URL starts with
        pretty_urls: Whether pages are baked as directory-style URLs
    """

    prefix: str
    pretty_urls: bool

    def page_url(self, uri: str, page_number: int = 1) -> str:
        path = resolve_bake_path("/", uri, page_number, self.pretty_urls)[1:]
        if self.pretty_urls:
            path = path[: -len(BAKE_INDEX_DOCUMENT)].rstrip("/")
        return self.prefix + path


class PageRepository:
    """The pages currently loaded for a site, keyed by URI."""

    def __init__(self):
        self._pages: dict[str, Page] = {}

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, uri: str) -> bool:
        return uri in self._pages

    def add_page(self, page: Page) -> None:
        self._pages[page.uri] = page

    def get_page(self, uri: str) -> Page | None:
        return self._pages.get(uri)

    def get_pages(self) -> list[Page]:
        return list(self._pages.values())


class Site:
    """A site: its configuration, page repository and item collections.

    Attributes:
        root_dir: Site directory
        config: Site configuration store
        repository: Pages loaded so far
        collections: Named item lists that pages can paginate
        decorators_generation: Number of times URI decorators were computed
    """

    def __init__(
        self,
        root_dir: Path,
        config: SiteConfig | None = None,
        collections: dict[str, list] | None = None,
    ):
        self.root_dir = root_dir
        self.config = config or SiteConfig()
        self.repository = PageRepository()
        self.collections = dict(collections or {})
        self.decorators_generation = 0
        self._uri_decorators: UriDecorators | None = None

    def __repr__(self) -> str:
        return f"Site('{self.root_dir}')"

    @property
    def pages_dir(self) -> Path:
        return self.root_dir / "pages"

    @property
    def templates_dir(self) -> Path:
        return self.root_dir / "templates"

    @classmethod
    def from_directory(cls, root_dir: Path) -> "Site":
        """Load a site's configuration and item collections from disk.

        Raises:
            ConfigError: If a configuration or data file is invalid
        """
        config_path = root_dir / CONFIG_FILE_NAME
        config = SiteConfig.from_file(config_path) if config_path.exists() else SiteConfig()

        collections = {}
        data_dir = root_dir / "data"
        if data_dir.is_dir():
            for data_path in sorted(data_dir.glob("*.yml")):
                try:
                    items = yaml.safe_load(data_path.read_text(encoding="utf-8"))
                except yaml.YAMLError as e:
                    raise ConfigError(f"Can't load data file '{data_path}': {e}") from e
                if not isinstance(items, list):
                    raise ConfigError(f"Data file '{data_path}' must contain a list")
                collections[data_path.stem] = items
                logger.debug(f"Loaded {len(items)} items from {data_path}")

        return cls(root_dir, config, collections)

    def get_uri_decorators(self, force: bool = False) -> UriDecorators:
        """Return the cached URI decorators, recomputing them if asked."""
        if self._uri_decorators is None or force:
            self._uri_decorators = UriDecorators(
                prefix=self.config.get_value("site/root", "/"),
                pretty_urls=bool(self.config.get_value("site/pretty_urls", False)),
            )
            self.decorators_generation += 1
        return self._uri_decorators

    def page_url(self, uri: str, page_number: int = 1) -> str:
        return self.get_uri_decorators().page_url(uri, page_number)

    def get_page(self, uri: str) -> Page:
        """Get a page by URI, loading it into the repository if needed.

        Raises:
            PageNotFoundError: If there is no source file for the URI
        """
        uri = uri.strip("/")
        page = self.repository.get_page(uri)
        if page is not None:
            return page

        source_path = self.find_page_source(uri)
        if source_path is None:
            raise PageNotFoundError(uri)
        page = Page(self, uri, source_path)
        self.repository.add_page(page)
        logger.debug(f"Loaded page '{uri}' from {source_path}")
        return page

    def find_page_source(self, uri: str) -> Path | None:
        if not uri:
            candidates = [self.pages_dir / f"index.{DEFAULT_PAGE_EXTENSION}"]
        elif uri_extension(uri):
            candidates = [self.pages_dir / uri]
        else:
            candidates = [
                self.pages_dir / f"{uri}.{DEFAULT_PAGE_EXTENSION}",
                self.pages_dir / uri / f"index.{DEFAULT_PAGE_EXTENSION}",
            ]
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return None
