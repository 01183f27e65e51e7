"""Page baker: the public entry point for baking one page to disk."""

import logging

from pydantic import ValidationError

from schemas.bake import BakeResult, BakerParameters

from .driver import PaginationDriver
from .exceptions import BakeError, ConfigError
from .paths import normalize_bake_dir
from .renderer import PageRenderer

logger = logging.getLogger(__name__)


class PageBaker:
    """Bakes pages, including all their paginated sub-pages, into a directory.

    Example:
        site = Site.from_directory(Path("./mysite"))
        baker = PageBaker(Path("./_counter"), {"copy_assets": True})
        result = baker.bake(site.get_page("blog"))
        result.baked_files  # ["./_counter/blog.html", "./_counter/blog/2.html"]

    Attributes:
        bake_dir: Root output directory, with a trailing slash
        parameters: Baker options
    """

    def __init__(
        self,
        bake_dir,
        parameters: BakerParameters | dict | None = None,
        renderer=None,
    ):
        """Initialize the page baker.

        Args:
            bake_dir: Root output directory
            parameters: Baker options (see BakerParameters)
            renderer: Object with a `render(page) -> bytes` method
                (default: a PageRenderer for the baked page's site)

        Raises:
            ConfigError: If the parameters are invalid
        """
        self.bake_dir = normalize_bake_dir(bake_dir)
        if isinstance(parameters, BakerParameters):
            self.parameters = parameters
        else:
            try:
                self.parameters = BakerParameters.model_validate(parameters or {})
            except ValidationError as e:
                raise ConfigError(f"Invalid baker parameters: {e}") from e
        self._renderer = renderer
        self._result: BakeResult | None = None

    @property
    def baked_files(self) -> list[str]:
        """Files written by the last call to `bake()`."""
        return list(self._result.baked_files) if self._result else []

    @property
    def page_count(self) -> int:
        return len(self.baked_files)

    def was_pagination_data_accessed(self) -> bool:
        return bool(self._result and self._result.pagination_data_accessed)

    def bake(self, page, extra_data: dict | None = None) -> BakeResult:
        """Bake a page and its sub-pages.

        Args:
            page: The page to bake
            extra_data: Additional template data for every pass

        Returns:
            BakeResult describing the baked files

        Raises:
            BakeError: If any pass fails; files baked before the failure
                are left on disk
        """
        self._result = BakeResult(uri=page.uri)
        renderer = self._renderer or PageRenderer(page.site)
        driver = PaginationDriver(self.bake_dir, renderer, self.parameters)

        try:
            driver.run(page, extra_data, self._result)
        except Exception as e:
            raise BakeError(page.uri, page.page_number, e) from e

        logger.info(
            f"Baked page '{page.uri}' into {self._result.page_count} file(s)"
        )
        return self._result
