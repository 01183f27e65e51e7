"""Pagination driver: bakes every page number of a page, one pass at a time."""

import logging
from contextlib import nullcontext
from enum import Enum
from pathlib import Path

from schemas.bake import BakeResult, BakerParameters

from .assets import COPIED_ASSET_URL_BASE, AssetMaterializer
from .paths import normalize_bake_dir, resolve_bake_path
from .portable import PortableUrlScope

logger = logging.getLogger(__name__)


class BakeState(Enum):
    RENDERING = "rendering"
    CHECK_CONTINUE = "check_continue"
    DONE = "done"


class PaginationDriver:
    """Bakes a page and its sub-pages.

    Each pass renders the page for its current page number and writes the
    output. After a pass, the page's pagination state decides whether the
    next page number gets baked: that only happens when rendering actually
    read pagination data AND there are more pages. A template that has a
    `pagination` object available but never uses it is not a listing.

    Attributes:
        bake_dir: Root output directory, with a trailing slash
        renderer: Object with a `render(page) -> bytes` method
        parameters: Baker options
        materializer: Copies first-page assets
    """

    def __init__(
        self,
        bake_dir,
        renderer,
        parameters: BakerParameters | None = None,
        materializer: AssetMaterializer | None = None,
    ):
        self.bake_dir = normalize_bake_dir(bake_dir)
        self.renderer = renderer
        self.parameters = parameters or BakerParameters()
        self.materializer = materializer or AssetMaterializer()

    def run(
        self,
        page,
        extra_data: dict | None = None,
        result: BakeResult | None = None,
    ) -> BakeResult:
        """Bake all page numbers of a page, starting at its current one.

        Args:
            page: The page to bake
            extra_data: Template data applied to every pass
            result: Result to fill in; a new one is created if not given

        Returns:
            BakeResult listing the baked files in pass order
        """
        if result is None:
            result = BakeResult(uri=page.uri)

        state = BakeState.RENDERING
        while state is not BakeState.DONE:
            if state is BakeState.RENDERING:
                self._bake_single_page(page, extra_data, result)
                state = BakeState.CHECK_CONTINUE
            else:
                state = self._check_continue(page)
        return result

    def _bake_single_page(self, page, extra_data: dict | None, result: BakeResult) -> None:
        # The page data is rebuilt after every page number change, so the
        # extra data has to be set again on each pass.
        if extra_data:
            page.set_extra_page_data(extra_data)
        if self.parameters.copy_assets:
            page.set_asset_url_base_remap(COPIED_ASSET_URL_BASE)

        site_config = page.site.config
        pretty_urls = bool(
            page.get_config_value(
                "pretty_urls", site_config.get_value("site/pretty_urls", False)
            )
        )
        bake_path = resolve_bake_path(
            self.bake_dir, page.uri, page.page_number, pretty_urls
        )
        logger.debug(f"Baking '{page.uri}' (p{page.page_number}) to {bake_path}")

        if site_config.get_value("baker/portable_urls", False):
            scope = PortableUrlScope(page.site, self.bake_dir).applied(bake_path)
        else:
            scope = nullcontext()

        with scope:
            contents = self.renderer.render(page)
            data = page.get_page_data()

            output_path = Path(bake_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(contents)
            result.baked_files.append(bake_path)

            paginator = data.get("pagination")
            if paginator is not None and paginator.was_pagination_data_accessed():
                result.pagination_data_accessed = True

            if page.page_number == 1 and self.parameters.copy_assets:
                assetor = data.get("asset")
                if assetor is not None:
                    self.materializer.materialize(
                        bake_path,
                        pretty_urls,
                        page.uri,
                        assetor.get_asset_pathnames(),
                    )

    def _check_continue(self, page) -> BakeState:
        paginator = page.get_page_data().get("pagination")
        if paginator is None:
            return BakeState.DONE
        if paginator.was_pagination_data_accessed() and paginator.has_more_pages():
            page.set_page_number(page.page_number + 1)
            logger.debug(f"Page '{page.uri}' has more pages, moving to p{page.page_number}")
            return BakeState.RENDERING
        return BakeState.DONE
