"""Pagination state exposed to page templates."""

import math


class Paginator:
    """Paginates a list of items for one page number of a page.

    Templates read the public properties. Reading any of them records that
    pagination data was accessed, which is how the baker tells a real
    listing page apart from a page that merely has a `pagination` entry in
    its data.

    Attributes:
        page: The page being paginated
        items_per_page: Number of items on each page
    """

    def __init__(self, page, items: list | None = None, items_per_page: int = 5):
        if items_per_page < 1:
            raise ValueError("items_per_page must be at least 1")
        self.page = page
        self.items_per_page = items_per_page
        self._all_items = list(items or [])
        self._page_number = page.page_number
        self._accessed = False

    def __repr__(self) -> str:
        return f"Paginator(uri='{self.page.uri}', page={self._page_number})"

    def was_pagination_data_accessed(self) -> bool:
        return self._accessed

    def has_more_pages(self) -> bool:
        return self._page_number < self._total_pages()

    @property
    def items(self) -> list:
        self._accessed = True
        start = (self._page_number - 1) * self.items_per_page
        return self._all_items[start:start + self.items_per_page]

    @property
    def current_page(self) -> int:
        self._accessed = True
        return self._page_number

    @property
    def total_pages(self) -> int:
        self._accessed = True
        return self._total_pages()

    @property
    def total_item_count(self) -> int:
        self._accessed = True
        return len(self._all_items)

    @property
    def has_more(self) -> bool:
        self._accessed = True
        return self.has_more_pages()

    @property
    def has_previous(self) -> bool:
        self._accessed = True
        return self._page_number > 1

    @property
    def next_page(self) -> int | None:
        self._accessed = True
        return self._page_number + 1 if self.has_more_pages() else None

    @property
    def prev_page(self) -> int | None:
        self._accessed = True
        return self._page_number - 1 if self._page_number > 1 else None

    @property
    def next_page_url(self) -> str | None:
        next_page = self.next_page
        if next_page is None:
            return None
        return self.page.site.page_url(self.page.uri, next_page)

    @property
    def prev_page_url(self) -> str | None:
        prev_page = self.prev_page
        if prev_page is None:
            return None
        return self.page.site.page_url(self.page.uri, prev_page)

    def _total_pages(self) -> int:
        return max(1, math.ceil(len(self._all_items) / self.items_per_page))
