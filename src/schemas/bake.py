"""Bake parameter and result schemas."""

from pydantic import BaseModel


class BakerParameters(BaseModel):
    """Options controlling how a PageBaker writes its output.

    Attributes:
        copy_assets: Copy each page's assets next to its first baked file
    """

    copy_assets: bool = False


class BakeResult(BaseModel):
    """Outcome of baking one page and all of its sub-pages.

    Attributes:
        uri: URI of the baked page
        baked_files: Output paths in the order they were written
        pagination_data_accessed: Whether any pass read pagination data
    """

    uri: str
    baked_files: list[str] = []
    pagination_data_accessed: bool = False

    @property
    def page_count(self) -> int:
        return len(self.baked_files)
