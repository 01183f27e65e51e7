"""Schema definitions for page-baker."""

from .bake import BakeResult, BakerParameters
from .site import BakerSettings, SiteConfigModel, SiteSettings

__all__ = [
    "BakeResult",
    "BakerParameters",
    "BakerSettings",
    "SiteConfigModel",
    "SiteSettings",
]
