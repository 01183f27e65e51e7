"""Site configuration schemas.

A site's `config.yml` has two sections:

    site:
      title: My Site
      root: /
      pretty_urls: true
      items_per_page: 5
    baker:
      portable_urls: false
      copy_assets: true

Unknown keys are kept so templates can read them through `site`.
"""

from pydantic import BaseModel, Field, field_validator


class SiteSettings(BaseModel):
    """The `site` section of the configuration.

    Attributes:
        title: Site title exposed to templates
        root: URL prefix of the site, always ending with a slash
        pretty_urls: Bake directory-style URLs
        items_per_page: Default page size for paginated pages
    """

    title: str = ""
    root: str = "/"
    pretty_urls: bool = False
    items_per_page: int = Field(default=5, ge=1)

    model_config = {"extra": "allow"}

    @field_validator("root")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") + "/"


class BakerSettings(BaseModel):
    """The `baker` section of the configuration.

    Attributes:
        portable_urls: Rewrite the site root to a relative path while baking
        copy_assets: Copy page assets next to baked files
    """

    portable_urls: bool = False
    copy_assets: bool = False

    model_config = {"extra": "allow"}


class SiteConfigModel(BaseModel):
    """Complete, validated site configuration."""

    site: SiteSettings = SiteSettings()
    baker: BakerSettings = BakerSettings()

    model_config = {"extra": "allow"}
