"""Page assets: lookup for templates and copying into the bake output."""

import logging
import shutil
from pathlib import Path

from .exceptions import CopyError
from .paths import asset_dir_for

logger = logging.getLogger(__name__)

ASSETS_DIR_SUFFIX = "-assets"
DEFAULT_ASSET_URL_BASE = "%site_root%%path%"
COPIED_ASSET_URL_BASE = "%site_root%%uri%"


class Assetor:
    """Exposes the files of a page's asset directory to templates.

    A page at `pages/blog/post.html` owns the files in
    `pages/blog/post-assets/`. Templates get an asset's URL with
    `asset["logo.png"]`, `asset["logo"]` or `asset.logo`.

    URLs are built from a base template with these placeholders:
        %site_root%  the current `site/root` value
        %uri%        the page URI followed by a slash (empty for the root)
        %path%       the asset directory, relative to the site directory
    """

    def __init__(self, page, url_base_template: str | None = None):
        self.page = page
        self.url_base_template = url_base_template or DEFAULT_ASSET_URL_BASE
        source = page.source_path
        self.asset_dir = source.parent / f"{source.stem}{ASSETS_DIR_SUFFIX}"
        self._names: dict[str, str] | None = None

    def __repr__(self) -> str:
        return f"Assetor('{self.asset_dir}')"

    def __getitem__(self, name: str) -> str:
        filename = self._asset_names().get(name)
        if filename is None:
            raise KeyError(f"Page '{self.page.uri}' has no asset '{name}'")
        return self.url_base() + filename

    def __getattr__(self, name: str) -> str:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(str(e)) from e

    def __contains__(self, name: str) -> bool:
        return name in self._asset_names()

    def __iter__(self):
        return iter(sorted(set(self._asset_names().values())))

    def get_asset_pathnames(self) -> list[str] | None:
        """Return the absolute paths of the asset files, or None if there are none."""
        if not self.asset_dir.is_dir():
            return None
        paths = sorted(str(p.resolve()) for p in self.asset_dir.iterdir() if p.is_file())
        return paths or None

    def url_base(self) -> str:
        site = self.page.site
        uri = self.page.uri
        try:
            relative_dir = self.asset_dir.relative_to(site.root_dir).as_posix() + "/"
        except ValueError:
            relative_dir = ""
        return (
            self.url_base_template
            .replace("%site_root%", site.config.get_value("site/root", "/"))
            .replace("%uri%", f"{uri}/" if uri else "")
            .replace("%path%", relative_dir)
        )

    def _asset_names(self) -> dict[str, str]:
        if self._names is None:
            self._names = {}
            for path in self.get_asset_pathnames() or []:
                filename = Path(path).name
                self._names.setdefault(Path(path).stem, filename)
                self._names[filename] = filename
        return self._names


class AssetMaterializer:
    """Copies a page's assets next to its first baked file."""

    def materialize(
        self,
        bake_path: str,
        pretty_urls: bool,
        uri: str,
        asset_paths: list[str] | None,
    ) -> list[str]:
        """Copy asset files into the page's output asset directory.

        Copies are not transactional: when one fails, the files copied
        before it stay on disk.

        Args:
            bake_path: Output path of the page's first baked file
            pretty_urls: Whether the page was baked with pretty URLs
            uri: URI of the page
            asset_paths: Absolute paths of the asset files to copy

        Returns:
            Destination paths of the copied files

        Raises:
            CopyError: If any file can't be copied
        """
        if not asset_paths:
            return []

        asset_dir = asset_dir_for(bake_path, uri, pretty_urls)
        Path(asset_dir).mkdir(parents=True, exist_ok=True)

        copied = []
        for asset_path in asset_paths:
            destination = asset_dir + Path(asset_path).name
            try:
                shutil.copy2(asset_path, destination)
            except OSError as e:
                raise CopyError(asset_path, destination) from e
            copied.append(destination)
            logger.debug(f"Copied asset {asset_path} to {destination}")
        return copied
