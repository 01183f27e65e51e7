"""Portable URLs: bake with a site root relative to each output file.

While a page is baked inside the scope, `site/root` holds a relative prefix
such as `../../` so the output tree can be served from any location. Pages
and URI decorators built with the old root are invalidated on the way in,
and the old root is put back on the way out, whether or not baking failed.
"""

import logging
from contextlib import contextmanager

from .paths import normalize_bake_dir, relative_site_root

logger = logging.getLogger(__name__)

SITE_ROOT_KEY = "site/root"


class PortableUrlScope:
    """Temporarily rewrites a site's root to a path relative to a baked file.

    Example:
        scope = PortableUrlScope(site, "/out")
        with scope.applied("/out/blog/post/index.html"):
            # site/root is "../../" here
            contents = renderer.render(page)

    Attributes:
        site: The site whose configuration is rewritten
        bake_dir: Root output directory
    """

    def __init__(self, site, bake_dir):
        self.site = site
        self.bake_dir = normalize_bake_dir(bake_dir)

    def enter(self, bake_path: str) -> str:
        """Switch `site/root` to the relative root for `bake_path`.

        Returns:
            The previous `site/root` value, to pass to `exit()`
        """
        config = self.site.config
        previous_root = config.get_value_unchecked(SITE_ROOT_KEY)
        site_root = relative_site_root(bake_path, self.bake_dir)
        config.set_value(SITE_ROOT_KEY, site_root)
        try:
            # URI decorators cache the site root.
            self.site.get_uri_decorators(force=True)
            # Anything already rendered embeds the old root.
            for page in self.site.repository.get_pages():
                page.unload()
        except BaseException:
            self.exit(previous_root)
            raise
        logger.debug(f"Site root set to '{site_root}' for {bake_path}")
        return previous_root

    def exit(self, previous_root: str) -> None:
        """Restore `site/root` to the value returned by `enter()`."""
        self.site.config.set_value(SITE_ROOT_KEY, previous_root)
        self.site.get_uri_decorators(force=True)

    @contextmanager
    def applied(self, bake_path: str):
        """Run the enclosed block with the relative root, yielding that root."""
        previous_root = self.enter(bake_path)
        try:
            yield self.site.config.get_value(SITE_ROOT_KEY)
        finally:
            self.exit(previous_root)
