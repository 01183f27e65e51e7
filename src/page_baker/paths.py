"""Output path arithmetic for baked pages.

All functions here are pure: they compute forward-slash paths from a bake
directory, a page URI and a page number, and never touch the file system.

Pretty URLs:
    <bake_dir>/index.html               (uri="", page 1)
    <bake_dir>/blog/post/index.html     (uri="blog/post", page 1)
    <bake_dir>/blog/post/2/index.html   (uri="blog/post", page 2)

Flat URLs:
    <bake_dir>/index.html               (uri="", page 1)
    <bake_dir>/blog/post.html           (uri="blog/post", page 1)
    <bake_dir>/blog/post/3.html         (uri="blog/post", page 3)
    <bake_dir>/feed.xml                 (uri="feed.xml", page 1)
"""

import posixpath

BAKE_INDEX_DOCUMENT = "index.html"
DEFAULT_EXTENSION = "html"


def normalize_bake_dir(bake_dir) -> str:
    """Return the bake directory with forward slashes and one trailing slash.

    Examples:
        >>> normalize_bake_dir("/tmp/out")
        '/tmp/out/'
    """
    return str(bake_dir).replace("\\", "/").rstrip("/") + "/"


def uri_extension(uri: str) -> str:
    """Return the file extension carried by a URI, without the dot.

    Examples:
        >>> uri_extension("feed.xml")
        'xml'
        >>> uri_extension("blog/post")
        ''
    """
    return posixpath.splitext(posixpath.basename(uri))[1].lstrip(".")


def resolve_bake_path(
    bake_dir,
    uri: str,
    page_number: int = 1,
    pretty_urls: bool = False,
    extension: str | None = None,
) -> str:
    """Compute the output file path for one page number of a page.

    Args:
        bake_dir: Root output directory
        uri: Slash-separated page URI, empty for the site root
        page_number: 1-based page number
        pretty_urls: Whether to bake directory-style `index.html` files
        extension: Extension to use for flat URLs when the URI has none

    Returns:
        The output path, always using forward slashes
    """
    bake_dir = normalize_bake_dir(bake_dir)
    uri = uri.strip("/")
    is_sub_page = page_number > 1

    if pretty_urls:
        bake_path = bake_dir + uri + ("/" if uri else "")
        if is_sub_page:
            bake_path += f"{page_number}/"
        return bake_path + BAKE_INDEX_DOCUMENT

    name = uri
    uri_ext = uri_extension(uri)
    if uri_ext:
        name = uri[: -(len(uri_ext) + 1)]
    bake_path = bake_dir + (name if uri else "index")
    if is_sub_page:
        bake_path += f"/{page_number}"
    return f"{bake_path}.{uri_ext or extension or DEFAULT_EXTENSION}"


def asset_dir_for(bake_path: str, uri: str, pretty_urls: bool) -> str:
    """Compute the directory that receives a page's assets.

    With pretty URLs, assets sit next to the page's `index.html`. With flat
    URLs they go in a directory named after the baked file, except for the
    site root whose assets go straight into the bake directory.
    """
    bake_dir = posixpath.dirname(bake_path)
    if pretty_urls or not uri.strip("/"):
        return bake_dir + "/"
    stem = posixpath.splitext(posixpath.basename(bake_path))[0]
    return f"{bake_dir}/{stem}/"


def relative_site_root(bake_path: str, bake_dir) -> str:
    """Compute a site root relative to the directory of a baked file.

    Examples:
        >>> relative_site_root("/out/index.html", "/out")
        './'
        >>> relative_site_root("/out/blog/post/2/index.html", "/out")
        '../../../'
    """
    bake_dir = normalize_bake_dir(bake_dir)
    if not bake_path.startswith(bake_dir):
        raise ValueError(f"'{bake_path}' is not inside '{bake_dir}'")
    depth = bake_path[len(bake_dir):].count("/")
    return "../" * depth if depth else "./"
