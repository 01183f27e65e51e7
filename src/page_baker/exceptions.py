"""Custom exceptions for page baking."""


class BakerError(Exception):
    """Base exception for all baking errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigError(BakerError):
    """Raised when a configuration value or file is invalid."""

    pass


class PageNotFoundError(BakerError):
    """Raised when no page source exists for a URI."""

    def __init__(self, uri: str, *args, **kwargs):
        self.uri = uri
        super().__init__(f"No page found for URI '{uri}'", *args, **kwargs)


class RenderError(BakerError):
    """Raised when the template engine fails to render a page."""

    pass


class CopyError(BakerError):
    """Raised when an asset file can't be copied to the output directory."""

    def __init__(self, source: str, destination: str, *args, **kwargs):
        self.source = source
        self.destination = destination
        super().__init__(
            f"Can't copy '{source}' to '{destination}'.", *args, **kwargs
        )


class BakeError(BakerError):
    """Raised when baking a page fails.

    Carries the URI of the page and the page number that was being baked
    when the failure happened.
    """

    def __init__(self, uri: str, page_number: int, cause: Exception, *args, **kwargs):
        self.uri = uri
        self.page_number = page_number
        self.cause = cause
        super().__init__(
            f"Error baking page '{uri}' (p{page_number}): {cause}", *args, **kwargs
        )
