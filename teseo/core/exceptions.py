"""
Custom exceptions for teseo.

Every fallible operation (URL parsing, sitemap file I/O, writing to a text
sink) raises a subclass of TeseoException. Defaulting never raises.
"""

from typing import Any


class TeseoException(Exception):
    """Base exception for all teseo errors."""

    def __init__(
        self,
        error: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class InvalidURLException(TeseoException):
    """The input is not an absolute, parseable URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            error="invalid_url",
            message=f"Invalid URL '{url}': {reason}",
            details={"url": url},
        )


class RenderException(TeseoException):
    """A text sink refused a write (closed stream, I/O error)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="render_failed",
            message=message,
            details=details,
        )


class SitemapException(TeseoException):
    """Base class for sitemap codec errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        error: str = "sitemap_error",
    ):
        super().__init__(
            error=error,
            message=message,
            details={"path": path} if path else None,
        )


class SitemapWriteException(SitemapException):
    """The sitemap could not be encoded or written to its destination."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, path=path, error="sitemap_write_failed")


class SitemapReadException(SitemapException):
    """The sitemap file could not be opened or read."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, path=path, error="sitemap_read_failed")


class SitemapParseException(SitemapException):
    """The sitemap content is not well-formed XML or not a urlset."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, path=path, error="sitemap_parse_failed")
