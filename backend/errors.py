"""Exception hierarchy for the Netra console."""

from __future__ import annotations


class NetraError(Exception):
    """Base exception for all Netra errors."""


class UnknownPageError(NetraError, ValueError):
    """A page identifier outside the sidebar's fixed set."""

    def __init__(self, page: str) -> None:
        self.page = page
        super().__init__(f"Unknown page: {page!r}")


class InvalidUploadError(NetraError):
    """The uploaded file is not a video."""


class CatalogError(NetraError):
    """The mock catalog file is missing or malformed."""
