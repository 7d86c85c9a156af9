"""Errors surfaced by the widget facade and its collaborators."""

from __future__ import annotations


class GlotError(Exception):
    """Base class for every error raised by glotkit."""

    def __init__(self, message: str, *, path: str | None = None, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.hint = hint

    def __str__(self) -> str:
        out = self.message
        if self.path:
            out = f"{out} ({self.path})"
        if self.hint:
            out = f"{out} Hint: {self.hint}"
        return out


class DataError(GlotError):
    """A structured data file is missing or cannot be parsed."""


class ResourceNotFoundError(GlotError):
    """A requested resource does not exist."""


class AssetNotFoundError(ResourceNotFoundError):
    """An asset is absent from the tier it was looked up in."""


class PageNotFoundError(ResourceNotFoundError):
    """A page is not part of the site or has not been pre-rendered."""


class MisconfiguredWidgetError(GlotError):
    """A widget type cannot be mapped to a widget package."""
