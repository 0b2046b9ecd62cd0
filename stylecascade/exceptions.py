"""Custom exceptions for stylecascade."""

from typing import Optional


class StyleCascadeError(Exception):
    """Base exception for stylecascade errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class FacetError(StyleCascadeError):
    """Exception raised when a facet token cannot be used in a style key."""

    pass


class MappingError(StyleCascadeError):
    """Exception raised while loading or validating a theme mapping."""

    pass
