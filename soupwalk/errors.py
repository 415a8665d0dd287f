"""Exception taxonomy shared by the query engine and its collaborators."""
from __future__ import annotations

from typing import Optional


class SoupError(Exception):
    """Base class for every error produced by soupwalk."""


class ArgumentError(SoupError):
    """A find call received the wrong number of arguments."""


class NotFoundError(SoupError):
    """A first-match query exhausted the subtree without a match."""

    def __init__(self, tag: str, key: Optional[str] = None, value: Optional[str] = None) -> None:
        self.tag = tag
        self.key = key
        self.value = value
        attributes = " ".join(part for part in (key, value) if part is not None)
        super().__init__(f"element `{tag}` with attributes `{attributes}` not found")


class NavigationError(SoupError):
    """No sibling of the requested kind exists."""


class UpstreamError(SoupError):
    """A fetch or parse collaborator failed."""


class FetchError(UpstreamError):
    pass


class ParseError(UpstreamError):
    pass


class InvalidNodeError(SoupError, RuntimeError):
    """Raised when an error-bearing wrapper is used as if it held a node."""
