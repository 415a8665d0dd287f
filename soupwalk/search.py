"""Depth-first element search over a :class:`~soupwalk.tree.Document`.

Searches come in two phases. :func:`search_children` is the public entry
point and never tests the node it starts from; it hands each child to
:func:`search_subtree`, which tests every node it visits including its own
root. Children are visited first-to-last, so results are in document order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .errors import ArgumentError, NotFoundError
from .matching import matches_attributes
from .tree import Document, NodeType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchCriteria:
    tag: str
    key: Optional[str] = None
    value: Optional[str] = None
    strict: bool = False

    def __post_init__(self) -> None:
        if (self.key is None) != (self.value is None):
            raise ArgumentError("attribute key and value must be given together")

    @property
    def has_filter(self) -> bool:
        return self.key is not None

    def describe(self) -> str:
        if not self.has_filter:
            return f"`{self.tag}`"
        return f"`{self.tag}` with {self.key}={self.value!r}"


def criteria_from_args(args: Sequence[str], strict: bool = False) -> SearchCriteria:
    """Build criteria from ``(tag,)`` or ``(tag, key, value)``."""

    if len(args) == 0:
        raise ArgumentError("not enough arguments")
    if len(args) == 1:
        return SearchCriteria(tag=args[0], strict=strict)
    if len(args) == 3:
        return SearchCriteria(tag=args[0], key=args[1], value=args[2], strict=strict)
    raise ArgumentError(f"invalid number of arguments: expected 1 or 3, got {len(args)}")


def node_matches(document: Document, index: int, criteria: SearchCriteria) -> bool:
    record = document[index]
    if record.type is not NodeType.ELEMENT or record.data != criteria.tag:
        return False
    if not criteria.has_filter:
        return True
    return matches_attributes(record.attrs, criteria.key, criteria.value, strict=criteria.strict)


def search_subtree(document: Document, index: int, criteria: SearchCriteria) -> Iterator[int]:
    """Yield matching nodes in ``index``'s subtree, ``index`` itself included."""

    for candidate in document.iter_subtree(index):
        if node_matches(document, candidate, criteria):
            yield candidate


def search_children(document: Document, index: int, criteria: SearchCriteria) -> Iterator[int]:
    """Yield matching descendants of ``index``, never ``index`` itself."""

    for child in document.iter_children(index):
        yield from search_subtree(document, child, criteria)


def find_first(document: Document, index: int, criteria: SearchCriteria) -> int:
    for match in search_children(document, index, criteria):
        return match
    logger.debug("No match for %s below node %d", criteria.describe(), index)
    raise NotFoundError(criteria.tag, criteria.key, criteria.value)


def find_all(document: Document, index: int, criteria: SearchCriteria) -> List[int]:
    return list(search_children(document, index, criteria))
