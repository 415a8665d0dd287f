"""Node handles returned by every query.

A :class:`Node` either points at one node of a :class:`~soupwalk.tree.Document`
or carries the error that prevented a query from producing one. Query methods
never raise for ordinary misses; they hand back an error-bearing node (or a
:class:`NodeList` with ``error`` set) that the caller checks before use.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from . import navigation, search, text
from .errors import InvalidNodeError, SoupError
from .tree import Document, NodeType


class Node:
    def __init__(
        self,
        document: Optional[Document] = None,
        index: Optional[int] = None,
        error: Optional[SoupError] = None,
    ) -> None:
        self.document = document
        self.index = index
        self.error = error
        self.label = document[index].data if error is None and document is not None else ""

    @classmethod
    def from_error(cls, error: SoupError) -> "Node":
        return cls(error=error)

    def __repr__(self) -> str:
        if self.error is not None:
            return f"<Node error={str(self.error)!r}>"
        return f"<Node {self.type.value} {self.label!r} #{self.index}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self.error is not None or other.error is not None:
            return self is other
        return self.document is other.document and self.index == other.index

    def __hash__(self) -> int:
        if self.error is not None:
            return id(self)
        return hash((id(self.document), self.index))

    # Error handling -------------------------------------------------------
    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "Node":
        """Raise the attached error, if any; otherwise return ``self``."""

        if self.error is not None:
            raise self.error
        return self

    def _require(self) -> Document:
        if self.error is not None or self.document is None or self.index is None:
            raise InvalidNodeError(f"cannot traverse a node that carries an error: {self.error}")
        return self.document

    def _wrap(self, index: int) -> "Node":
        return Node(self.document, index)

    def _wrap_all(self, indices: Iterable[int]) -> "NodeList":
        return NodeList(self._wrap(index) for index in indices)

    def _single(self, query: Callable[[Document, int], int]) -> "Node":
        document = self._require()
        try:
            return self._wrap(query(document, self.index))
        except SoupError as exc:
            return Node.from_error(exc)

    @property
    def type(self) -> NodeType:
        return self._require()[self.index].type

    # Search ---------------------------------------------------------------
    def _find(self, args: tuple, strict: bool) -> "Node":
        document = self._require()
        try:
            criteria = search.criteria_from_args(args, strict=strict)
            return self._wrap(search.find_first(document, self.index, criteria))
        except SoupError as exc:
            return Node.from_error(exc)

    def _find_all(self, args: tuple, strict: bool) -> "NodeList":
        document = self._require()
        try:
            criteria = search.criteria_from_args(args, strict=strict)
        except SoupError as exc:
            return NodeList(error=exc)
        return self._wrap_all(search.find_all(document, self.index, criteria))

    def find(self, *args: str) -> "Node":
        """First descendant element matching ``(tag)`` or ``(tag, key, value)``.

        Attribute values are matched by whitespace-separated token, so
        ``find("div", "class", "row")`` matches ``<div class="row wide">``.
        """

        return self._find(args, strict=False)

    def find_strict(self, *args: str) -> "Node":
        """Like :meth:`find` but the attribute value must match exactly."""

        return self._find(args, strict=True)

    def find_all(self, *args: str) -> "NodeList":
        return self._find_all(args, strict=False)

    def find_all_strict(self, *args: str) -> "NodeList":
        return self._find_all(args, strict=True)

    # Tree navigation ------------------------------------------------------
    def next_sibling(self) -> "Node":
        return self._single(navigation.next_sibling)

    def prev_sibling(self) -> "Node":
        return self._single(navigation.prev_sibling)

    def next_element_sibling(self) -> "Node":
        return self._single(navigation.next_element_sibling)

    def prev_element_sibling(self) -> "Node":
        return self._single(navigation.prev_element_sibling)

    def children(self) -> "NodeList":
        document = self._require()
        return self._wrap_all(navigation.children(document, self.index))

    def attrs(self) -> Optional[Dict[str, str]]:
        document = self._require()
        return navigation.attributes(document, self.index)

    # Text extraction ------------------------------------------------------
    def text(self) -> str:
        document = self._require()
        return text.shallow_text(document, self.index)

    def full_text(self) -> str:
        document = self._require()
        return text.full_text(document, self.index)


class NodeList(list):
    """Ordered query results; ``error`` is set when the query itself was invalid."""

    def __init__(self, nodes: Iterable[Node] = (), error: Optional[SoupError] = None) -> None:
        super().__init__(nodes)
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "NodeList":
        if self.error is not None:
            raise self.error
        return self
