"""Markup parsing built on BeautifulSoup.

BeautifulSoup (with the html5lib tree builder) does the parsing; this module
copies its tree into an index-addressed :class:`~soupwalk.tree.Document` and
locates the first real element, skipping the document wrapper and any leading
doctype, comment or whitespace nodes.
"""
from __future__ import annotations

import logging
from typing import Tuple, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Doctype, PageElement, PreformattedString, Tag

from .errors import ParseError
from .node import Node
from .tree import Document, NodeType

logger = logging.getLogger(__name__)

# html5lib builds the full html/head/body shell, so a fragment or several
# top-level elements all end up below a single root element.
DEFAULT_PARSER = "html5lib"


def _classify(element: PageElement) -> NodeType:
    if isinstance(element, BeautifulSoup):
        return NodeType.DOCUMENT
    if isinstance(element, Tag):
        return NodeType.ELEMENT
    if isinstance(element, Doctype):
        return NodeType.DOCTYPE
    if isinstance(element, PreformattedString):
        # comments, CDATA sections, processing instructions, declarations
        return NodeType.COMMENT
    return NodeType.TEXT


def _copy_tree(soup: BeautifulSoup) -> Document:
    document = Document()
    root = document.append(NodeType.DOCUMENT)
    stack = [(child, root) for child in reversed(soup.contents)]
    while stack:
        element, parent = stack.pop()
        node_type = _classify(element)
        if node_type is NodeType.ELEMENT:
            index = document.append(node_type, element.name, list(element.attrs.items()), parent=parent)
            stack.extend((child, index) for child in reversed(element.contents))
        else:
            document.append(node_type, str(element), parent=parent)
    return document


def build_document(markup: Union[str, bytes], parser: str = DEFAULT_PARSER) -> Document:
    """Parse ``markup`` and return the arena; index 0 is the document node."""

    try:
        soup = BeautifulSoup(markup, parser, multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise ParseError("unable to parse the HTML") from exc
    return _copy_tree(soup)


def locate_root(document: Document, index: int = 0) -> int:
    """Follow the first-child/next-sibling chain from ``index`` to the first element."""

    current = index
    while True:
        record = document[current]
        if record.type is NodeType.ELEMENT:
            return current
        following = record.first_child if record.type is NodeType.DOCUMENT else record.next_sibling
        if following is None:
            raise ParseError("unable to parse the HTML: no element found")
        current = following


def parse_document(markup: Union[str, bytes], parser: str = DEFAULT_PARSER) -> Tuple[Document, int]:
    document = build_document(markup, parser=parser)
    return document, locate_root(document)


def html_parse(markup: Union[str, bytes], parser: str = DEFAULT_PARSER) -> Node:
    """Parse ``markup`` and return the first element, or a node carrying a :class:`ParseError`."""

    try:
        document, root = parse_document(markup, parser=parser)
    except ParseError as exc:
        logger.warning("Failed to parse markup: %s", exc)
        return Node.from_error(exc)
    return Node(document, root)
