from __future__ import annotations

from typing import Dict, List, Optional

from .errors import NavigationError
from .tree import Document, NodeType


def next_sibling(document: Document, index: int) -> int:
    sibling = document[index].next_sibling
    if sibling is None:
        raise NavigationError("no next sibling found")
    return sibling


def prev_sibling(document: Document, index: int) -> int:
    sibling = document[index].prev_sibling
    if sibling is None:
        raise NavigationError("no previous sibling found")
    return sibling


def next_element_sibling(document: Document, index: int) -> int:
    sibling = document[index].next_sibling
    while sibling is not None:
        if document[sibling].type is NodeType.ELEMENT:
            return sibling
        sibling = document[sibling].next_sibling
    raise NavigationError("no next element sibling found")


def prev_element_sibling(document: Document, index: int) -> int:
    sibling = document[index].prev_sibling
    while sibling is not None:
        if document[sibling].type is NodeType.ELEMENT:
            return sibling
        sibling = document[sibling].prev_sibling
    raise NavigationError("no previous element sibling found")


def children(document: Document, index: int) -> List[int]:
    return list(document.iter_children(index))


def attributes(document: Document, index: int) -> Optional[Dict[str, str]]:
    """Return the attribute map of an element, or ``None`` for other node types.

    Duplicate keys keep the last value seen.
    """

    record = document[index]
    if record.type is not NodeType.ELEMENT:
        return None
    return {key: value for key, value in record.attrs}
