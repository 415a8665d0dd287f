from __future__ import annotations

from .tree import Document, NodeType


def shallow_text(document: Document, index: int) -> str:
    """Text of ``index`` itself if it is a text node, else of its direct text children."""

    record = document[index]
    if record.type is NodeType.TEXT:
        return record.data
    return "".join(
        document[child].data
        for child in document.iter_children(index)
        if document[child].type is NodeType.TEXT
    )


def full_text(document: Document, index: int) -> str:
    """Concatenate every text node in the subtree, in document order."""

    return "".join(
        document[node].data
        for node in document.iter_subtree(index)
        if document[node].type is NodeType.TEXT
    )
