"""Index-addressed document tree.

Nodes live in a flat arena owned by :class:`Document`. Every link between
nodes (parent, first/last child, previous/next sibling) is an integer index
into that arena or ``None``, so sibling and child navigation stay O(1) without
handing out references into the tree.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple


class NodeType(Enum):
    DOCUMENT = "document"
    DOCTYPE = "doctype"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


Attribute = Tuple[str, str]


@dataclass
class NodeRecord:
    type: NodeType
    data: str
    attrs: Tuple[Attribute, ...] = ()
    parent: Optional[int] = None
    first_child: Optional[int] = None
    last_child: Optional[int] = None
    prev_sibling: Optional[int] = None
    next_sibling: Optional[int] = None


class Document:
    """Append-only arena of :class:`NodeRecord` entries."""

    def __init__(self) -> None:
        self._nodes: List[NodeRecord] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> NodeRecord:
        return self._nodes[index]

    def append(
        self,
        type: NodeType,
        data: str = "",
        attrs: Sequence[Attribute] = (),
        parent: Optional[int] = None,
    ) -> int:
        """Add a node as the last child of ``parent`` and return its index."""

        index = len(self._nodes)
        record = NodeRecord(
            type=type,
            data=data,
            attrs=tuple((str(key), str(value)) for key, value in attrs) if type is NodeType.ELEMENT else (),
            parent=parent,
        )
        if parent is not None:
            owner = self._nodes[parent]
            if owner.last_child is None:
                owner.first_child = index
            else:
                self._nodes[owner.last_child].next_sibling = index
                record.prev_sibling = owner.last_child
            owner.last_child = index
        self._nodes.append(record)
        return index

    def iter_children(self, index: int) -> Iterator[int]:
        child = self._nodes[index].first_child
        while child is not None:
            yield child
            child = self._nodes[child].next_sibling

    def iter_subtree(self, index: int) -> Iterator[int]:
        """Yield ``index`` and all of its descendants in pre-order."""

        stack = [index]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(list(self.iter_children(current))))
