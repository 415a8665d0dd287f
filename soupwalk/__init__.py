"""Tag and attribute queries over parsed HTML documents."""

from .config import FetchConfig, SoupConfig, load_config, save_config
from .errors import (
    ArgumentError,
    FetchError,
    InvalidNodeError,
    NavigationError,
    NotFoundError,
    ParseError,
    SoupError,
    UpstreamError,
)
from .fetch import fetch_document, get, get_with_session
from .node import Node, NodeList
from .parser import html_parse
from .tree import Document, NodeType

__all__ = [
    "ArgumentError",
    "Document",
    "FetchConfig",
    "FetchError",
    "InvalidNodeError",
    "NavigationError",
    "Node",
    "NodeList",
    "NodeType",
    "NotFoundError",
    "ParseError",
    "SoupConfig",
    "SoupError",
    "UpstreamError",
    "fetch_document",
    "get",
    "get_with_session",
    "html_parse",
    "load_config",
    "save_config",
]
