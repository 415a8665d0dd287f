"""HTTP retrieval of raw documents."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import SoupConfig
from .errors import FetchError, UpstreamError
from .node import Node
from .parser import parse_document

logger = logging.getLogger(__name__)


def get_with_session(url: str, session: requests.Session, config: Optional[SoupConfig] = None) -> str:
    """Return the body of ``url`` fetched through ``session``.

    Headers, cookies and the timeout come from ``config.fetch``; nothing is
    stored on the session itself. Transport failures and HTTP error statuses
    raise :class:`FetchError`.
    """

    fetch_config = (config or SoupConfig()).fetch
    try:
        response = session.get(
            url,
            headers=fetch_config.request_headers(),
            cookies=dict(fetch_config.cookies),
            timeout=fetch_config.timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        raise FetchError(f"couldn't perform GET request to {url}") from exc
    return response.text


def get(url: str, config: Optional[SoupConfig] = None) -> str:
    with requests.Session() as session:
        return get_with_session(url, session, config)


def fetch_document(url: str, config: Optional[SoupConfig] = None) -> Node:
    """Fetch and parse ``url``; failures come back as an error-bearing node."""

    config = config or SoupConfig()
    try:
        html = get(url, config)
        document, root = parse_document(html, parser=config.parser)
    except UpstreamError as exc:
        return Node.from_error(exc)
    return Node(document, root)
