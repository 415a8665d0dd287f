from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict

import yaml

from .parser import DEFAULT_PARSER

DEFAULT_USER_AGENT = "soupwalk/0.1"


@dataclass(frozen=True)
class FetchConfig:
    """Request settings passed explicitly to every fetch."""

    timeout: float = 15
    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)

    def with_header(self, name: str, value: str) -> "FetchConfig":
        return replace(self, headers={**self.headers, name: value})

    def with_cookie(self, name: str, value: str) -> "FetchConfig":
        return replace(self, cookies={**self.cookies, name: value})

    def request_headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        headers.update(self.headers)
        return headers


@dataclass
class SoupConfig:
    """Top-level configuration for fetching and parsing documents."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    parser: str = DEFAULT_PARSER


CONFIG_KEYS = {"parser", "fetch"}


def _read_mapping(path: Path) -> dict:
    with path.open("r", encoding="utf8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: soupwalk config must be a mapping of parser/fetch settings, got {type(data).__name__}")
    unknown = sorted(str(key) for key in data if key not in CONFIG_KEYS)
    if unknown:
        raise ValueError(f"{path}: unknown soupwalk config keys: {', '.join(unknown)}")
    return data


def _string_map(raw: object, name: str) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{name}' must be a mapping")
    return {str(key): str(value) for key, value in raw.items()}


def load_config(path: Path | str) -> SoupConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    raw = _read_mapping(path)
    fetch_data = raw.get("fetch") or {}
    if not isinstance(fetch_data, dict):
        raise ValueError("'fetch' must be a mapping")

    fetch = FetchConfig(
        timeout=float(fetch_data.get("timeout", FetchConfig.timeout)),
        user_agent=str(fetch_data.get("user_agent") or DEFAULT_USER_AGENT),
        headers=_string_map(fetch_data.get("headers"), "headers"),
        cookies=_string_map(fetch_data.get("cookies"), "cookies"),
    )
    return SoupConfig(fetch=fetch, parser=str(raw.get("parser") or DEFAULT_PARSER))


def save_config(config: SoupConfig, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "parser": config.parser,
        "fetch": {
            "timeout": config.fetch.timeout,
            "user_agent": config.fetch.user_agent,
            "headers": dict(config.fetch.headers),
            "cookies": dict(config.fetch.cookies),
        },
    }
    with path.open("w", encoding="utf8") as fh:
        yaml.safe_dump(data, fh, sort_keys=False)
