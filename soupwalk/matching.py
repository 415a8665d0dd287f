from __future__ import annotations

from typing import Iterable

from .tree import Attribute


def attribute_equals(attr: Attribute, key: str, value: str) -> bool:
    return attr[0] == key and attr[1] == value


def attribute_contains_token(attr: Attribute, key: str, value: str) -> bool:
    """Return ``True`` when ``value`` is one whitespace-separated token of the attribute.

    This is how multi-valued attributes such as ``class="card featured"`` are
    matched: ``featured`` matches, ``feat`` and ``card featured`` do not.
    """

    if attr[0] != key:
        return False
    return value in attr[1].split()


def matches_attributes(attrs: Iterable[Attribute], key: str, value: str, *, strict: bool) -> bool:
    predicate = attribute_equals if strict else attribute_contains_token
    return any(predicate(attr, key, value) for attr in attrs)
