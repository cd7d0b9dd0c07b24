"""Feed query-string parsing.

Feed URLs carry filters in the bracketed style Rack-based sites use::

    departments[]=ministry-of-justice&departments[]=home-office&page=2

``parse_feed_query`` turns that into an ordered mapping where array keys
(``name[]``) hold lists and plain keys hold a single value. A key given
without ``=`` maps to ``None``, which is distinct from an empty string.
"""

from __future__ import annotations

import typing as typ
from urllib.parse import unquote_plus

type ParamValue = str | list[str | None] | None
type FeedParams = dict[str, ParamValue]

_ARRAY_SUFFIX = "[]"


def parse_feed_query(query: str) -> FeedParams:
    """Parse a query string into feed params.

    Repeated plain keys keep the last value; repeated array keys accumulate
    in order. A plain key that follows an array key of the same name replaces
    the list, and vice versa.

    Examples
    --------
    >>> parse_feed_query("topics[]=a&topics[]=b&page=2")
    {'topics': ['a', 'b'], 'page': '2'}
    >>> parse_feed_query("relevant_to_local_government")
    {'relevant_to_local_government': None}

    """
    params: FeedParams = {}
    for pair in query.split("&"):
        if not pair:
            continue
        raw_key, sep, raw_value = pair.partition("=")
        key = unquote_plus(raw_key)
        value = unquote_plus(raw_value) if sep else None

        if key.endswith(_ARRAY_SUFFIX):
            name = key[: -len(_ARRAY_SUFFIX)]
            if not name:
                continue
            existing = params.get(name)
            if isinstance(existing, list):
                existing.append(value)
            else:
                params[name] = [value]
        elif key:
            params[key] = value
    return params


def param_values(params: typ.Mapping[str, ParamValue], key: str) -> list[str]:
    """Return the values of ``key`` as a list, dropping valueless entries."""
    value = params.get(key)
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if item is not None]
    return [value]


def param_present(params: typ.Mapping[str, ParamValue], key: str) -> bool:
    """Return whether ``key`` carries at least one non-blank value."""
    return any(item.strip() for item in param_values(params, key))
