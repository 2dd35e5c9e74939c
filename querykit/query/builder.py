# querykit/query/builder.py
"""
Query string construction from key/value data.

Two entry points, one per source shape:
- build_query: single-valued mapping (key -> value)
- build_multi_query: multi-valued mapping (key -> values), including
  multi-dicts such as starlette's QueryParams / FormData

Blank keys and values (None, empty, whitespace-only) are dropped silently.
Values are escaped with JavaScript string-literal rules, keys are kept verbatim.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from querykit.query.escaping import javascript_string_encode
from querykit.query.exceptions import InvalidArgumentError


# str.isspace() accepts the information separators U+001C-U+001F;
# they are control characters here and get escaped, not dropped.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return all(c.isspace() and c not in _NOT_WHITESPACE for c in str(value))


def _format_entry(key: Any, value: Any, key_value_separator: str) -> str:
    return f"{key}{key_value_separator}{javascript_string_encode(str(value))}"


def _finish(entries: Iterable[str], pair_separator: str, include_prefix: bool) -> str:
    query = pair_separator.join(entries)

    if _is_blank(query):
        return ""

    return f"?{query}" if include_prefix else query


def _values_for(source: Mapping, key: Any) -> Iterable[Any]:
    """All values stored under key, whatever the multi-valued shape."""
    getlist = getattr(source, "getlist", None)
    values = getlist(key) if callable(getlist) else source[key]

    if values is None:
        return ()
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return (values,)
    return values


def _multi_entries(source: Mapping, key_value_separator: str) -> Iterator[str]:
    # dict.fromkeys: multi-dicts may repeat a key, visit each one once
    for key in dict.fromkeys(source.keys()):
        if _is_blank(key):
            continue
        for value in _values_for(source, key):
            if not _is_blank(value):
                yield _format_entry(key, value, key_value_separator)


def build_query(
    source: Mapping[str, str | None],
    pair_separator: str = "&",
    key_value_separator: str = "=",
    include_prefix: bool = True,
) -> str:
    """
    Build a query string from a single-valued mapping.

    Args:
        source: key -> value mapping, iterated in its own order
        pair_separator: placed between entries
        key_value_separator: placed between a key and its value
        include_prefix: prepend "?" when the result is not empty

    Returns "" when nothing survives filtering, whatever include_prefix says.
    Raises InvalidArgumentError if source is None.
    """
    if source is None:
        raise InvalidArgumentError("source")

    entries = (
        _format_entry(key, value, key_value_separator)
        for key, value in source.items()
        if not _is_blank(key) and not _is_blank(value)
    )
    return _finish(entries, pair_separator, include_prefix)


def build_multi_query(
    source: Mapping[str, Iterable[str] | str | None],
    pair_separator: str = "&",
    key_value_separator: str = "=",
    include_prefix: bool = True,
) -> str:
    """
    Build a query string from a multi-valued mapping.

    Every non-blank value of a key becomes its own entry, so a key can
    appear several times: {"a": ["1", "2"]} -> "?a=1&a=2". Entries are
    ordered by key first, then by value.

    Raises InvalidArgumentError if source is None.
    """
    if source is None:
        raise InvalidArgumentError("source")

    return _finish(_multi_entries(source, key_value_separator), pair_separator, include_prefix)
