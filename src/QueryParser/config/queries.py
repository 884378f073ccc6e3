"""Configured query strings for batch parsing."""

from __future__ import annotations

from typing import Any, Mapping

from QueryParser.config.common import expect_str_list


def load_queries(raw: Mapping[str, Any]) -> tuple[str, ...]:
    """Load the optional top-level ``queries`` list.

    Blank entries are dropped; the remaining strings are kept verbatim since
    leading and trailing spaces are meaningful to the parser only as clause
    separators.

    Args:
        raw: Root configuration mapping.

    Returns:
        Query strings in configured order (possibly empty).

    Raises:
        TypeError: If ``queries`` is not a list of strings.
    """
    value = raw.get("queries")
    if value is None:
        return ()
    return tuple(query for query in expect_str_list(value, "queries") if query.strip())
