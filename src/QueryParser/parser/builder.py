"""Node finalization: value deduplication and emission."""

from __future__ import annotations

from typing import Iterable, Sequence

from QueryParser.core.models import Node
from QueryParser.parser.context import Mode, ParseContext, ScanState


def dedupe_values(values: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence of each.

    Args:
        values: Raw values in input order.

    Returns:
        Values without duplicates, order preserved.
    """
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def build_node(key: str, values: Sequence[str], negative: bool) -> Node | None:
    """Build the node to emit for a finished clause.

    Args:
        key: Clause key, empty for bare phrases.
        values: Raw clause values.
        negative: Negation flag.

    Returns:
        Normalized node, or None when there is nothing to emit.
    """
    unique = dedupe_values(values)
    if not unique:
        return None
    return Node(key=key, values=tuple(unique), negative=negative)


def emit(ctx: ParseContext, key: str, values: Sequence[str]) -> None:
    """Append the finished clause to the context output and start a new one.

    Nodes are never merged: repeated keys yield separate nodes.
    """
    node = build_node(key, values, ctx.negative)
    if node is not None:
        ctx.nodes.append(node)
    ctx.reset_node()


def flush_out(ctx: ParseContext) -> None:
    """Close a clause on a space seen between tokens."""
    if ctx.values:
        emit(ctx, ctx.key, ctx.values)
    elif ctx.key:
        # "a: b" - a key that never received a value stands alone.
        emit(ctx, "", [ctx.key])
    else:
        emit(ctx, ctx.key, ())


def flush_in(ctx: ParseContext) -> None:
    """Close a clause on an unquoted space inside a token."""
    if ctx.mode is Mode.KEY:
        values = [ctx.take_phrase()]
    else:
        values = list(ctx.values)
        if ctx.phrase:
            values.append(ctx.take_phrase())
    emit(ctx, ctx.key, values)
    ctx.phrase.clear()
    ctx.state = ScanState.OUT


def flush_end(ctx: ParseContext) -> None:
    """Close the last clause at end of input."""
    if ctx.phrase:
        ctx.push_value()
    if ctx.values:
        emit(ctx, ctx.key, ctx.values)
