"""Search query parser.

Turns a query typed into a search box into an ordered tuple of `Node`.

Syntax:

- A clause is ``key:value``; values are separated by commas
  (``key:v1,v2,"v 3"``).
- Keys and values holding punctuation or spaces must be quoted. Single quotes
  may appear inside double quotes and the other way around.
- A leading ``-`` negates the clause (``-name:"not this"``).
- A clause without a key is a bare phrase (``"only value"``).
- Clauses are separated by spaces. Repeated keys are kept as separate nodes.
"""

from __future__ import annotations

from QueryParser.core.errors import InternalParseError, ParseError
from QueryParser.core.models import Node, Nodes
from QueryParser.parser.builder import flush_end
from QueryParser.parser.context import ParseContext
from QueryParser.parser.scanner import step
from QueryParser.utils.log import log


def parse(text: str) -> Nodes:
    """Parse a search query.

    Args:
        text: Complete query string.

    Returns:
        Parsed clauses in input order.

    Raises:
        TypeError: If ``text`` is not a string.
        InvalidCharacterError: If a character is not allowed where it appears.
        InternalParseError: If the scanner fails unexpectedly.
    """
    if not isinstance(text, str):
        raise TypeError("query must be a string")

    ctx = ParseContext()
    try:
        for pos, char in enumerate(text):
            step(ctx, char, pos)
        flush_end(ctx)
    except ParseError as e:
        log.debug("Rejected query %r: %s", text, e)
        raise
    except Exception as e:  # noqa: BLE001 - parser boundary
        raise InternalParseError(f"internal parse failure: {e}") from e

    log.debug("Parsed %d nodes from %d characters", len(ctx.nodes), len(text))
    return tuple(ctx.nodes)


__all__ = ["Node", "Nodes", "parse"]
