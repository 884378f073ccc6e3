"""Console text output renderers."""

from __future__ import annotations

from typing import Iterable

from QueryParser.core.models import Node, Nodes
from QueryParser.renderers.base import OutputWriter
from QueryParser.utils.log import log


def _fmt_node(node: Node) -> str:
    negative = "true" if node.negative else "false"
    return f"{{{node.key} [{' '.join(node.values)}] {negative}}}"


def render_text(nodes: Iterable[Node]) -> str:
    """Render nodes in compact bracket notation.

    Example: ``[{k1 [v1 v2] false} { [phrase] true}]``. The notation is meant
    for reading, not for round-tripping: keys and values are not quoted.

    Args:
        nodes: Parsed clauses.

    Returns:
        One-line representation.
    """
    return "[" + " ".join(_fmt_node(node) for node in nodes) + "]"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_query_result(self, query: str, nodes: Nodes) -> None:
        log.info("query=%s", query)
        log.info("nodes=%s", render_text(nodes))

    def finalize(self, action: str) -> None:
        """No-op for console output."""
