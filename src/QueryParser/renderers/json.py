"""JSON output renderers.

Renders parsed nodes into JSON-serializable objects and provides
JsonFileWriter for command output, plus a loader for files it wrote.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from QueryParser.core.models import Node, Nodes
from QueryParser.renderers.base import OutputWriter
from QueryParser.utils.log import log


def render_json(nodes: Iterable[Node]) -> list[dict]:
    """Render nodes into JSON-serializable Python objects.

    Args:
        nodes: Parsed clauses.

    Returns:
        One dict per node with ``key``, ``values`` and ``negative``.
    """
    return [
        {
            "key": node.key,
            "values": list(node.values),
            "negative": node.negative,
        }
        for node in nodes
    ]


def load_nodes(data: list[dict]) -> Nodes:
    """Rebuild nodes from the output of `render_json`."""
    return tuple(
        Node(key=item["key"], values=item["values"], negative=bool(item.get("negative", False)))
        for item in data
    )


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []
        self.output_path: Path | None = None

    def write_query_result(self, query: str, nodes: Nodes) -> None:
        """Accumulate query result for later writing."""
        self.all_results.append({"query": query, "nodes": render_json(nodes)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``.

        Nothing is written when no query succeeded.

        Args:
            action: The CLI command name (used in filename).
        """
        if not self.all_results:
            log.debug("No results to write as JSON")
            return
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.output_path = self.output_dir / f"{action}_{timestamp}.json"
        self.output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", self.output_path)


def load_query_results(filepath: str | Path) -> list[tuple[str, Nodes]]:
    """Load ``(query, nodes)`` pairs from a file written by JsonFileWriter.

    Args:
        filepath: Path to the JSON file.

    Returns:
        Results in the order they were written.
    """
    path = Path(filepath)
    data = json.loads(path.read_text(encoding="utf-8"))

    results: list[tuple[str, Nodes]] = []
    for entry in data:
        if not isinstance(entry, dict) or "nodes" not in entry:
            continue
        results.append((entry.get("query", ""), load_nodes(entry["nodes"])))

    log.debug("Loaded %d query results from %s", len(results), path)
    return results
