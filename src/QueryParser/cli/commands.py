"""Command implementations for QueryParser CLI.

Encapsulates the parse loop, separated from CLI parameter handling and
output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from QueryParser.core.errors import InvalidCharacterError, ParseError
from QueryParser.parser import parse
from QueryParser.renderers import OutputWriter
from QueryParser.utils.log import log


@dataclass(slots=True)
class ParseCommand:
    """Parse a batch of queries and hand each result to the output writer.

    A failing query is logged and skipped; the remaining queries are still
    parsed.
    """

    queries: Sequence[str]
    output_writer: OutputWriter

    def execute(self) -> int:
        """Parse every query.

        Returns:
            Number of queries that failed to parse.
        """
        failures = 0
        multiple = len(self.queries) > 1

        for idx, query in enumerate(self.queries, start=1):
            if multiple:
                log.info("=== Query %d/%d ===", idx, len(self.queries))
            try:
                nodes = parse(query)
            except InvalidCharacterError as e:
                failures += 1
                # Caret lines share the log prefix, so the marker sits under the character.
                log.error("  %s", query)
                log.error("  %s^ %s", " " * e.position, e.reason)
                continue
            except ParseError as e:
                failures += 1
                log.error("Failed to parse %r: %s", query, e)
                continue
            log.debug("Parsed query %d into %d nodes", idx, len(nodes))
            self.output_writer.write_query_result(query, nodes)

        return failures
