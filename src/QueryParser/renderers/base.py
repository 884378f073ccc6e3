"""Base classes for output writers.

Separates the parse loop from how results are shown or stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from QueryParser.core.models import Nodes


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query_result(self, query: str, nodes: Nodes) -> None:
        """Write the parse result of a single query.

        Args:
            query: Query string as given.
            nodes: Parsed clauses.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'parse').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query_result(self, query: str, nodes: Nodes) -> None:
        """Send the result to all writers."""
        for writer in self.writers:
            writer.write_query_result(query, nodes)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
