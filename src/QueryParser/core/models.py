from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Node:
    """One parsed clause of a search query.

    Attributes:
        key: Clause key. Empty string means a bare phrase without a key.
        values: Clause values in first-occurrence order, without duplicates.
        negative: Whether the clause was prefixed with ``-``.
    """

    key: str
    values: Sequence[str]
    negative: bool = False

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller passed in.
        object.__setattr__(self, "values", tuple(self.values))


Nodes = tuple[Node, ...]
