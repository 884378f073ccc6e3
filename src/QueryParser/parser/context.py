"""Per-parse mutable state shared by the scanner and the node builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from QueryParser.core.models import Node


class ScanState(Enum):
    """Whether the scanner is between tokens or inside one."""

    OUT = "out"
    IN = "in"


class Mode(Enum):
    """What the current token will become once it is finished."""

    KEY = "key"
    VALUE = "value"


class Quote(Enum):
    """Quote character enclosing the current token."""

    NONE = ""
    SINGLE = "'"
    DOUBLE = '"'


@dataclass(slots=True)
class ParseContext:
    """Accumulator owned by exactly one ``parse`` call.

    Attributes:
        state: Scanner position relative to tokens.
        mode: Key or value accumulation.
        quote: Currently open quote, if any.
        phrase: Code points of the token being scanned.
        values: Completed values of the clause being built.
        key: Completed key of the clause being built.
        negative: Negation flag of the clause being built.
        nodes: Emitted nodes, in input order.
    """

    state: ScanState = ScanState.OUT
    mode: Mode = Mode.KEY
    quote: Quote = Quote.NONE
    phrase: list[str] = field(default_factory=list)
    values: list[str] = field(default_factory=list)
    key: str = ""
    negative: bool = False
    nodes: list[Node] = field(default_factory=list)

    @property
    def quoted(self) -> bool:
        return self.quote is not Quote.NONE

    def take_phrase(self) -> str:
        """Return the accumulated phrase and clear the buffer."""
        text = "".join(self.phrase)
        self.phrase.clear()
        return text

    def push_value(self) -> None:
        """Move the accumulated phrase into the value buffer."""
        self.values.append(self.take_phrase())

    def reset_node(self) -> None:
        """Forget the clause under construction and start a new one."""
        self.key = ""
        self.negative = False
        self.values = []
        self.mode = Mode.KEY
        self.quote = Quote.NONE
