"""QueryParser: turn search-box queries into structured clauses."""

from __future__ import annotations

from QueryParser.core.errors import (
    InternalParseError,
    InvalidCharacterError,
    ParseError,
)
from QueryParser.core.models import Node, Nodes
from QueryParser.parser import parse

__all__ = [
    "Node",
    "Nodes",
    "ParseError",
    "InvalidCharacterError",
    "InternalParseError",
    "parse",
]
