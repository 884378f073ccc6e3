"""Error types raised by the query parser."""

from __future__ import annotations

REASON_INVALID = "invalid character"
REASON_REPEATED = "cannot appear more than once"


class ParseError(Exception):
    """Base class for every failure reported by ``parse``.

    Attributes:
        position: Zero-based code-point offset of the failure, if known.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidCharacterError(ParseError):
    """A character is not allowed where it appears.

    Attributes:
        char: Offending character.
        position: Zero-based code-point offset in the input.
        reason: Machine-distinguishable reason, one of ``REASON_INVALID`` or
            ``REASON_REPEATED``.
    """

    def __init__(self, char: str, position: int, reason: str = REASON_INVALID) -> None:
        self.char = char
        self.reason = reason
        super().__init__(f'{reason.capitalize()}: "{char}" at position {position}', position)


class InternalParseError(ParseError):
    """The scanner reached a state it has no transition for."""
