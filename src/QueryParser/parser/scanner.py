"""Character classification and the scanner transition table.

The scanner walks the query one code point at a time. Each code point is
mapped to a `CharClass`, and the pair ``(ScanState, CharClass)`` selects the
handler that mutates the `ParseContext`. Handlers branch on the current mode
and quote themselves, so the table stays small while still covering every
reachable combination.
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Callable, Final

from QueryParser.core.errors import (
    REASON_REPEATED,
    InternalParseError,
    InvalidCharacterError,
)
from QueryParser.parser.builder import flush_in, flush_out
from QueryParser.parser.context import Mode, ParseContext, Quote, ScanState


class CharClass(Enum):
    """Syntactic role of a single code point."""

    DOUBLE_QUOTE = "double_quote"
    SINGLE_QUOTE = "single_quote"
    COMMA = "comma"
    COLON = "colon"
    MINUS = "minus"
    SPACE = "space"
    SPECIAL = "special"
    TEXT = "text"


_SYNTAX_CHARS: Final[dict[str, CharClass]] = {
    '"': CharClass.DOUBLE_QUOTE,
    "'": CharClass.SINGLE_QUOTE,
    ",": CharClass.COMMA,
    ":": CharClass.COLON,
    "-": CharClass.MINUS,
    " ": CharClass.SPACE,
}


def is_special_char(char: str) -> bool:
    """Return whether a code point needs quoting to appear in a token.

    Punctuation, symbols, whitespace and control characters are special.

    Args:
        char: A single code point.

    Returns:
        True when the character is not allowed unquoted.
    """
    category = unicodedata.category(char)
    return category[0] in ("P", "S") or category == "Cc" or char.isspace()


def classify(char: str) -> CharClass:
    """Map a code point to its `CharClass`."""
    syntax = _SYNTAX_CHARS.get(char)
    if syntax is not None:
        return syntax
    if is_special_char(char):
        return CharClass.SPECIAL
    return CharClass.TEXT


Handler = Callable[[ParseContext, str, int], None]


def _ignore(ctx: ParseContext, char: str, pos: int) -> None:
    pass


def _append(ctx: ParseContext, char: str, pos: int) -> None:
    ctx.phrase.append(char)


def _reject(ctx: ParseContext, char: str, pos: int) -> None:
    raise InvalidCharacterError(char, pos)


def _negate(ctx: ParseContext, char: str, pos: int) -> None:
    ctx.negative = True


def _start_token(ctx: ParseContext, char: str, pos: int) -> None:
    ctx.phrase.append(char)
    ctx.state = ScanState.IN


def _open_quote(ctx: ParseContext, char: str, pos: int) -> None:
    ctx.quote = Quote(char)
    ctx.state = ScanState.IN


def _flush_out(ctx: ParseContext, char: str, pos: int) -> None:
    flush_out(ctx)


def _quote_in(ctx: ParseContext, char: str, pos: int) -> None:
    """Handle a quote character met inside a token."""
    if not ctx.quoted:
        ctx.quote = Quote(char)
        if not ctx.phrase:
            return
        # A quote may only follow the separator that ended the previous part.
        last = ctx.phrase[-1]
        if last == ",":
            ctx.mode = Mode.VALUE
            ctx.push_value()
        elif last == ":":
            ctx.mode = Mode.VALUE
        else:
            raise InvalidCharacterError(char, pos)
    elif ctx.quote.value == char:
        if ctx.mode is Mode.VALUE:
            ctx.push_value()
            ctx.state = ScanState.OUT
        ctx.quote = Quote.NONE
    else:
        ctx.phrase.append(char)


def _comma_in(ctx: ParseContext, char: str, pos: int) -> None:
    if ctx.quoted:
        ctx.phrase.append(char)
    elif ctx.mode is Mode.KEY:
        # "a,b" has no key: the first part is already a value.
        ctx.mode = Mode.VALUE
        ctx.push_value()
    else:
        ctx.push_value()
        ctx.state = ScanState.OUT


def _colon_in(ctx: ParseContext, char: str, pos: int) -> None:
    if ctx.quoted:
        ctx.phrase.append(char)
    elif ctx.mode is Mode.KEY:
        ctx.key = ctx.take_phrase()
        ctx.mode = Mode.VALUE
        ctx.state = ScanState.OUT
    else:
        raise InvalidCharacterError(char, pos, REASON_REPEATED)


def _space_in(ctx: ParseContext, char: str, pos: int) -> None:
    if ctx.quoted:
        ctx.phrase.append(char)
    else:
        flush_in(ctx)


def _special_in(ctx: ParseContext, char: str, pos: int) -> None:
    if ctx.quoted:
        ctx.phrase.append(char)
    else:
        raise InvalidCharacterError(char, pos)


_TRANSITIONS: Final[dict[tuple[ScanState, CharClass], Handler]] = {
    (ScanState.OUT, CharClass.DOUBLE_QUOTE): _open_quote,
    (ScanState.OUT, CharClass.SINGLE_QUOTE): _open_quote,
    (ScanState.OUT, CharClass.COMMA): _ignore,
    (ScanState.OUT, CharClass.COLON): _ignore,
    (ScanState.OUT, CharClass.MINUS): _negate,
    (ScanState.OUT, CharClass.SPACE): _flush_out,
    (ScanState.OUT, CharClass.SPECIAL): _reject,
    (ScanState.OUT, CharClass.TEXT): _start_token,
    (ScanState.IN, CharClass.DOUBLE_QUOTE): _quote_in,
    (ScanState.IN, CharClass.SINGLE_QUOTE): _quote_in,
    (ScanState.IN, CharClass.COMMA): _comma_in,
    (ScanState.IN, CharClass.COLON): _colon_in,
    (ScanState.IN, CharClass.MINUS): _append,
    (ScanState.IN, CharClass.SPACE): _space_in,
    (ScanState.IN, CharClass.SPECIAL): _special_in,
    (ScanState.IN, CharClass.TEXT): _append,
}


def step(ctx: ParseContext, char: str, pos: int) -> None:
    """Apply one code point to the parse context.

    Args:
        ctx: Context of the running parse.
        char: Current code point.
        pos: Zero-based code-point offset of ``char``.

    Raises:
        InvalidCharacterError: If ``char`` is not allowed here.
        InternalParseError: If no transition exists for the current state.
    """
    handler = _TRANSITIONS.get((ctx.state, classify(char)))
    if handler is None:
        raise InternalParseError(f"no transition from {ctx.state.name} on {char!r}", pos)
    handler(ctx, char, pos)
