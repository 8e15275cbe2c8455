"""Pattern compilation: pattern string → sequence of literal and directive tokens.

Scanning is left to right with no backtracking:

* ``'...'`` is a quoted literal run when a closing quote follows; the quotes
  are not emitted, so ``''`` is an empty run. An unterminated quote is plain text.
* Otherwise the longest directive codeword at the current position wins
  (``YYYY`` before ``YY``, ``MMMM`` before ``MMM`` before ``MM`` before ``M``).
* Any other character is literal text; adjacent characters merge into one
  literal token.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Directive(StrEnum):
    YEAR_FULL = "YYYY"
    YEAR_SHORT = "YY"
    MONTH_NAME = "MMMM"
    MONTH_NAME_SHORT = "MMM"
    MONTH_PADDED = "MM"
    MONTH = "M"
    WEEKDAY_NAME = "DDD"
    DAY_PADDED = "DD"
    WEEKDAY_MINIMAL = "D"
    WEEKDAY_ABBREV = "dd"
    DAY = "d"
    HOUR24_PADDED = "HH"
    HOUR24 = "H"
    HOUR12_PADDED = "hh"
    HOUR12 = "h"
    MINUTE_PADDED = "mm"
    MINUTE = "m"
    SECOND_PADDED = "ss"
    SECOND = "s"
    MILLISECOND = "ff"
    DECISECOND = "f"
    DAY_PERIOD_LOWER = "a"
    DAY_PERIOD_UPPER = "A"
    OFFSET_COMPACT = "ZZ"
    OFFSET = "Z"


# Longest codewords first so the greedy match is a simple ordered scan.
CODEWORDS: tuple[Directive, ...] = tuple(
    sorted(Directive, key=lambda directive: len(directive.value), reverse=True)
)

DAY_OF_MONTH = frozenset({Directive.DAY, Directive.DAY_PADDED})

QUOTE = "'"


@dataclass(frozen=True)
class Literal:
    text: str
    quoted: bool = False


FormatToken = Literal | Directive
CompiledPattern = tuple[FormatToken, ...]


def _match_directive(pattern: str, pos: int) -> Directive | None:
    for directive in CODEWORDS:
        if pattern.startswith(directive.value, pos):
            return directive
    return None


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile *pattern* into an immutable token sequence.

    Pure function of its input, so callers may memoise it freely.
    """
    tokens: list[FormatToken] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            tokens.append(Literal("".join(pending)))
            pending.clear()

    pos = 0
    length = len(pattern)
    while pos < length:
        char = pattern[pos]

        if char == QUOTE:
            close = pattern.find(QUOTE, pos + 1)
            if close != -1:
                flush()
                tokens.append(Literal(pattern[pos + 1:close], quoted=True))
                pos = close + 1
                continue

        directive = _match_directive(pattern, pos)
        if directive is not None:
            flush()
            tokens.append(directive)
            pos += len(directive.value)
            continue

        pending.append(char)
        pos += 1

    flush()
    return tuple(tokens)
