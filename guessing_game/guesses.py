from __future__ import annotations

import re

from guessing_game.models import Ordering

# Largest value a guess may take (unsigned 32-bit).
GUESS_MAX = 2**32 - 1

_GUESS_RE = re.compile(r"\+?[0-9]+", re.ASCII)

# Unicode White_Space. str.strip() would also drop the \x1c-\x1f separators.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class GuessParseError(ValueError):
    pass


def parse_guess(text: str) -> int:
    """Parse one raw input line as an unsigned integer guess.

    Surrounding whitespace (including the trailing newline) is trimmed first.
    Accepted: an optional leading `+` and ASCII digits, up to GUESS_MAX.
    Everything else raises GuessParseError: "", "abc", "3.5", "-1", "1_0", " 4 2 ".
    """

    trimmed = text.strip(_WHITESPACE)
    if not _GUESS_RE.fullmatch(trimmed):
        raise GuessParseError(f"Not an unsigned integer: {trimmed!r}")

    value = int(trimmed)
    if value > GUESS_MAX:
        raise GuessParseError(f"Guess out of range: {trimmed!r}")
    return value


def compare(guess: int, secret: int) -> Ordering:
    if guess < secret:
        return Ordering.less
    if guess > secret:
        return Ordering.greater
    return Ordering.equal
