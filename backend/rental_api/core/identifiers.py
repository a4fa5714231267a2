"""Identifier Parsing — path segments to integer identifiers.

Invariants:
    - Leading ECMAScript whitespace and a single sign are accepted
    - The longest leading run of ASCII digits is the value ("12abc" -> 12)
    - No leading digits -> None (caller maps to 400)
    - Store keys are signed 64-bit; anything outside can never match a row
"""

import re

_JS_WHITESPACE = (
    r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    r"\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_LEADING_INT = re.compile(rf"[{_JS_WHITESPACE}]*([+-]?[0-9]+)")

STORE_KEY_MIN = -(2 ** 63)
STORE_KEY_MAX = 2 ** 63 - 1


def parse_identifier(raw: str | None) -> int | None:
    """Parse a path identifier the way a lenient base-10 integer parser does."""
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def fits_store_key(value: int) -> bool:
    """True if value is representable as a store integer key."""
    return STORE_KEY_MIN <= value <= STORE_KEY_MAX
