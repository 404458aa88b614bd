"""
Built-in ISO 7064 alphabets.

Position in the string is the character's numeric value, so the order of
each constant matters. All alphabets are uppercase; identifiers are
uppercased before lookup.
"""

from __future__ import annotations

from typing import Dict

NUMERIC = "0123456789"
NUMERIC_WITH_X = "0123456789X"  # MOD 11,2
HEX = "0123456789ABCDEF"
ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHANUMERIC_WITH_STAR = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ*"  # MOD 37,2

# Names accepted by the config file and the CLI --charset option.
BUILTIN_CHARSETS: Dict[str, str] = {
    "numeric": NUMERIC,
    "numeric_x": NUMERIC_WITH_X,
    "hex": HEX,
    "alpha": ALPHA,
    "alphanumeric": ALPHANUMERIC,
    "alphanumeric_star": ALPHANUMERIC_WITH_STAR,
}


def duplicate_characters(charset: str) -> str:
    """Return the characters that occur more than once, in first-seen order."""
    seen: set[str] = set()
    dupes: list[str] = []
    for ch in charset:
        if ch in seen and ch not in dupes:
            dupes.append(ch)
        seen.add(ch)
    return "".join(dupes)


def fold_case(value: str) -> str:
    """
    Uppercase `value` one character at a time, keeping its length.

    Characters whose uppercase form is longer than one character ('ß' -> 'SS',
    'ﬁ' -> 'FI') are left as they are, so they stay outside every alphabet.
    """
    out = []
    for ch in value:
        up = ch.upper()
        out.append(up if len(up) == 1 else ch)
    return "".join(out)
