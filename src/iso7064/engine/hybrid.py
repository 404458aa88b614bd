"""
ISO 7064 hybrid-system check characters (MOD 11,10 / 17,16 / 27,26 / 37,36).

Double-add-double over a running position in 1..radix:

    pos = radix
    for each character:
        pos += value(ch); if pos > radix: pos -= radix
        pos *= 2;         if pos >= radix + 1: pos -= radix + 1
    check = radix + 1 - pos   (radix maps to 0)

Only additions, comparisons and doubling inside the loop.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..charsets import fold_case

logger = logging.getLogger(__name__)


def calculate_hybrid_system_check_digit(value: Optional[str], charset: str) -> Optional[str]:
    """
    Append a hybrid-system check character to `value`.

    The radix is the length of `charset`; the check character is drawn from
    the same alphabet.

    Returns:
        The uppercased value followed by one check character, or None if
        `value` is empty/None or holds a character outside `charset`.
    """
    if not value:
        return None

    value = fold_case(value)
    radix = len(charset)
    pos = radix

    for ch in value:
        i = charset.find(ch)
        if i == -1:
            logger.debug("character %r not in charset; no check digit", ch)
            return None

        pos += i
        if pos > radix:
            pos -= radix

        pos *= 2
        if pos >= radix + 1:
            pos -= radix + 1

    pos = radix + 1 - pos
    if pos == radix:
        pos = 0

    return value + charset[pos]
