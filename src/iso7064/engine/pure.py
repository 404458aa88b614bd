"""
ISO 7064 pure-system check characters.

The weighted sum is evaluated with Horner's rule under the modulus, one
forward pass with a single integer of state:

    p = ((p + value(ch)) * radix) mod modulus      for every character
    p = (p * radix) mod modulus                    once more in double-digit mode
    check = (modulus - p + 1) mod modulus

Add, then multiply, then reduce. Reordering changes the published check
values. A double-digit check value is written as two radix digits.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..charsets import fold_case
from .resolver import InvalidCharacterSet

logger = logging.getLogger(__name__)


def calculate_pure_system_check_digit(
    value: Optional[str],
    radix: int,
    modulus: int,
    charset: str,
    double_digit: bool = False,
) -> Optional[str]:
    """
    Append pure-system check character(s) to `value`.

    Args:
        value:        Identifier to protect. Lowercase letters are uppercased.
        radix:        Radix used inside the recurrence.
        modulus:      Modulus the recurrence is reduced by.
        charset:      Alphabet; position is the character's numeric value.
        double_digit: Append two check characters instead of one.

    Returns:
        The uppercased value followed by its check character(s), or None if
        `value` is empty/None or holds a character outside `charset`.

    Raises:
        InvalidCharacterSet: if the computed check value has no character in
            `charset` (the explicit radix/modulus do not fit the alphabet).
    """
    if not value:
        return None

    value = fold_case(value)
    p = 0
    for ch in value:
        i = charset.find(ch)
        if i == -1:
            logger.debug("character %r not in charset; no check digit", ch)
            return None
        p = ((p + i) * radix) % modulus

    if double_digit:
        p = (p * radix) % modulus

    check = (modulus - p + 1) % modulus

    if double_digit:
        second = check % radix
        first = (check - second) // radix
        digits = [first, second]
    else:
        digits = [check]

    if max(digits) >= len(charset):
        raise InvalidCharacterSet(
            f"check value {check} cannot be written with a {len(charset)}-character set "
            f"(radix={radix}, modulus={modulus})"
        )

    return value + "".join(charset[d] for d in digits)
