"""
Radix/modulus selection for ISO 7064.

ISO 7064 does not give a formula for the double-digit moduli; they are a
fixed table picked for error-detection coverage. The two "special"
single-digit alphabets (11 and 37 characters) carry one extra check-only
character and reduce to an internal radix of 2.
"""

from __future__ import annotations

import logging
from typing import Dict, Final, NamedTuple

logger = logging.getLogger(__name__)

# Double-digit modulus per radix. 251,16 is not part of ISO 7064 itself.
DOUBLE_DIGIT_MODULI: Final[Dict[int, int]] = {
    10: 97,
    16: 251,
    26: 661,
    36: 1271,
}

SUPPORTED_RADICES: Final[frozenset[int]] = frozenset({2, 10, 16, 26, 36})


class InvalidCharacterSet(ValueError):
    """The character set cannot be mapped onto any ISO 7064 scheme."""


class Parameters(NamedTuple):
    radix: int
    modulus: int

    @property
    def is_hybrid(self) -> bool:
        """True when the hybrid (double-add-double) recurrence applies."""
        return self.modulus == self.radix + 1


def resolve_parameters(charset_length: int, double_digit: bool = False) -> Parameters:
    """
    Derive the (radix, modulus) pair for an alphabet size and digit-count mode.

    Args:
        charset_length: Number of characters in the alphabet.
        double_digit:   Whether two check characters are wanted.

    Returns:
        The resolved `Parameters`.

    Raises:
        InvalidCharacterSet: if the resulting radix is not 2, 10, 16, 26 or 36.
            Double-digit mode with an 11- or 37-character alphabet always fails.
    """
    radix = charset_length
    modulus = radix + 1

    if double_digit:
        modulus = DOUBLE_DIGIT_MODULI.get(radix, modulus)
    elif radix == 11:
        # MOD 11,2: digits plus an 'X' check character.
        radix, modulus = 2, 11
    elif radix == 37:
        # MOD 37,2: digits and letters plus a '*' check character.
        radix, modulus = 2, 37

    if radix not in SUPPORTED_RADICES:
        raise InvalidCharacterSet(
            f"Invalid character set: {charset_length} characters "
            f"({'double' if double_digit else 'single'} digit) has no ISO 7064 scheme"
        )

    logger.debug("resolved radix=%d modulus=%d for length=%d double=%s",
                 radix, modulus, charset_length, double_digit)
    return Parameters(radix, modulus)
