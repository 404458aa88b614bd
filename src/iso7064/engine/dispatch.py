"""
Route between the pure and hybrid calculators and verify check digits.

The routing rule is structural: whenever the resolved modulus is exactly
radix + 1 the hybrid recurrence is used, otherwise the pure one. That
includes the plain single-digit schemes (MOD 11,10, MOD 37,36, ...), which
ISO 7064 files under "hybrid", and excludes MOD 11,2 / MOD 37,2 and every
double-digit scheme, which go through the pure calculator.
"""

from __future__ import annotations

from typing import Optional

from ..charsets import fold_case
from .hybrid import calculate_hybrid_system_check_digit
from .pure import calculate_pure_system_check_digit
from .resolver import resolve_parameters


def _calculate(
    value: Optional[str], radix: int, modulus: int, charset: str, double_digit: bool
) -> Optional[str]:
    if modulus != radix + 1:
        return calculate_pure_system_check_digit(value, radix, modulus, charset, double_digit)
    return calculate_hybrid_system_check_digit(value, charset)


def calculate_check_digit(
    value: Optional[str], charset: str, double_digit: bool = False
) -> Optional[str]:
    """
    Append ISO 7064 check character(s) to `value`.

    Returns None for empty input or characters outside `charset`.
    Raises InvalidCharacterSet when `charset` fits no ISO 7064 scheme.
    """
    radix, modulus = resolve_parameters(len(charset), double_digit)
    return _calculate(value, radix, modulus, charset, double_digit)


def verify_check_digit(
    value: Optional[str],
    charset: str,
    double_digit: bool = False,
    *,
    radix: Optional[int] = None,
    modulus: Optional[int] = None,
) -> bool:
    """
    Check that the trailing character(s) of `value` are its ISO 7064 check digit(s).

    The comparison is exact after uppercasing `value`. Malformed input never
    raises: None, values no longer than the check digits, and characters
    outside `charset` all give False.

    Args:
        value:        Candidate identifier including its check character(s).
        charset:      Alphabet the identifier is written in.
        double_digit: Whether `value` ends in two check characters.
        radix, modulus: Explicit parameters; both or neither. When omitted they
            are resolved from `charset` (which may raise InvalidCharacterSet).
    """
    if (radix is None) != (modulus is None):
        raise TypeError("radix and modulus must be given together")
    if radix is None or modulus is None:
        radix, modulus = resolve_parameters(len(charset), double_digit)

    num_digits = 2 if double_digit else 1
    if value is None or len(value) <= num_digits:
        return False

    value = fold_case(value)
    expected = _calculate(value[:-num_digits], radix, modulus, charset, double_digit)
    return expected == value
