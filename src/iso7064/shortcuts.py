"""
Per-alphabet shortcuts.

Each function binds one of the built-in alphabets and forwards to the
generic operations; no behaviour of its own.

    numeric       MOD 11,10   / MOD 97,10
    hex           MOD 17,16   / MOD 251,16
    alpha         MOD 27,26   / MOD 661,26
    alphanumeric  MOD 37,36   / MOD 1271,36
"""

from __future__ import annotations

from typing import Optional

from .charsets import ALPHA, ALPHANUMERIC, HEX, NUMERIC
from .engine.dispatch import calculate_check_digit, verify_check_digit


def calculate_numeric_check_digit(value: Optional[str], double_digit: bool = False) -> Optional[str]:
    return calculate_check_digit(value, NUMERIC, double_digit)


def verify_numeric_check_digit(value: Optional[str], double_digit: bool = False) -> bool:
    return verify_check_digit(value, NUMERIC, double_digit)


def calculate_hex_check_digit(value: Optional[str], double_digit: bool = False) -> Optional[str]:
    return calculate_check_digit(value, HEX, double_digit)


def verify_hex_check_digit(value: Optional[str], double_digit: bool = False) -> bool:
    return verify_check_digit(value, HEX, double_digit)


def calculate_alpha_check_digit(value: Optional[str], double_digit: bool = False) -> Optional[str]:
    return calculate_check_digit(value, ALPHA, double_digit)


def verify_alpha_check_digit(value: Optional[str], double_digit: bool = False) -> bool:
    return verify_check_digit(value, ALPHA, double_digit)


def calculate_alphanumeric_check_digit(value: Optional[str], double_digit: bool = False) -> Optional[str]:
    return calculate_check_digit(value, ALPHANUMERIC, double_digit)


def verify_alphanumeric_check_digit(value: Optional[str], double_digit: bool = False) -> bool:
    return verify_check_digit(value, ALPHANUMERIC, double_digit)
