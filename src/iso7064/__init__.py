"""
ISO 7064 check characters.

Pure and hybrid system calculators, the radix/modulus table that picks
between them, and verification:

    >>> from iso7064 import calculate_check_digit, verify_check_digit, NUMERIC
    >>> calculate_check_digit("794", NUMERIC, double_digit=True)
    '79444'
    >>> verify_check_digit("79444", NUMERIC, double_digit=True)
    True
"""

from .charsets import (
    ALPHA,
    ALPHANUMERIC,
    ALPHANUMERIC_WITH_STAR,
    BUILTIN_CHARSETS,
    HEX,
    NUMERIC,
    NUMERIC_WITH_X,
)
from .engine import (
    BatchResult,
    Finding,
    InvalidCharacterSet,
    Parameters,
    calculate_check_digit,
    calculate_hybrid_system_check_digit,
    calculate_pure_system_check_digit,
    resolve_parameters,
    verify_check_digit,
    verify_many,
    verify_path,
)
from .schemes import Scheme, all_schemes, get_scheme
from .shortcuts import (
    calculate_alpha_check_digit,
    calculate_alphanumeric_check_digit,
    calculate_hex_check_digit,
    calculate_numeric_check_digit,
    verify_alpha_check_digit,
    verify_alphanumeric_check_digit,
    verify_hex_check_digit,
    verify_numeric_check_digit,
)

__version__ = "0.1.0"

__all__ = [
    # Character sets
    "ALPHA",
    "ALPHANUMERIC",
    "ALPHANUMERIC_WITH_STAR",
    "BUILTIN_CHARSETS",
    "HEX",
    "NUMERIC",
    "NUMERIC_WITH_X",
    # Core
    "InvalidCharacterSet",
    "Parameters",
    "calculate_check_digit",
    "calculate_hybrid_system_check_digit",
    "calculate_pure_system_check_digit",
    "resolve_parameters",
    "verify_check_digit",
    # Batch
    "BatchResult",
    "Finding",
    "verify_many",
    "verify_path",
    # Schemes
    "Scheme",
    "all_schemes",
    "get_scheme",
    # Shortcuts
    "calculate_alpha_check_digit",
    "calculate_alphanumeric_check_digit",
    "calculate_hex_check_digit",
    "calculate_numeric_check_digit",
    "verify_alpha_check_digit",
    "verify_alphanumeric_check_digit",
    "verify_hex_check_digit",
    "verify_numeric_check_digit",
]
