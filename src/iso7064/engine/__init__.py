"""Check-digit engine: parameter resolution, the two calculators, dispatch."""

from .batch import BatchResult, Finding, verify_many, verify_path
from .dispatch import calculate_check_digit, verify_check_digit
from .hybrid import calculate_hybrid_system_check_digit
from .pure import calculate_pure_system_check_digit
from .resolver import (
    DOUBLE_DIGIT_MODULI,
    SUPPORTED_RADICES,
    InvalidCharacterSet,
    Parameters,
    resolve_parameters,
)

__all__ = [
    "BatchResult",
    "Finding",
    "verify_many",
    "verify_path",
    "calculate_check_digit",
    "verify_check_digit",
    "calculate_hybrid_system_check_digit",
    "calculate_pure_system_check_digit",
    "DOUBLE_DIGIT_MODULI",
    "SUPPORTED_RADICES",
    "InvalidCharacterSet",
    "Parameters",
    "resolve_parameters",
]
