"""
Named ISO 7064 schemes.

Maps the standard's names ("MOD 97,10", "MOD 37,36", ...) to an alphabet
and a digit-count mode, so callers can pick a scheme by name instead of
passing both. Which calculator a scheme uses is derived from its resolved
parameters, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .charsets import ALPHA, ALPHANUMERIC, ALPHANUMERIC_WITH_STAR, HEX, NUMERIC, NUMERIC_WITH_X
from .engine.dispatch import calculate_check_digit, verify_check_digit
from .engine.resolver import Parameters, resolve_parameters


@dataclass(frozen=True)
class Scheme:
    """
    A named (alphabet, digit-count) pair.

    Attributes:
        name:         Canonical registry key, e.g. 'mod97-10'.
        charset:      Alphabet identifiers and check characters are written in.
        double_digit: Whether two check characters are appended.
        description:  Human-readable summary shown by the CLI.
    """
    name: str
    charset: str
    double_digit: bool
    description: str = ""

    @property
    def parameters(self) -> Parameters:
        return resolve_parameters(len(self.charset), self.double_digit)

    @property
    def family(self) -> str:
        return "hybrid" if self.parameters.is_hybrid else "pure"

    @property
    def check_length(self) -> int:
        return 2 if self.double_digit else 1

    def calculate(self, value: Optional[str]) -> Optional[str]:
        return calculate_check_digit(value, self.charset, self.double_digit)

    def verify(self, value: Optional[str]) -> bool:
        return verify_check_digit(value, self.charset, self.double_digit)


_SCHEMES: Dict[str, Scheme] = {
    s.name: s
    for s in (
        Scheme("mod11-2", NUMERIC_WITH_X, False, "numeric, 'X' check character"),
        Scheme("mod37-2", ALPHANUMERIC_WITH_STAR, False, "alphanumeric, '*' check character"),
        Scheme("mod97-10", NUMERIC, True, "numeric, two check digits"),
        Scheme("mod251-16", HEX, True, "hexadecimal, two check digits (not in ISO 7064)"),
        Scheme("mod661-26", ALPHA, True, "alphabetic, two check letters"),
        Scheme("mod1271-36", ALPHANUMERIC, True, "alphanumeric, two check characters"),
        Scheme("mod11-10", NUMERIC, False, "numeric, one check digit"),
        Scheme("mod17-16", HEX, False, "hexadecimal, one check digit"),
        Scheme("mod27-26", ALPHA, False, "alphabetic, one check letter"),
        Scheme("mod37-36", ALPHANUMERIC, False, "alphanumeric, one check character"),
    )
}


def normalize_name(name: str) -> str:
    """'MOD 97,10' / 'MOD97-10' / 'mod97_10' -> 'mod97-10'."""
    return (
        name.strip()
        .lower()
        .replace(" ", "")
        .replace(",", "-")
        .replace("_", "-")
    )


def get_scheme(name: str) -> Scheme:
    """Look up a scheme by (loosely formatted) name."""
    key = normalize_name(name)
    if key not in _SCHEMES:
        raise KeyError(f"Unknown scheme: {name}. Available: {', '.join(_SCHEMES)}")
    return _SCHEMES[key]


def all_schemes() -> Dict[str, Scheme]:
    """Return a copy of the registry, keyed by canonical name."""
    return dict(_SCHEMES)
