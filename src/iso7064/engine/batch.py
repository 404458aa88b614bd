"""
Verify many identifiers at once (a file, a list, stdin lines).

Each non-blank entry becomes a `Finding`. For invalid entries `expected`
holds what the identifier would look like with correct check digit(s),
when the prefix is representable at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..charsets import fold_case
from .dispatch import calculate_check_digit, verify_check_digit

logger = logging.getLogger(__name__)


@dataclass
class Finding:
    line: int
    value: str
    valid: bool
    expected: Optional[str] = None


@dataclass
class BatchResult:
    total: int = 0
    valid: int = 0
    invalid: int = 0
    findings: List[Finding] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.invalid == 0


def verify_many(values: Iterable[str], charset: str, double_digit: bool = False) -> BatchResult:
    """
    Verify every non-blank entry of `values`.

    Surrounding whitespace is stripped; `line` is the 1-based position in
    `values` so it lines up with file line numbers.
    """
    num_digits = 2 if double_digit else 1
    result = BatchResult()

    for lineno, raw in enumerate(values, start=1):
        value = raw.strip()
        if not value:
            continue

        ok = verify_check_digit(value, charset, double_digit)
        expected = None
        if len(value) > num_digits:
            expected = calculate_check_digit(value[:-num_digits], charset, double_digit)

        result.total += 1
        if ok:
            result.valid += 1
        else:
            result.invalid += 1
        result.findings.append(Finding(lineno, fold_case(value), ok, expected))

    logger.debug("verified %d identifiers, %d invalid", result.total, result.invalid)
    return result


def verify_path(path: Path, charset: str, double_digit: bool = False) -> BatchResult:
    """Verify one identifier per line of a text file."""
    text = Path(path).read_text(encoding="utf-8")
    return verify_many(text.splitlines(), charset, double_digit)
