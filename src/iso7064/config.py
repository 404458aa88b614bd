from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple
import yaml
from pydantic import BaseModel, Field, field_validator

from .charsets import BUILTIN_CHARSETS, duplicate_characters
from .schemes import get_scheme

# ---- Defaults used when the CLI gets no --scheme/--charset ----
class Defaults(BaseModel):
    scheme: Optional[str] = None     # registry name, e.g. "mod97-10"; wins over charset
    charset: str = "numeric"         # built-in name or a key of `charsets`
    double_digit: bool = False


# ---- Root config ----
class Iso7064Config(BaseModel):
    defaults: Defaults = Field(default_factory=Defaults)
    charsets: Dict[str, str] = Field(default_factory=dict)  # user-defined alphabets

    @field_validator("charsets")
    @classmethod
    def _alphabets_are_well_formed(cls, value: Dict[str, str]) -> Dict[str, str]:
        for name, charset in value.items():
            if not charset:
                raise ValueError(f"charset {name!r} is empty")
            dupes = duplicate_characters(charset)
            if dupes:
                raise ValueError(f"charset {name!r} repeats characters: {dupes}")
            # identifiers are uppercased before lookup, lowercase entries could never match
            if charset != charset.upper():
                raise ValueError(f"charset {name!r} must be uppercase")
        return value

    def charset_named(self, name: str) -> str:
        if name in self.charsets:
            return self.charsets[name]
        if name in BUILTIN_CHARSETS:
            return BUILTIN_CHARSETS[name]
        known = sorted(set(BUILTIN_CHARSETS) | set(self.charsets))
        raise KeyError(f"Unknown charset: {name}. Available: {', '.join(known)}")

    def resolve_alphabet(self) -> Tuple[str, bool]:
        """Return the (charset, double_digit) pair the defaults select."""
        if self.defaults.scheme:
            scheme = get_scheme(self.defaults.scheme)
            return scheme.charset, scheme.double_digit
        return self.charset_named(self.defaults.charset), self.defaults.double_digit


# ---- Loader ----
def load_config(path: Optional[Path]) -> Iso7064Config:
    if not path:
        return Iso7064Config()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return Iso7064Config.model_validate(data)
