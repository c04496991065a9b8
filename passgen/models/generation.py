# models/generation.py
import re
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel

DEFAULT_COUNT = 5
DEFAULT_LENGTH = 32
DEFAULT_CATEGORY = "numbers-mixed"

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))")


class CharsetCategory(str, Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    MIXED = "mixed"
    NUMBERS = "numbers"
    NUMBERS_UPPERCASE = "numbers-uppercase"
    NUMBERS_LOWERCASE = "numbers-lowercase"
    NUMBERS_MIXED = "numbers-mixed"
    RANDOM = "random"

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["CharsetCategory"]:
        """Return the matching member, or None for unrecognised values."""
        try:
            return cls(value)
        except ValueError:
            return None


def form_value(form: Mapping[str, Any], name: str) -> Optional[str]:
    """
    First submitted value of a form field, or None.

    Repeated fields keep their first occurrence. Uploaded files and other
    non-string values count as missing.
    """
    if hasattr(form, "getlist"):
        values = form.getlist(name)
        value = values[0] if values else None
    else:
        value = form.get(name)
    return value if isinstance(value, str) else None


def parse_int(raw: Any, default: int) -> int:
    """
    Parse the leading integer of a form value.

    "12abc" -> 12, " 7 " -> 7, "0x10" -> 16. Only ASCII digits count.
    Missing, non-numeric and zero values give `default`.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(str(raw))
    if not m:
        return default
    sign, hex_digits, digits = m.groups()
    value = int(hex_digits, 16) if hex_digits else int(digits)
    if sign == "-":
        value = -value
    return value or default


class GenerationRequest(BaseModel):
    count: int = DEFAULT_COUNT
    length: int = DEFAULT_LENGTH
    # Raw submitted value; unrecognised strings are kept so the form can echo them.
    category: str = DEFAULT_CATEGORY
    include_special: bool = False

    @property
    def charset_category(self) -> Optional[CharsetCategory]:
        return CharsetCategory.lookup(self.category)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "GenerationRequest":
        """Build a request from submitted form fields, defaulting anything unusable."""
        return cls(
            count=parse_int(form_value(form, "count"), DEFAULT_COUNT),
            length=parse_int(form_value(form, "length"), DEFAULT_LENGTH),
            category=form_value(form, "category") or DEFAULT_CATEGORY,
            include_special=form_value(form, "special") == "true",
        )

    def fallbacks(self, form: Mapping[str, Any]) -> list[str]:
        """Names of the submitted fields that were replaced by a default."""
        used = []
        if parse_int(form_value(form, "count"), 0) == 0:
            used.append("count")
        if parse_int(form_value(form, "length"), 0) == 0:
            used.append("length")
        if self.charset_category is None:
            used.append("category")
        return used
