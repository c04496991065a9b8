# services/charset.py
from typing import Optional

from passgen.models.generation import CharsetCategory

LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

DEFAULT_CHARSET = LOWER + UPPER + DIGITS

# Concatenation order matters for reproducibility with a seeded rng.
CATEGORY_CHARSETS = {
    CharsetCategory.UPPERCASE: UPPER,
    CharsetCategory.LOWERCASE: LOWER,
    CharsetCategory.MIXED: LOWER + UPPER,
    CharsetCategory.NUMBERS: DIGITS,
    CharsetCategory.NUMBERS_UPPERCASE: DIGITS + UPPER,
    CharsetCategory.NUMBERS_LOWERCASE: DIGITS + LOWER,
    CharsetCategory.NUMBERS_MIXED: DIGITS + LOWER + UPPER,
}


def resolve_charset(category: Optional[str], include_special: bool = False) -> str:
    """
    Map a category value to the pool of characters passwords are drawn from.

    `random` and unrecognised categories resolve to lowercase + uppercase +
    digits. The special symbols are appended when `include_special` is set,
    whatever the category.
    """
    member = CharsetCategory.lookup(category)
    charset = CATEGORY_CHARSETS.get(member, DEFAULT_CHARSET)
    if include_special:
        charset += SPECIAL
    return charset
