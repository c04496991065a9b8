# services/password_service.py
import random
import secrets
from typing import List, Optional

from passgen.core.config import get_settings
from passgen.services.charset import resolve_charset


def default_rng():
    """
    Random source used when none is injected.

    The `random` module is not suitable for real credentials; set
    PASSGEN_SECURE_RANDOM to draw from the OS generator instead.
    """
    if get_settings().SECURE_RANDOM:
        return secrets.SystemRandom()
    return random


def generate_password(length: int, charset: str, rng=None) -> str:
    rng = rng or default_rng()
    return "".join(rng.choice(charset) for _ in range(length))


def generate_passwords(
    count: int,
    length: int,
    include_special: bool = False,
    category: Optional[str] = None,
    rng=None,
) -> List[str]:
    """
    Generate `count` passwords of `length` characters each.

    Characters are picked independently and uniformly, with replacement.
    Duplicates across the batch are not filtered out.
    """
    rng = rng or default_rng()
    charset = resolve_charset(category, include_special)
    return [generate_password(length, charset, rng) for _ in range(count)]
