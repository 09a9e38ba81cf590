import secrets
import string
from typing import Callable

from festival.core.errors import IdGenerationError

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

ADMIN_ID_LENGTH = 10
PUBLIC_ID_LENGTH = 6
BOOTH_ID_LENGTH = 12

MAX_ID_ATTEMPTS = 20


def generate_id(length: int) -> str:
    """Random token of ``length`` characters from [A-Za-z0-9]."""
    if length <= 0:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def generate_unique_id(length: int, taken: Callable[[str], bool]) -> str:
    """
    Generate ids until one is not ``taken``.
    Callers hold the store lock so the check and the insert are atomic.
    """
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = generate_id(length)
        if not taken(candidate):
            return candidate
    raise IdGenerationError(f"Could not generate a free id of length {length}.")
