"""Input validation helpers."""

from core.constants import GiftcardRules


def is_valid_giftcard(value: str) -> bool:
    """A gift card code is made of uppercase letters and digits only.

    ``"ABCDEF"`` and ``"X1Y2Z3"`` pass; ``"ABC12"`` is too short and
    ``"abcdef"`` or ``"ABC DEF"`` contain forbidden characters.
    """
    if not value or len(value) < GiftcardRules.MIN_LENGTH:
        return False
    return all(char.isupper() or char.isdigit() for char in value)


def contains_secret(text: str, secret_code: str) -> bool:
    return secret_code in text
