import re
from typing import List, Sequence

from store.models import CartItem, ContactInfo

# letters and whitespace, with at least one letter
NAME_PATTERN = re.compile(r"[A-Za-z\s]*[A-Za-z][A-Za-z\s]*")
PHONE_PATTERN = re.compile(r"[0-9]{7,}")


def is_valid_name(name: str) -> bool:
    """Letters and whitespace only, at least one letter."""
    return NAME_PATTERN.fullmatch(name or "") is not None


def is_valid_phone(phone: str) -> bool:
    """Digits only, at least seven of them."""
    return PHONE_PATTERN.fullmatch(phone or "") is not None


def invalid_fields(contact: ContactInfo, cart: Sequence[CartItem]) -> List[str]:
    """Names of whatever blocks checkout: "name", "phone" and/or "cart"."""
    problems = []
    if not is_valid_name(contact.name):
        problems.append("name")
    if not is_valid_phone(contact.phone):
        problems.append("phone")
    if not cart:
        problems.append("cart")
    return problems


def can_checkout(contact: ContactInfo, cart: Sequence[CartItem]) -> bool:
    return not invalid_fields(contact, cart)
