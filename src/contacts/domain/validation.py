"""Field validators for contact names, emails, and phone numbers.

The patterns are fixed policy, compiled once at import. The email pattern is anchored
at the start only, so trailing text after a valid address is accepted. The phone
pattern is searched anywhere in the input; the whole input must then parse as an
unsigned 64-bit integer.
"""

import re

from contacts.domain.entities import PHONE_NO_MAX
from contacts.domain.errors import EmptyName, InvalidEmail, InvalidPhoneFormat, PhoneOverflow

EMAIL_PATTERN = re.compile(
    r"^([a-z0-9_+]([a-z0-9_+.]*[a-z0-9_+])?)@([a-z0-9]+([\-\.]{1}[a-z0-9]+)*\.[a-z]{2,6})"
)
DE_PHONE_NO_PATTERN = re.compile(r"49[0-9]{9,10}")

# What an unsigned integer literal may look like: ASCII digits, optional leading "+".
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def valid_name(name: str) -> str:
    if name == "":
        raise EmptyName()
    return name


def valid_email(email: str) -> str:
    """Return the email unchanged, or raise InvalidEmail. Matching is case-sensitive."""
    if EMAIL_PATTERN.match(email) is None:
        raise InvalidEmail(email)
    return email


def valid_phone(raw: str) -> int:
    """Return the phone number as an int.

    Raises InvalidPhoneFormat when no German-style number (49 + 9 or 10 digits)
    occurs in the input, PhoneOverflow when the input is not an unsigned 64-bit number.
    """
    if DE_PHONE_NO_PATTERN.search(raw) is None:
        raise InvalidPhoneFormat(raw)
    if _UNSIGNED_PATTERN.fullmatch(raw) is None:
        raise PhoneOverflow(raw)
    phone_no = int(raw)
    if phone_no > PHONE_NO_MAX:
        raise PhoneOverflow(raw)
    return phone_no
