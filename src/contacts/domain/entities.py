"""Domain entity: Contact."""

from dataclasses import dataclass

# Largest value a stored phone number may take (unsigned 64-bit).
PHONE_NO_MAX = 2**64 - 1


@dataclass(frozen=True)
class Contact:
    """
    A named entry in the contact book.
    The name is the unique key within a repository; a Contact is immutable once created,
    updates replace the stored value.
    """

    name: str
    phone_no: int
    email: str
