"""
Contacts core: clean-architecture layout.

- domain: the Contact entity, field validators, and the error taxonomy.
- application: the ContactsRepository port and the JSON bulk codec.
- infrastructure: adapters (InMemoryContactsRepository, RedisContactsRepository).
"""

from contacts.application import ContactsRepository
from contacts.domain import (
    BackendConsistencyError,
    Contact,
    ContactsError,
    ContactValidationError,
    DecodeError,
    EmptyName,
    InvalidEmail,
    InvalidPhoneFormat,
    PhoneOverflow,
)
from contacts.infrastructure import InMemoryContactsRepository, RedisContactsRepository

__all__ = [
    "BackendConsistencyError",
    "Contact",
    "ContactValidationError",
    "ContactsError",
    "ContactsRepository",
    "DecodeError",
    "EmptyName",
    "InMemoryContactsRepository",
    "InvalidEmail",
    "InvalidPhoneFormat",
    "PhoneOverflow",
    "RedisContactsRepository",
]
