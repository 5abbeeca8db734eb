"""Domain layer: the Contact entity, validators, and errors. No dependencies on outer layers."""

from contacts.domain.entities import PHONE_NO_MAX, Contact
from contacts.domain.errors import (
    BackendConsistencyError,
    ContactsError,
    ContactValidationError,
    DecodeError,
    EmptyName,
    InvalidEmail,
    InvalidPhoneFormat,
    PhoneOverflow,
)
from contacts.domain.validation import valid_email, valid_name, valid_phone

__all__ = [
    "PHONE_NO_MAX",
    "BackendConsistencyError",
    "Contact",
    "ContactValidationError",
    "ContactsError",
    "DecodeError",
    "EmptyName",
    "InvalidEmail",
    "InvalidPhoneFormat",
    "PhoneOverflow",
    "valid_email",
    "valid_name",
    "valid_phone",
]
