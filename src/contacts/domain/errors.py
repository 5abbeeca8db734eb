"""Error taxonomy shared by validators, repositories, and the bulk codec."""


class ContactsError(Exception):
    """Base class for every error raised by the contacts package."""


class ContactValidationError(ContactsError, ValueError):
    """A raw field was rejected before any storage access."""


class EmptyName(ContactValidationError):
    def __init__(self) -> None:
        super().__init__("Name cannot be empty.")


class InvalidEmail(ContactValidationError):
    def __init__(self, email: str) -> None:
        super().__init__(f"Email is not valid: {email!r}")
        self.email = email


class InvalidPhoneFormat(ContactValidationError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Phone number is not valid: {raw!r}")
        self.raw = raw


class PhoneOverflow(ContactValidationError):
    """The phone number has the right shape but is not an unsigned 64-bit integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Phone number is not an unsigned 64-bit number: {raw!r}")
        self.raw = raw


class DecodeError(ContactsError, ValueError):
    """A bulk file could not be decoded into contact records."""


class BackendConsistencyError(ContactsError, RuntimeError):
    """The storage backend replied with an unexpected count or a corrupted record."""
