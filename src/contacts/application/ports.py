"""Application ports (interfaces). Implemented by infrastructure adapters."""

from os import PathLike
from typing import Protocol

from contacts.domain import Contact


class ContactsRepository(Protocol):
    """Stores contacts keyed by name. Every backend must behave identically."""

    def add(self, name: str, phone_no_raw: str, email: str) -> None:
        """Validate the fields and upsert the contact. An existing name is overwritten."""
        ...

    def update_email(self, name: str, new_email: str) -> bool:
        """Replace the email. Returns True if updated, False if the name is unknown."""
        ...

    def update_phone(self, name: str, new_phone_no_raw: str) -> bool:
        """Replace the phone number. Returns True if updated, False if the name is unknown."""
        ...

    def delete(self, name: str) -> Contact | None:
        """Remove the contact and return it, or None if there was nothing to remove."""
        ...

    def get(self, name: str) -> Contact | None:
        """Return the contact with the given name, or None."""
        ...

    def list_page(self, page_no: int, page_size: int) -> list[Contact]:
        """Return page `page_no` (zero-based) of contacts sorted by name."""
        ...

    def count(self) -> int:
        """Return the number of stored contacts."""
        ...

    def export_to_json(self, path: str | PathLike[str]) -> None:
        """Write every contact to a JSON file, overwriting it."""
        ...

    def import_from_json(self, path: str | PathLike[str]) -> None:
        """Upsert every contact found in a JSON file. Fields are not validated."""
        ...


def page_bounds(page_no: int, page_size: int) -> tuple[int, int]:
    """Return the (start, stop) slice of a page. Shared by every backend."""
    if page_no < 0 or page_size < 0:
        raise ValueError("page_no and page_size must be non-negative.")
    start = page_no * page_size
    return start, start + page_size
