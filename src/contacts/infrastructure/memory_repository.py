"""In-memory implementation of ContactsRepository (no DB)."""

import bisect
import dataclasses
from os import PathLike

from contacts.application.bulk import read_contacts, write_contacts
from contacts.application.ports import page_bounds
from contacts.domain import Contact, valid_email, valid_name, valid_phone


class InMemoryContactsRepository:
    """Stores contacts in memory. Names are kept sorted so listing needs no extra sort."""

    def __init__(self) -> None:
        self._by_name: dict[str, Contact] = {}
        self._order: list[str] = []  # sorted names, mirrors _by_name keys

    def _put(self, contact: Contact) -> None:
        if contact.name not in self._by_name:
            bisect.insort(self._order, contact.name)
        self._by_name[contact.name] = contact

    def add(self, name: str, phone_no_raw: str, email: str) -> None:
        name = valid_name(name)
        phone_no = valid_phone(phone_no_raw)
        email = valid_email(email)
        self._put(Contact(name=name, phone_no=phone_no, email=email))

    def update_email(self, name: str, new_email: str) -> bool:
        email = valid_email(new_email)
        contact = self._by_name.get(name)
        if contact is None:
            return False
        self._by_name[name] = dataclasses.replace(contact, email=email)
        return True

    def update_phone(self, name: str, new_phone_no_raw: str) -> bool:
        phone_no = valid_phone(new_phone_no_raw)
        contact = self._by_name.get(name)
        if contact is None:
            return False
        self._by_name[name] = dataclasses.replace(contact, phone_no=phone_no)
        return True

    def delete(self, name: str) -> Contact | None:
        contact = self._by_name.pop(name, None)
        if contact is None:
            return None
        del self._order[bisect.bisect_left(self._order, name)]
        return contact

    def get(self, name: str) -> Contact | None:
        return self._by_name.get(name)

    def list_page(self, page_no: int, page_size: int) -> list[Contact]:
        start, stop = page_bounds(page_no, page_size)
        return [self._by_name[name] for name in self._order[start:stop]]

    def count(self) -> int:
        return len(self._by_name)

    def export_to_json(self, path: str | PathLike[str]) -> None:
        write_contacts(path, (self._by_name[name] for name in self._order))

    def import_from_json(self, path: str | PathLike[str]) -> None:
        for contact in read_contacts(path):
            self._put(contact)
