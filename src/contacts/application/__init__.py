"""Application layer: the repository port and the bulk file codec. Depends only on domain."""

from contacts.application.bulk import (
    ContactRecord,
    decode_contacts,
    encode_contacts,
    read_contacts,
    write_contacts,
)
from contacts.application.ports import ContactsRepository, page_bounds

__all__ = [
    "ContactRecord",
    "ContactsRepository",
    "decode_contacts",
    "encode_contacts",
    "page_bounds",
    "read_contacts",
    "write_contacts",
]
