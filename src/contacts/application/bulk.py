"""JSON bulk file codec: a flat array of {name, phone_no, email} records."""

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from contacts.domain import PHONE_NO_MAX, Contact, DecodeError

logger = logging.getLogger(__name__)


class ContactRecord(BaseModel):
    """One contact as written to the bulk file. Strict: no coercion between JSON types."""

    model_config = ConfigDict(strict=True)

    name: str
    phone_no: int = Field(ge=0, le=PHONE_NO_MAX)
    email: str


_RECORDS = TypeAdapter(list[ContactRecord])


def encode_contacts(contacts: Iterable[Contact]) -> bytes:
    records = [
        ContactRecord(name=c.name, phone_no=c.phone_no, email=c.email) for c in contacts
    ]
    return _RECORDS.dump_json(records)


def decode_contacts(data: bytes | str) -> list[Contact]:
    """Decode a bulk file body. Raises DecodeError on malformed JSON or records."""
    try:
        records = _RECORDS.validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Malformed contacts file: {exc}") from exc
    return [Contact(name=r.name, phone_no=r.phone_no, email=r.email) for r in records]


def write_contacts(path: str | PathLike[str], contacts: Iterable[Contact]) -> int:
    """Write the record set to path, replacing any existing file. Returns the record count.

    OSError from the filesystem propagates unchanged.
    """
    contacts = list(contacts)
    Path(path).write_bytes(encode_contacts(contacts))
    logger.debug("Exported %d contacts to %s", len(contacts), path)
    return len(contacts)


def read_contacts(path: str | PathLike[str]) -> list[Contact]:
    """Read and decode the record set at path. Raises OSError or DecodeError."""
    contacts = decode_contacts(Path(path).read_bytes())
    logger.debug("Read %d contacts from %s", len(contacts), path)
    return contacts
