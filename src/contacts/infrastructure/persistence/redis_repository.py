"""Redis implementation of ContactsRepository.
One hash per contact: contacts:<name> -> {phone_no: "<decimal>", email: "<raw>"}.
The name lives only in the key. Redis has no key ordering, so every listing
scans the namespace, rebuilds the contacts and sorts them by name.
"""

import logging
from os import PathLike

import redis
from redis.exceptions import WatchError

from contacts.application.bulk import read_contacts, write_contacts
from contacts.application.ports import page_bounds
from contacts.domain import (
    BackendConsistencyError,
    Contact,
    valid_email,
    valid_name,
    valid_phone,
)

logger = logging.getLogger(__name__)

KEY_PREFIX = "contacts:"
PHONE_NO_FIELD = "phone_no"
EMAIL_FIELD = "email"


def contact_key(name: str) -> str:
    return f"{KEY_PREFIX}{name}"


def _text(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


class RedisContactsRepository:
    """Stores contacts as Redis hashes under the contacts: namespace.
    Commands borrow a connection from the client's pool and return it when done;
    each pipeline holds a single connection until it is reset.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    def add(self, name: str, phone_no_raw: str, email: str) -> None:
        name = valid_name(name)
        phone_no = valid_phone(phone_no_raw)
        email = valid_email(email)
        _write_contact(self._client, Contact(name=name, phone_no=phone_no, email=email))

    def update_email(self, name: str, new_email: str) -> bool:
        email = valid_email(new_email)
        return _update_field(self._client, name, EMAIL_FIELD, email)

    def update_phone(self, name: str, new_phone_no_raw: str) -> bool:
        phone_no = valid_phone(new_phone_no_raw)
        return _update_field(self._client, name, PHONE_NO_FIELD, str(phone_no))

    def delete(self, name: str) -> Contact | None:
        key = contact_key(name)
        with self._client.pipeline() as pipe:
            try:
                pipe.watch(key)
                values = pipe.hgetall(key)
                if not values:
                    return None
                contact = _hash_to_contact(name, values)
                pipe.multi()
                pipe.delete(key)
                (deleted,) = pipe.execute()
            except WatchError as exc:
                raise BackendConsistencyError(
                    f"Contact {name!r} changed while being deleted."
                ) from exc
        if deleted == 0:
            return None
        if deleted != 1:
            logger.warning("DEL %s reported %s deleted keys", key, deleted)
            raise BackendConsistencyError(
                f"Expected to delete 1 key for {name!r}, Redis reported {deleted}."
            )
        return contact

    def get(self, name: str) -> Contact | None:
        values = self._client.hgetall(contact_key(name))
        if not values:
            return None
        return _hash_to_contact(name, values)

    def list_page(self, page_no: int, page_size: int) -> list[Contact]:
        start, stop = page_bounds(page_no, page_size)
        if page_size == 0:
            return []
        return self._load_all()[start:stop]

    def count(self) -> int:
        return len(_scan_keys(self._client))

    def export_to_json(self, path: str | PathLike[str]) -> None:
        write_contacts(path, self._load_all())

    def import_from_json(self, path: str | PathLike[str]) -> None:
        contacts = read_contacts(path)
        for contact in contacts:
            _write_contact(self._client, contact)

    def _load_all(self) -> list[Contact]:
        """Rebuild every stored contact, sorted by name."""
        keys = sorted(_scan_keys(self._client))
        with self._client.pipeline(transaction=False) as pipe:
            for key in keys:
                pipe.hgetall(key)
            rows = pipe.execute()
        contacts = []
        for key, values in zip(keys, rows):
            # Removed by another writer between SCAN and HGETALL.
            if not values:
                continue
            contacts.append(_hash_to_contact(key[len(KEY_PREFIX):], values))
        contacts.sort(key=lambda c: c.name)
        return contacts


def _scan_keys(client: redis.Redis) -> set[str]:
    # SCAN may return a key more than once.
    return {_text(key) for key in client.scan_iter(match=f"{KEY_PREFIX}*")}


def _write_contact(client: redis.Redis, contact: Contact) -> None:
    """Replace the whole hash in one MULTI/EXEC so no stale field survives."""
    key = contact_key(contact.name)
    with client.pipeline() as pipe:
        pipe.delete(key)
        pipe.hset(
            key,
            mapping={PHONE_NO_FIELD: str(contact.phone_no), EMAIL_FIELD: contact.email},
        )
        _, written = pipe.execute()
    if written != 2:
        logger.warning("HSET %s reported %s fields written, expected 2", key, written)
        raise BackendConsistencyError(
            f"Expected to write 2 fields for {contact.name!r}, Redis reported {written}."
        )


def _update_field(client: redis.Redis, name: str, field: str, value: str) -> bool:
    """Set one field of an existing contact. Returns False if the contact does not exist."""
    key = contact_key(name)
    with client.pipeline() as pipe:
        try:
            pipe.watch(key)
            if not pipe.exists(key):
                return False
            pipe.multi()
            pipe.hdel(key, field)
            pipe.hset(key, field, value)
            _, written = pipe.execute()
        except WatchError as exc:
            raise BackendConsistencyError(
                f"Contact {name!r} changed while its {field} was being updated."
            ) from exc
    if written != 1:
        logger.warning("HSET %s %s reported %s fields written, expected 1", key, field, written)
        raise BackendConsistencyError(
            f"Expected to write 1 field for {name!r}, Redis reported {written}."
        )
    return True


def _hash_to_contact(name: str, values: dict) -> Contact:
    fields = {_text(k): _text(v) for k, v in values.items()}
    try:
        phone_no = int(fields[PHONE_NO_FIELD])
        email = fields[EMAIL_FIELD]
    except (KeyError, ValueError) as exc:
        raise BackendConsistencyError(
            f"Stored contact {name!r} is corrupted: {fields!r}"
        ) from exc
    return Contact(name=name, phone_no=phone_no, email=email)
