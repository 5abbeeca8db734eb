"""Tests for the JSON bulk file codec."""

import json

import pytest

from contacts.application import decode_contacts, encode_contacts, read_contacts, write_contacts
from contacts.domain import PHONE_NO_MAX, Contact, DecodeError


def test_encode_writes_flat_records():
    data = encode_contacts([Contact("Bogdan", 491234567890, "bogdan@mail.com")])
    assert json.loads(data) == [
        {"name": "Bogdan", "phone_no": 491234567890, "email": "bogdan@mail.com"}
    ]


def test_encode_empty_set():
    assert json.loads(encode_contacts([])) == []


def test_decode_keeps_largest_phone_number():
    body = json.dumps([{"name": "Max", "phone_no": PHONE_NO_MAX, "email": "m@mail.com"}])
    assert decode_contacts(body) == [Contact("Max", PHONE_NO_MAX, "m@mail.com")]


def test_decode_does_not_validate_fields():
    body = json.dumps([{"name": "", "phone_no": 1, "email": "not an email"}])
    assert decode_contacts(body) == [Contact("", 1, "not an email")]


@pytest.mark.parametrize(
    "body",
    [
        "",
        "not json",
        '{"name": "Bogdan", "phone_no": 491234567890, "email": "b@mail.com"}',
        '[{"name": "Bogdan", "email": "b@mail.com"}]',
        '[{"name": "Bogdan", "phone_no": "abc", "email": "b@mail.com"}]',
        '[{"name": "Bogdan", "phone_no": -1, "email": "b@mail.com"}]',
        f'[{{"name": "Bogdan", "phone_no": {PHONE_NO_MAX + 1}, "email": "b@mail.com"}}]',
        '[{"name": "Bogdan", "phone_no": "491234567890", "email": "b@mail.com"}]',
        '[{"name": "Bogdan", "phone_no": true, "email": "b@mail.com"}]',
        '[{"name": "Bogdan", "phone_no": 491234567890.0, "email": "b@mail.com"}]',
        '[{"name": 7, "phone_no": 491234567890, "email": "b@mail.com"}]',
    ],
)
def test_decode_malformed_raises_decode_error(body):
    with pytest.raises(DecodeError):
        decode_contacts(body)


def test_write_overwrites_and_read_returns_same_records(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("previous export that is much longer than the new one " * 10)
    contacts = [
        Contact("Ana", 49123456789, "ana@mail.de"),
        Contact("Bogdan", 491234567890, "bogdan@mail.com"),
    ]

    assert write_contacts(path, contacts) == 2
    assert read_contacts(path) == contacts


def test_read_malformed_file(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("[{]")
    with pytest.raises(DecodeError):
        read_contacts(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_contacts(tmp_path / "missing.json")
