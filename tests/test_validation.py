"""Tests for name, email, and phone number validators."""

import pytest

from contacts.domain import (
    PHONE_NO_MAX,
    ContactValidationError,
    EmptyName,
    InvalidEmail,
    InvalidPhoneFormat,
    PhoneOverflow,
    valid_email,
    valid_name,
    valid_phone,
)


def test_valid_name_accepts_any_non_empty_string():
    assert valid_name("Bogdan") == "Bogdan"
    assert valid_name(" ") == " "
    assert valid_name("名前 with spaces & symbols!") == "名前 with spaces & symbols!"


def test_valid_name_rejects_empty():
    with pytest.raises(EmptyName):
        valid_name("")


@pytest.mark.parametrize(
    "email",
    [
        "bogdan@mail.com",
        "first.last@mail.com",
        "a+tag@sub.domain-name.org",
        "under_score@mail.museum",
        "x@mail.com trailing text is accepted",
    ],
)
def test_valid_email_accepts(email):
    assert valid_email(email) == email


@pytest.mark.parametrize(
    "email",
    [
        "",
        "invalid email",
        "no-at-sign.com",
        ".leading@mail.com",
        "trailing.@mail.com",
        "Bogdan@mail.com",  # case-sensitive
        "bogdan@mail.c",
        "bogdan@mail",
        " bogdan@mail.com",
    ],
)
def test_valid_email_rejects(email):
    with pytest.raises(InvalidEmail):
        valid_email(email)


def test_valid_phone_parses_including_country_code():
    assert valid_phone("491234567890") == 491234567890
    assert valid_phone("49123456789") == 49123456789


@pytest.mark.parametrize(
    "raw", ["", "invalid phone no", "4912345678", "481234567890", "0049 123 456 789"]
)
def test_valid_phone_rejects_wrong_shape(raw):
    with pytest.raises(InvalidPhoneFormat):
        valid_phone(raw)


def test_valid_phone_shape_found_inside_longer_input_must_still_be_a_number():
    with pytest.raises(PhoneOverflow):
        valid_phone("tel:491234567890")
    with pytest.raises(PhoneOverflow):
        valid_phone("491234567890 ")


def test_valid_phone_accepts_leading_plus():
    assert valid_phone("+491234567890") == 491234567890


def test_valid_phone_overflow():
    # 49 + 10 digits somewhere inside, whole string just past the uint64 range
    raw = "49123456789" + "0" * 10
    assert int(raw) > PHONE_NO_MAX
    with pytest.raises(PhoneOverflow):
        valid_phone(raw)


def test_valid_phone_largest_uint64_with_shape_inside():
    # 18446744073709551615 does not contain 49 + 9 digits
    with pytest.raises(InvalidPhoneFormat):
        valid_phone(str(PHONE_NO_MAX))


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        valid_name("")
    assert issubclass(InvalidPhoneFormat, ContactValidationError)
