"""Testes do validator de SMS."""

import pytest

from api.validators.sms import MAX_CONTENT_LENGTH, SmsMessageValidator, is_valid_phone_number
from app.constants.discord import FailureReason
from app.protocols.models import SmsMessage

VALID_FROM = "+15550001111"
VALID_TO = "+15550002222"


@pytest.mark.parametrize("number", ["+15550001111", "+5511999998888", "+12345678", "+123456789012345"])
def test_valid_e164_numbers(number: str) -> None:
    assert is_valid_phone_number(number)


@pytest.mark.parametrize(
    "number",
    [
        "",
        "15550001111",
        "+05550001111",
        "+1234567",
        "+1234567890123456",
        "+1555 000 1111",
        "+1555abc1111",
        "+1\u0665\u0665\u0665\u0660\u0660\u0660\u0661\u0661\u0661\u0661",
        "+\uff11\uff15\uff15\uff15\uff10\uff10\uff10\uff11\uff11\uff11\uff11",
    ],
)
def test_invalid_e164_numbers(number: str) -> None:
    assert not is_valid_phone_number(number)


def test_valid_message_has_no_reasons() -> None:
    message = SmsMessage(from_number=VALID_FROM, to_number=VALID_TO, content="Hello World")
    assert SmsMessageValidator().validate(message) == []


def test_all_problems_are_collected_in_order() -> None:
    message = SmsMessage(from_number="abc", to_number="", content="")

    assert SmsMessageValidator().validate(message) == [
        FailureReason.INVALID_TO,
        FailureReason.INVALID_FROM,
        FailureReason.INVALID_CONTENT,
    ]


def test_content_length_limits() -> None:
    validator = SmsMessageValidator()
    at_limit = SmsMessage(VALID_FROM, VALID_TO, "x" * MAX_CONTENT_LENGTH)
    over_limit = SmsMessage(VALID_FROM, VALID_TO, "x" * (MAX_CONTENT_LENGTH + 1))

    assert validator.validate(at_limit) == []
    assert validator.validate(over_limit) == [FailureReason.INVALID_CONTENT]


def test_custom_max_content_length() -> None:
    message = SmsMessage(VALID_FROM, VALID_TO, "123456")
    assert SmsMessageValidator(max_content_length=5).validate(message) == [
        FailureReason.INVALID_CONTENT
    ]
